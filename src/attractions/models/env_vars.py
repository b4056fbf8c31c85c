"""
Environment variable models for type-safe configuration.

The attractions service is configured entirely through environment variables,
validated with Pydantic via aws-lambda-env-modeler.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class AttractionsEnvVars(BaseModel):
    """Environment variables for the attractions service."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'tourist-attractions'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Enable/disable X-Ray tracing
    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'true'

    # Load the fixed sample dataset when a store is created
    SEED_ATTRACTIONS: Annotated[str, Field(
        description='Seed new stores with the sample attractions (true/false)',
        pattern=r'^(true|false)$'
    )] = 'true'

    @property
    def tracing_enabled(self) -> bool:
        """Check if X-Ray tracing is enabled."""
        return self.POWERTOOLS_TRACE_DISABLED.lower() == 'false'

    @property
    def seed_enabled(self) -> bool:
        """Check if new stores should be seeded with sample data."""
        return self.SEED_ATTRACTIONS.lower() == 'true'


def get_env_vars() -> AttractionsEnvVars:
    """
    Get typed environment variables for the attractions service.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=AttractionsEnvVars)
