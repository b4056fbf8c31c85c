"""
Centralized observability utilities for the attractions service.

This module provides configured instances of AWS Lambda Powertools for logging
and tracing, shared by the data access and business logic layers. Service
name, log level and tracing come from the validated environment configuration.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.tracing import Tracer

from attractions.models.env_vars import get_env_vars

_env = get_env_vars()

# JSON output format
logger: Logger = Logger(service=_env.POWERTOOLS_SERVICE_NAME, level=_env.LOG_LEVEL)

# Also disabled automatically outside of a Lambda runtime
tracer: Tracer = Tracer(service=_env.POWERTOOLS_SERVICE_NAME, disabled=not _env.tracing_enabled)
