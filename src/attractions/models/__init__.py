"""
Service Models Package

This package contains the Pydantic models used throughout the service:
the Attraction domain model and the environment configuration model.
"""

from .attraction import Attraction
from .env_vars import AttractionsEnvVars, get_env_vars

__all__ = [
    "Attraction",
    "AttractionsEnvVars",
    "get_env_vars",
]
