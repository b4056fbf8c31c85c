"""
Tourist Attractions Service.

An in-memory catalogue of tourist attractions, organised in layers:

- models: Attraction domain model and environment configuration
- dal: attraction stores (data access layer)
- logic: the AttractionService facade exposed to callers
- utils: observability instances and error types
"""

__version__ = "1.0.0"

from attractions.models.attraction import Attraction
from attractions.dal import AttractionStore, get_dal_handler
from attractions.dal.in_memory_handler import InMemoryAttractionStore
from attractions.logic.attraction_service import AttractionService
from attractions.utils.errors import AttractionIndexError, BaseServiceError
from attractions.utils.observability import logger, tracer

__all__ = [
    "Attraction",
    "AttractionStore",
    "InMemoryAttractionStore",
    "AttractionService",
    "AttractionIndexError",
    "BaseServiceError",
    "get_dal_handler",
    "logger",
    "tracer",
]
