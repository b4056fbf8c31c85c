"""
Business Logic Layer Module.

Coordinates between callers and the data access layer. The attraction
service is a pass-through facade: it adds no rules of its own.
"""

from attractions.logic.attraction_service import AttractionService

__all__ = [
    "AttractionService",
]
