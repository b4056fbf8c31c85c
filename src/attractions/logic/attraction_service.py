"""
Business Logic Layer for Attraction Management.

The service is the public face of the attractions package. It forwards each
call to the attraction store unchanged, so callers never depend on how the
store represents its collection. Not-found outcomes travel back as ``None`` or
``False``; translating them into a protocol's conventions is the caller's job.
"""

from typing import List, Optional

from attractions.dal import AttractionStore, get_dal_handler
from attractions.models.attraction import Attraction
from attractions.utils.observability import logger, tracer


class AttractionService:
    """Business logic service for tourist attractions."""

    def __init__(self, store: Optional[AttractionStore] = None):
        """
        Initialize attraction service.

        Args:
            store: Attraction store to delegate to; built from configuration if omitted
        """
        self.store = store if store is not None else get_dal_handler()
        logger.debug('Attraction service initialized', extra={'store': type(self.store).__name__})

    @tracer.capture_method
    def get_attractions(self) -> List[Attraction]:
        """Return all attractions in insertion order."""
        return self.store.get_all()

    @tracer.capture_method
    def get_one_named_attraction(self, name: Optional[str]) -> Optional[Attraction]:
        """
        Find an attraction by its exact name.

        Args:
            name: Attraction name

        Returns:
            Matching attraction, or None if not found
        """
        return self.store.find_by_name(name)

    @tracer.capture_method
    def get_tags(self) -> List[str]:
        """Return the distinct tags used by all attractions."""
        return self.store.distinct_tags()

    @tracer.capture_method
    def get_cities(self) -> List[str]:
        """Return the distinct cities of all attractions."""
        return self.store.distinct_cities()

    @tracer.capture_method
    def add_named_attraction(self, attraction: Attraction) -> Optional[Attraction]:
        """
        Add an attraction. Duplicate names are accepted.

        Args:
            attraction: Attraction to add

        Returns:
            The added attraction, or None if it could not be added
        """
        return self.store.add(attraction)

    @tracer.capture_method
    def update_attraction(self, updated: Optional[Attraction]) -> Optional[Attraction]:
        """
        Replace the attraction that shares the updated record's name.

        Args:
            updated: New attraction data

        Returns:
            The replaced attraction, or None if no attraction matched
        """
        return self.store.update_by_name(updated)

    @tracer.capture_method
    def delete_attraction(self, name: Optional[str]) -> bool:
        """
        Delete attractions by name.

        Args:
            name: Attraction name

        Returns:
            True if anything was deleted, False if nothing matched
        """
        return self.store.delete_by_name(name)

    def health_check(self) -> dict[str, str]:
        """Report the health of the underlying store."""
        return self.store.health_check()
