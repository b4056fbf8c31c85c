"""
In-memory implementation of the attraction store.

Records live in an insertion-ordered list owned by the store instance. Every
lookup is a linear scan, which is fine for the small, memory-resident dataset
this service manages. One re-entrant lock guards all mutations and snapshot
reads, so the store is safe to share between request threads.
"""

import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from attractions.dal import BaseAttractionStore
from attractions.dal.seed import SEED_ATTRACTIONS
from attractions.models.attraction import Attraction
from attractions.utils.errors import AttractionIndexError
from attractions.utils.observability import logger, tracer


class InMemoryAttractionStore(BaseAttractionStore):
    """In-memory implementation of the attraction store."""

    def __init__(
        self,
        seed: bool = True,
        initial: Optional[Iterable[Attraction]] = None,
        store_name: str = 'in-memory',
    ) -> None:
        """
        Initialize the in-memory store.

        Args:
            seed: Pre-populate the store with the sample attractions
            initial: Records to load instead of the sample attractions
            store_name: Name identifying the store in logs and health checks
        """
        super().__init__(store_name)
        self._lock = threading.RLock()
        if initial is not None:
            self._attractions: List[Attraction] = list(initial)
        elif seed:
            self._attractions = list(SEED_ATTRACTIONS)
        else:
            self._attractions = []
        logger.debug(f'In-memory attraction store initialized with {len(self._attractions)} records')

    @tracer.capture_method
    def get_all(self) -> List[Attraction]:
        """
        Return a snapshot of all attractions.

        Returns:
            New list of attractions in insertion order
        """
        with self._lock:
            return list(self._attractions)

    @tracer.capture_method
    def find_by_name(self, name: Optional[str]) -> Optional[Attraction]:
        """
        Find the first attraction whose name matches exactly.

        Args:
            name: Attraction name, compared case-sensitively

        Returns:
            Matching attraction, or None if name is empty or nothing matches
        """
        if not name:
            return None

        with self._lock:
            for attraction in self._attractions:
                if attraction.name == name:
                    return attraction

        logger.debug(f'Attraction not found: {name}')
        return None

    @tracer.capture_method
    def add(self, attraction: Attraction) -> Optional[Attraction]:
        """
        Append an attraction to the end of the collection.

        Names are not checked for uniqueness and fields are not validated.

        Args:
            attraction: Attraction to add

        Returns:
            The added attraction, or None if it could not be appended
        """
        if attraction is None:
            logger.warning('Refusing to add an absent attraction')
            return None

        with self._lock:
            self._attractions.append(attraction)
            size = len(self._attractions)

        logger.info(f'Added attraction: {attraction.name}', extra={'attraction_count': size})
        tracer.put_annotation('attraction_added', str(attraction.name))
        return attraction

    @tracer.capture_method
    def update_by_name(self, updated: Optional[Attraction]) -> Optional[Attraction]:
        """
        Replace the first attraction sharing the updated record's name.

        The replacement keeps the position of the record it replaces.

        Args:
            updated: New attraction data, identified by its name

        Returns:
            The replaced attraction, or None if the name is empty or nothing matched
        """
        if updated is None or not updated.name:
            return None

        with self._lock:
            for index, existing in enumerate(self._attractions):
                if existing.name == updated.name:
                    self._attractions[index] = updated
                    logger.info(f'Updated attraction: {updated.name}', extra={'index': index})
                    tracer.put_annotation('attraction_updated', updated.name)
                    return existing

        logger.info(f'Attraction not found for update: {updated.name}')
        return None

    @tracer.capture_method
    def update_by_index(self, index: int, updated: Attraction) -> Attraction:
        """
        Replace the attraction at a position.

        Args:
            index: Zero-based position; negative values are not accepted
            updated: New attraction data

        Returns:
            The replaced attraction

        Raises:
            AttractionIndexError: If index is outside the collection
        """
        with self._lock:
            size = len(self._attractions)
            if not 0 <= index < size:
                error = AttractionIndexError(index, size)
                logger.error(error.message, extra={'error': error.to_dict()})
                raise error

            previous = self._attractions[index]
            self._attractions[index] = updated

        logger.info(f'Replaced attraction at index {index}: {previous.name} -> {updated.name}')
        return previous

    @tracer.capture_method
    def delete_by_name(self, name: Optional[str]) -> bool:
        """
        Remove every attraction with this name.

        Args:
            name: Attraction name, compared case-sensitively

        Returns:
            True if at least one attraction was removed, False otherwise
        """
        if not name:
            return False

        with self._lock:
            remaining = [attraction for attraction in self._attractions if attraction.name != name]
            removed = len(self._attractions) - len(remaining)
            self._attractions[:] = remaining

        if removed:
            logger.info(f'Deleted attraction: {name}', extra={'removed_count': removed})
            tracer.put_annotation('attraction_deleted', name)
            return True

        logger.info(f'Attraction not found for deletion: {name}')
        return False

    @tracer.capture_method
    def distinct_tags(self) -> List[str]:
        """Return every tag across all attractions, first-seen order, no duplicates."""
        with self._lock:
            tags = [
                tag
                for attraction in self._attractions
                for tag in (attraction.tags or ())
            ]
        return _distinct(tags)

    @tracer.capture_method
    def distinct_cities(self) -> List[str]:
        """Return every city across all attractions, first-seen order, no duplicates."""
        with self._lock:
            cities = [attraction.city for attraction in self._attractions]
        return _distinct(cities)

    def count(self) -> int:
        """Return the number of attractions in the collection."""
        with self._lock:
            return len(self._attractions)

    def health_check(self) -> dict[str, str]:
        """
        Report the store's health.

        Returns:
            Dictionary with health check results
        """
        return {
            'status': 'healthy',
            'store': self.store_name,
            'attraction_count': str(self.count()),
            'timestamp': datetime.now(timezone.utc).isoformat()
        }


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    # dict preserves insertion order, so keys keep first occurrence
    return list(dict.fromkeys(value for value in values if value is not None))
