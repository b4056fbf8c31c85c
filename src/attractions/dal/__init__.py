"""
Data Access Layer (DAL) for the attractions service.

This module provides the store interface every attraction store implements,
plus the factory that builds the configured store.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from attractions.models.attraction import Attraction


@runtime_checkable
class AttractionStore(Protocol):
    """Protocol defining the attraction store interface."""

    def get_all(self) -> list[Attraction]:
        """Return a snapshot of all attractions in insertion order."""
        ...

    def find_by_name(self, name: Optional[str]) -> Optional[Attraction]:
        """Return the first attraction with exactly this name."""
        ...

    def add(self, attraction: Attraction) -> Optional[Attraction]:
        """Append an attraction to the collection."""
        ...

    def update_by_name(self, updated: Optional[Attraction]) -> Optional[Attraction]:
        """Replace the first attraction sharing ``updated.name``."""
        ...

    def update_by_index(self, index: int, updated: Attraction) -> Attraction:
        """Replace the attraction at a position."""
        ...

    def delete_by_name(self, name: Optional[str]) -> bool:
        """Remove every attraction with this name."""
        ...

    def distinct_tags(self) -> list[str]:
        """Return unique tags in first-seen order."""
        ...

    def distinct_cities(self) -> list[str]:
        """Return unique cities in first-seen order."""
        ...

    def count(self) -> int:
        """Return the number of attractions."""
        ...

    def health_check(self) -> dict[str, str]:
        """Report the store's health."""
        ...


class BaseAttractionStore(ABC):
    """Abstract base class for attraction store implementations."""

    def __init__(self, store_name: str) -> None:
        """
        Initialize the store.

        Args:
            store_name: Name identifying the store in logs and health checks
        """
        self.store_name = store_name

    @abstractmethod
    def get_all(self) -> list[Attraction]:
        """Return a snapshot of all attractions in insertion order."""
        pass

    @abstractmethod
    def find_by_name(self, name: Optional[str]) -> Optional[Attraction]:
        """Return the first attraction with exactly this name."""
        pass

    @abstractmethod
    def add(self, attraction: Attraction) -> Optional[Attraction]:
        """Append an attraction to the collection."""
        pass

    @abstractmethod
    def update_by_name(self, updated: Optional[Attraction]) -> Optional[Attraction]:
        """Replace the first attraction sharing ``updated.name``."""
        pass

    @abstractmethod
    def update_by_index(self, index: int, updated: Attraction) -> Attraction:
        """Replace the attraction at a position."""
        pass

    @abstractmethod
    def delete_by_name(self, name: Optional[str]) -> bool:
        """Remove every attraction with this name."""
        pass

    @abstractmethod
    def distinct_tags(self) -> list[str]:
        """Return unique tags in first-seen order."""
        pass

    @abstractmethod
    def distinct_cities(self) -> list[str]:
        """Return unique cities in first-seen order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of attractions."""
        pass

    @abstractmethod
    def health_check(self) -> dict[str, str]:
        """Report the store's health."""
        pass


def get_dal_handler(seed: Optional[bool] = None) -> AttractionStore:
    """
    Factory function to get the configured attraction store.

    Args:
        seed: Load the sample dataset; defaults to the SEED_ATTRACTIONS setting

    Returns:
        Attraction store instance
    """
    # Import here to avoid circular imports
    from attractions.dal.in_memory_handler import InMemoryAttractionStore
    from attractions.models.env_vars import get_env_vars

    if seed is None:
        seed = get_env_vars().seed_enabled

    return InMemoryAttractionStore(seed=seed)


__all__ = [
    'AttractionStore',
    'BaseAttractionStore',
    'get_dal_handler'
]
