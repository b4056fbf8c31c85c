"""
Attraction domain model.

An attraction is an immutable value object: stores replace records rather
than mutating them, so a record handed to a caller can never change the
contents of a store.
"""

from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Attraction(BaseModel):
    """A tourist attraction record."""

    model_config = ConfigDict(frozen=True)

    name: Annotated[Optional[str], Field(
        description='Name of the attraction, used as its identifier',
        examples=['Tivoli']
    )] = None

    city: Annotated[Optional[str], Field(
        description='City where the attraction is located',
        examples=['København']
    )] = None

    description: Annotated[Optional[str], Field(
        description='Free text description',
        examples=['Forlystelsespark i hjertet af København.']
    )] = None

    tags: Annotated[Optional[Tuple[Optional[str], ...]], Field(
        description='Ordered tags describing the attraction',
        examples=[['forlystelser', 'familie', 'kultur']]
    )] = None

    @classmethod
    def create(
        cls,
        name: Optional[str],
        city: Optional[str],
        description: Optional[str],
        tags: Optional[list] = None
    ) -> 'Attraction':
        """
        Create an attraction from positional values.

        Args:
            name: Attraction name
            city: City name
            description: Free text description
            tags: Sequence of tags, or None

        Returns:
            New Attraction instance
        """
        return cls(name=name, city=city, description=description, tags=tags)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the attraction to a JSON-friendly dictionary."""
        return {
            'name': self.name,
            'city': self.city,
            'description': self.description,
            'tags': list(self.tags) if self.tags is not None else None,
        }
