"""Label repository protocol."""

from typing import Protocol

from domain.entities.label import Label


class ILabelRepository(Protocol):
    """Repository interface for Label entities."""

    async def create(self, name: str) -> Label:
        """Create a label, raising ``DuplicateError`` if the name is taken."""
        ...

    async def all(self) -> list[Label]:
        """Get all labels ordered by ID."""
        ...

    async def delete(self, id: int) -> None:
        """Delete a label. Todo associations are left untouched."""
        ...
