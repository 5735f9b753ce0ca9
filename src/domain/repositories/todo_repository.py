"""Todo repository protocol."""

from typing import Protocol

from domain.entities.todo import CreateTodo, Todo, UpdateTodo


class ITodoRepository(Protocol):
    """Repository interface for Todo entities.

    Every backend returns fully hydrated todos (labels resolved to
    ``Label`` values) and raises ``NotFoundError`` for unknown ids.
    """

    async def create(self, payload: CreateTodo) -> Todo:
        """Create a new todo with the given label associations."""
        ...

    async def find(self, id: int) -> Todo:
        """Get a todo by ID."""
        ...

    async def all(self) -> list[Todo]:
        """Get every todo. Ordering is backend-defined."""
        ...

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        """Apply the fields present in ``payload`` and return the todo."""
        ...

    async def delete(self, id: int) -> None:
        """Delete a todo together with its label associations."""
        ...
