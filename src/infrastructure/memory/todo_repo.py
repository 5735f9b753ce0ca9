"""In-memory implementation of Todo repository."""

from copy import deepcopy

import structlog

from core.exceptions import NotFoundError
from domain.entities.todo import CreateTodo, Todo, UpdateTodo
from infrastructure.memory.label_repo import InMemoryLabelRepository
from infrastructure.memory.locking import ReadWriteLock

logger = structlog.get_logger()


class InMemoryTodoRepository:
    """In-process implementation of ITodoRepository.

    Each operation holds the lock for its whole body and never awaits
    inside it, so no operation is observed half applied. Ids come from a
    counter and are never reused after a delete.
    """

    def __init__(self, labels: InMemoryLabelRepository | None = None) -> None:
        self._store: dict[int, Todo] = {}
        self._lock = ReadWriteLock()
        self._last_id = 0
        self._labels = labels if labels is not None else InMemoryLabelRepository()

    async def create(self, payload: CreateTodo) -> Todo:
        """Create a new todo."""
        with self._lock.write():
            self._last_id += 1
            todo = Todo(
                id=self._last_id,
                text=payload.text,
                completed=False,
                labels=self._labels.resolve(payload.labels),
            )
            self._store[todo.id] = todo
            logger.debug("todo_created", todo_id=todo.id)
            return deepcopy(todo)

    async def find(self, id: int) -> Todo:
        """Get a todo by ID."""
        with self._lock.read():
            todo = self._store.get(id)
            if todo is None:
                raise NotFoundError(id)
            return deepcopy(todo)

    async def all(self) -> list[Todo]:
        """Get all todos in insertion order."""
        with self._lock.read():
            return [deepcopy(todo) for todo in self._store.values()]

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        """Update an existing todo."""
        with self._lock.write():
            todo = self._store.get(id)
            if todo is None:
                raise NotFoundError(id)

            if payload.text is not None:
                todo.text = payload.text
            if payload.completed is not None:
                todo.completed = payload.completed
            if payload.labels is not None:
                todo.labels = self._labels.resolve(payload.labels)

            logger.debug("todo_updated", todo_id=id)
            return deepcopy(todo)

    async def delete(self, id: int) -> None:
        """Delete a todo and its label associations."""
        with self._lock.write():
            if self._store.pop(id, None) is None:
                raise NotFoundError(id)
            logger.debug("todo_deleted", todo_id=id)
