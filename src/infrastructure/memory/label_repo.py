"""In-memory implementation of Label repository."""

from copy import deepcopy

import structlog

from core.exceptions import DuplicateError, NotFoundError
from domain.entities.label import Label
from infrastructure.memory.locking import ReadWriteLock

logger = structlog.get_logger()


class InMemoryLabelRepository:
    """In-process implementation of ILabelRepository."""

    def __init__(self) -> None:
        self._store: dict[int, Label] = {}
        self._lock = ReadWriteLock()
        self._last_id = 0

    async def create(self, name: str) -> Label:
        """Create a new label unless one with the same name exists."""
        with self._lock.write():
            for label in self._store.values():
                if label.name == name:
                    logger.info("label_duplicate", name=name, existing_id=label.id)
                    raise DuplicateError(label.id)

            self._last_id += 1
            label = Label(id=self._last_id, name=name)
            self._store[label.id] = label
            return deepcopy(label)

    async def all(self) -> list[Label]:
        """Get all labels ordered by ID."""
        with self._lock.read():
            return [deepcopy(self._store[id]) for id in sorted(self._store)]

    async def delete(self, id: int) -> None:
        """Delete a label."""
        with self._lock.write():
            if id not in self._store:
                raise NotFoundError(id)
            del self._store[id]

    def resolve(self, label_ids: list[int]) -> list[Label]:
        """Map label ids to labels ordered by id, skipping unknown ids."""
        with self._lock.read():
            return [
                deepcopy(self._store[id])
                for id in sorted(set(label_ids))
                if id in self._store
            ]
