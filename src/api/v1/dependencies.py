"""Dependency injection factories for API v1."""

from functools import lru_cache

from core.config import settings
from domain.repositories.label_repository import ILabelRepository
from domain.repositories.todo_repository import ITodoRepository
from infrastructure.database.repositories.sqlalchemy_label_repo import SQLAlchemyLabelRepository
from infrastructure.database.repositories.sqlalchemy_todo_repo import SQLAlchemyTodoRepository
from infrastructure.database.session import async_session_factory
from infrastructure.memory.label_repo import InMemoryLabelRepository
from infrastructure.memory.todo_repo import InMemoryTodoRepository


@lru_cache
def get_memory_label_repository() -> InMemoryLabelRepository:
    """Process-wide in-memory label store."""
    return InMemoryLabelRepository()


@lru_cache
def get_label_repository() -> ILabelRepository:
    """Get the Label repository for the configured backend."""
    if settings.repository_backend == "memory":
        return get_memory_label_repository()
    return SQLAlchemyLabelRepository(async_session_factory)


@lru_cache
def get_todo_repository() -> ITodoRepository:
    """Get the Todo repository for the configured backend."""
    if settings.repository_backend == "memory":
        return InMemoryTodoRepository(get_memory_label_repository())
    return SQLAlchemyTodoRepository(async_session_factory)
