"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Non-production env keeps error details in API responses
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.repositories.label_repository import ILabelRepository
from domain.repositories.todo_repository import ITodoRepository
from infrastructure.database.models import Base
from infrastructure.database.repositories.sqlalchemy_label_repo import SQLAlchemyLabelRepository
from infrastructure.database.repositories.sqlalchemy_todo_repo import SQLAlchemyTodoRepository
from infrastructure.memory.label_repo import InMemoryLabelRepository
from infrastructure.memory.todo_repo import InMemoryTodoRepository

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh test database engine with all tables."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory bound to the test engine."""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def memory_label_repo() -> InMemoryLabelRepository:
    return InMemoryLabelRepository()


@pytest.fixture
def memory_todo_repo(memory_label_repo: InMemoryLabelRepository) -> InMemoryTodoRepository:
    return InMemoryTodoRepository(memory_label_repo)


@pytest.fixture
def sql_label_repo(session_factory: async_sessionmaker[AsyncSession]) -> SQLAlchemyLabelRepository:
    return SQLAlchemyLabelRepository(session_factory)


@pytest.fixture
def sql_todo_repo(session_factory: async_sessionmaker[AsyncSession]) -> SQLAlchemyTodoRepository:
    return SQLAlchemyTodoRepository(session_factory)


@pytest.fixture(params=["memory", "database"])
def repositories(
    request: pytest.FixtureRequest,
    memory_todo_repo: InMemoryTodoRepository,
    memory_label_repo: InMemoryLabelRepository,
    sql_todo_repo: SQLAlchemyTodoRepository,
    sql_label_repo: SQLAlchemyLabelRepository,
) -> tuple[ITodoRepository, ILabelRepository]:
    """The (todo, label) repository pair of each backend."""
    if request.param == "memory":
        return memory_todo_repo, memory_label_repo
    return sql_todo_repo, sql_label_repo


@pytest.fixture
async def client(
    repositories: tuple[ITodoRepository, ILabelRepository],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client wired to one repository backend.

    Runs once per backend, so every API test checks that both behave the same.
    """
    from api.v1.dependencies import get_label_repository, get_todo_repository
    from main import create_app

    todo_repo, label_repo = repositories
    app = create_app()
    app.dependency_overrides[get_todo_repository] = lambda: todo_repo
    app.dependency_overrides[get_label_repository] = lambda: label_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
