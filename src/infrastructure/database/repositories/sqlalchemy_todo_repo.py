"""SQLAlchemy implementation of Todo repository."""

from typing import Any

import structlog
from sqlalchemy import Row, Select, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import NotFoundError
from domain.entities.todo import CreateTodo, Todo, UpdateTodo, unique_label_ids
from infrastructure.database.models import LabelModel, TodoLabelModel, TodoModel
from infrastructure.database.rows import TodoWithLabelFromRow, fold_entities, fold_entity
from infrastructure.database.session import transaction

logger = structlog.get_logger()


class SQLAlchemyTodoRepository:
    """SQLAlchemy implementation of ITodoRepository.

    Every operation leases its own session and runs inside one transaction,
    so a todo row and its ``todo_labels`` rows are always written together.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, payload: CreateTodo) -> Todo:
        """Create a new todo and attach its labels."""
        async with transaction(self._session_factory) as session:
            model = TodoModel(text=payload.text, completed=False)
            session.add(model)
            await session.flush()

            await self._insert_labels(session, model.id, payload.labels)
            todo = await self._find(session, model.id)

        logger.info("todo_created", todo_id=todo.id, label_count=len(todo.labels))
        return todo

    async def find(self, id: int) -> Todo:
        """Get a todo by ID."""
        async with transaction(self._session_factory) as session:
            return await self._find(session, id)

    async def all(self) -> list[Todo]:
        """Get all todos, newest first."""
        stmt = self._joined_select().order_by(
            TodoModel.id.desc(), TodoLabelModel.label_id
        )
        async with transaction(self._session_factory) as session:
            result = await session.execute(stmt)
            return fold_entities(self._to_row(row) for row in result)

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        """Update an existing todo, replacing its labels if given."""
        async with transaction(self._session_factory) as session:
            current = await self._find(session, id)

            stmt = (
                update(TodoModel)
                .where(TodoModel.id == id)
                .values(
                    text=payload.text if payload.text is not None else current.text,
                    completed=(
                        payload.completed
                        if payload.completed is not None
                        else current.completed
                    ),
                )
            )
            await session.execute(stmt)

            if payload.labels is not None:
                await self._delete_labels(session, id)
                await self._insert_labels(session, id, payload.labels)

            todo = await self._find(session, id)

        logger.info("todo_updated", todo_id=id)
        return todo

    async def delete(self, id: int) -> None:
        """Delete a todo and its label associations."""
        async with transaction(self._session_factory) as session:
            await self._delete_labels(session, id)
            result = await session.execute(delete(TodoModel).where(TodoModel.id == id))
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise NotFoundError(id)

        logger.info("todo_deleted", todo_id=id)

    async def _find(self, session: AsyncSession, id: int) -> Todo:
        """Run the joined query for one todo inside an open transaction."""
        stmt = (
            self._joined_select()
            .where(TodoModel.id == id)
            .order_by(TodoLabelModel.label_id)
        )
        result = await session.execute(stmt)
        todo = fold_entity(self._to_row(row) for row in result)
        if todo is None:
            raise NotFoundError(id)
        return todo

    async def _insert_labels(
        self, session: AsyncSession, todo_id: int, label_ids: list[int]
    ) -> None:
        """Bulk insert the associations of one todo to existing labels."""
        label_ids = unique_label_ids(label_ids)
        if not label_ids:
            return

        result = await session.execute(
            select(LabelModel.id).where(LabelModel.id.in_(label_ids))
        )
        existing = set(result.scalars())
        label_ids = [label_id for label_id in label_ids if label_id in existing]
        if not label_ids:
            return

        await session.execute(
            insert(TodoLabelModel),
            [{"todo_id": todo_id, "label_id": label_id} for label_id in label_ids],
        )

    async def _delete_labels(self, session: AsyncSession, todo_id: int) -> None:
        """Remove all associations of one todo."""
        await session.execute(
            delete(TodoLabelModel).where(TodoLabelModel.todo_id == todo_id)
        )

    @staticmethod
    def _joined_select() -> Select:
        """``todos`` outer-joined through ``todo_labels`` to ``labels``."""
        return (
            select(
                TodoModel.id,
                TodoModel.text,
                TodoModel.completed,
                LabelModel.id.label("label_id"),
                LabelModel.name.label("label_name"),
            )
            .select_from(TodoModel)
            .outerjoin(TodoLabelModel, TodoLabelModel.todo_id == TodoModel.id)
            .outerjoin(LabelModel, LabelModel.id == TodoLabelModel.label_id)
        )

    @staticmethod
    def _to_row(row: Row[Any]) -> TodoWithLabelFromRow:
        """Convert a result row to the joined read model."""
        return TodoWithLabelFromRow(
            id=row.id,
            text=row.text,
            completed=row.completed,
            label_id=row.label_id,
            label_name=row.label_name,
        )
