"""SQLAlchemy implementation of Label repository."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DuplicateError, NotFoundError
from domain.entities.label import Label
from infrastructure.database.models import LabelModel
from infrastructure.database.session import transaction

logger = structlog.get_logger()


class SQLAlchemyLabelRepository:
    """SQLAlchemy implementation of ILabelRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, name: str) -> Label:
        """Create a new label unless one with the same name exists."""
        async with transaction(self._session_factory) as session:
            stmt = select(LabelModel).where(LabelModel.name == name)
            result = await session.execute(stmt)
            existing = result.scalars().first()
            if existing:
                logger.info("label_duplicate", name=name, existing_id=existing.id)
                raise DuplicateError(existing.id)

            model = LabelModel(name=name)
            session.add(model)
            await session.flush()
            label = self._to_entity(model)

        logger.info("label_created", label_id=label.id)
        return label

    async def all(self) -> list[Label]:
        """Get all labels ordered by ID."""
        stmt = select(LabelModel).order_by(LabelModel.id.asc())
        async with transaction(self._session_factory) as session:
            result = await session.execute(stmt)
            return [self._to_entity(model) for model in result.scalars()]

    async def delete(self, id: int) -> None:
        """Delete a label. Its todo associations are not cleaned up."""
        async with transaction(self._session_factory) as session:
            result = await session.execute(delete(LabelModel).where(LabelModel.id == id))
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise NotFoundError(id)

        logger.info("label_deleted", label_id=id)

    def _to_entity(self, model: LabelModel) -> Label:
        """Convert ORM model to domain entity."""
        return Label(id=model.id, name=model.name)
