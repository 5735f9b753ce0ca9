"""SQLAlchemy ORM models."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class TodoModel(Base):
    """Todo model."""

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class LabelModel(Base):
    """Label model.

    Name uniqueness is checked by the repository before insert, so there is
    no unique constraint on ``name``. Ids are never reused, so associations
    left behind by a deleted label never attach to a newer one.
    """

    __tablename__ = "labels"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class TodoLabelModel(Base):
    """Association table for Todo-Label many-to-many relationship.

    ``label_id`` carries no foreign key: deleting a label leaves its
    associations behind and the outer join reads them as "no label".
    """

    __tablename__ = "todo_labels"

    todo_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("todos.id", ondelete="CASCADE"),
        primary_key=True,
    )
    label_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
