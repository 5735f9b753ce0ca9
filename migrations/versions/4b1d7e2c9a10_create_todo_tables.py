"""create_todo_tables

Revision ID: 4b1d7e2c9a10
Revises:
Create Date: 2026-10-18 10:12:31.204511

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d7e2c9a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create todos, labels and the todo_labels association table."""
    op.create_table('todos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_table('labels',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    # label_id has no foreign key: deleting a label leaves associations behind
    op.create_table('todo_labels',
        sa.Column('todo_id', sa.Integer(), nullable=False),
        sa.Column('label_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['todo_id'], ['todos.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('todo_id', 'label_id'),
    )
    op.create_index('ix_todo_labels_label_id', 'todo_labels', ['label_id'], unique=False)


def downgrade() -> None:
    """Drop the todo tables."""
    op.drop_index('ix_todo_labels_label_id', table_name='todo_labels')
    op.drop_table('todo_labels')
    op.drop_table('labels')
    op.drop_table('todos')
