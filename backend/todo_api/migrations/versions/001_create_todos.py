"""Create todos table.

Revision ID: 001_create_todos
Revises: None
Create Date: 2026-10-18

Single table for the Todo entity: integer id, non-empty name,
description/status text defaulting to '', timestamps and the
soft-delete marker (indexed, every query filters on it).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001_create_todos"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "todos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("status", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("name <> ''", name="ck_todos_name_not_empty"),
    )
    op.create_index("ix_todos_deleted_at", "todos", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("ix_todos_deleted_at", table_name="todos")
    op.drop_table("todos")
