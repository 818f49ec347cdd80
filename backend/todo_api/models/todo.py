"""Todo ORM — persists a single task record.

Invariants:
    - id is an auto-increment integer primary key
    - name is non-nullable and non-empty (CHECK constraint, enforced by the store)
    - description and status are non-nullable, default to ''
    - status accepts any string; TodoStatus enforcement is opt-in at the API boundary
    - deleted_at NULL means live; a set deleted_at hides the row from every query

Design Decisions:
    - Soft delete over hard delete: rows stay recoverable, ids are never reused
    - Text over String(n) for status: arbitrary values must persist as-is
    - Empty-name rejection in the schema, not in pydantic: the store is the validator
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(Base):
    """Todo entity — name, description, status plus system-managed timestamps."""
    __tablename__ = "todos"
    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_todos_name_not_empty"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )

    def __repr__(self) -> str:
        return f"<Todo id={self.id} name={self.name!r} status={self.status!r}>"
