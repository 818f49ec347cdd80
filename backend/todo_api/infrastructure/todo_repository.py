"""Todo Repository — SQLAlchemy implementation of core.repository_protocols.TodoRepository.

Invariants:
    - Wraps exactly one AsyncSession, injected at construction
    - Only live rows (deleted_at IS NULL) are ever visible
    - get/update check row existence explicitly and raise ResourceNotFoundError
    - Every write commits on its own; a failed write rolls back and raises PersistenceError
    - update() replaces name, description and status wholesale and always stamps updated_at

Design Decisions:
    - Soft delete via UPDATE ... SET deleted_at: rowcount answers "how many were deleted"
    - Ordered by id: the store's insertion order, stable across backends
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import ErrorContext, PersistenceError, ResourceNotFoundError
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class SqlTodoRepository:
    """Todo persistence on a relational store."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> Sequence[Todo]:
        """Every live Todo, in insertion order."""
        result = await self._db.execute(
            select(Todo).where(Todo.deleted_at.is_(None)).order_by(Todo.id),
        )
        return result.scalars().all()

    async def get(self, todo_id: TodoId) -> Todo:
        """Live Todo by id, or ResourceNotFoundError."""
        result = await self._db.execute(
            select(Todo).where(Todo.id == todo_id, Todo.deleted_at.is_(None)),
        )
        todo = result.scalar_one_or_none()
        if todo is None:
            raise ResourceNotFoundError(
                "Todo", todo_id, ErrorContext(todo_id=todo_id, operation="get"),
            )
        return todo

    async def create(self, *, name: str, description: str, status: str) -> Todo:
        todo = Todo(name=name, description=description, status=status)
        self._db.add(todo)
        await self._commit("create")
        await self._db.refresh(todo)
        logger.info(f"Todo {todo.id} created", extra={"todo_id": todo.id})
        return todo

    async def update(
        self, todo_id: TodoId, *, name: str, description: str, status: str,
    ) -> Todo:
        """Full replace of every mutable field on an existing Todo."""
        todo = await self.get(todo_id)
        todo.name = name
        todo.description = description
        todo.status = status
        todo.updated_at = datetime.now(timezone.utc)
        await self._commit("update", todo_id)
        await self._db.refresh(todo)
        logger.info(f"Todo {todo_id} updated", extra={"todo_id": todo_id})
        return todo

    async def delete(self, todo_id: TodoId) -> int:
        """Soft-delete a live Todo. Returns the number of rows affected."""
        try:
            result = await self._db.execute(
                update(Todo)
                .where(Todo.id == todo_id, Todo.deleted_at.is_(None))
                .values(deleted_at=datetime.now(timezone.utc)),
            )
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise PersistenceError(
                "Could not delete todo", "delete",
                ErrorContext(todo_id=todo_id),
            ) from e
        await self._commit("delete", todo_id)
        affected = result.rowcount or 0
        logger.info(
            f"Todo {todo_id} delete affected {affected} row(s)",
            extra={"todo_id": todo_id},
        )
        return affected

    async def _commit(self, operation: str, todo_id: TodoId | None = None) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.warning(
                f"Todo {operation} rejected by the store: {e}",
                extra={"todo_id": todo_id, "operation": operation},
            )
            raise PersistenceError(
                f"Could not {operation} todo", operation,
                ErrorContext(todo_id=todo_id),
            ) from e
