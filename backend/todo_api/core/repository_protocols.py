"""Boundary Protocols — contracts between the API layer and persistence.

Invariants:
    - Routes depend on TodoRepository, never on a concrete session or engine
    - Implementations raise the typed errors from core/errors.py, never SQLAlchemy errors

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: every implementation does IO
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from todo_api.core.domain_types import TodoId


class TodoLike(Protocol):
    """Structural contract for Todo objects returned by a repository."""
    id: int
    name: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime


class TodoRepository(Protocol):
    """Contract for Todo persistence — implemented by infrastructure."""
    async def list(self) -> Sequence[TodoLike]: ...
    async def get(self, todo_id: TodoId) -> TodoLike: ...
    async def create(
        self, *, name: str, description: str, status: str,
    ) -> TodoLike: ...
    async def update(
        self, todo_id: TodoId, *, name: str, description: str, status: str,
    ) -> TodoLike: ...
    async def delete(self, todo_id: TodoId) -> int: ...
