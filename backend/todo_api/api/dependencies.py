"""Route Dependencies — reusable FastAPI dependencies shared by the routers.

Invariants:
    - Settings come from app.state (set by the app factory), never from globals
    - A repository wraps the request-scoped session from get_db
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.config import Settings
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.todo_repository import SqlTodoRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_todo_repository(db: AsyncSession = Depends(get_db)) -> SqlTodoRepository:
    return SqlTodoRepository(db)
