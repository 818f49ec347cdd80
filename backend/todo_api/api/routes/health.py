"""Service Checks — is the Todo API up, and can it serve /api/todo right now.

Invariants:
    - GET /api/health/ answers 200 while the process runs, database or not
    - GET /api/health/ready answers 200 only when the database is reachable
      and the todos table exists; otherwise 503 with the failing reason
    - Readiness never creates or migrates anything

Design Decisions:
    - Schema check in readiness: the server never migrates on startup, so a
      reachable but unmigrated database would fail every /api/todo request
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from todo_api import __version__
from todo_api.models.todo import Todo

router = APIRouter(prefix="/api/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    """Process is up."""
    return {"status": "healthy", "service": "todo-api", "version": __version__}


@router.get("/ready")
async def readiness(request: Request):
    """Database reachable and todos table migrated."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None or not await db_manager.health_check():
        return _not_ready("database_unavailable")
    if not await db_manager.has_table(Todo.__tablename__):
        return _not_ready("schema_missing")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "migrated"},
    }
