"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database gateway built on startup via lifespan, stored on app.state, disposed on shutdown
    - An unreachable database at startup is fatal (DatabaseConnectionError aborts the server)
    - Startup never creates or alters tables; run todo-api-migrate first

Design Decisions:
    - create_app(settings) factory: tests build apps with their own settings,
      module-level `app` serves uvicorn
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import Settings, get_settings
from todo_api.core.errors import DatabaseConnectionError
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if not await db_manager.health_check():
        await db_manager.dispose()
        logger.critical("Failed to connect database")
        raise DatabaseConnectionError("Failed to connect database")
    app.state.db_manager = db_manager
    logger.info("Connection opened to database")
    logger.info("Todo API started")
    yield
    logger.info("Todo API shutting down")
    await db_manager.dispose()
    app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    allow_all = settings.cors_origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(todos.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Entry point for todo-api: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
