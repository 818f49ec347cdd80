"""Schema Migrations — runs the Alembic revisions as an explicit, one-off step.

Invariants:
    - Never called while serving requests; the server assumes the schema exists
    - Idempotent: upgrading an up-to-date database is a no-op
    - Uses todo_api/migrations/ as script location, so installed copies find it too

Design Decisions:
    - Programmatic Config without an ini file: fileConfig() would reset the
      application's logging configuration
    - '%' escaped in the URL: Alembic's Config is a ConfigParser with interpolation
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from todo_api.config import get_settings
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"


def build_alembic_config(database_url: str) -> Config:
    """Alembic Config pointing at the bundled revisions and the given database."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database at database_url to revision."""
    logger.info(f"Running migrations up to {revision}")
    command.upgrade(build_alembic_config(database_url), revision)
    logger.info("Migrations complete")


def main() -> None:
    """Entry point for todo-api-migrate."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    run_migrations(settings.sqlalchemy_url)


if __name__ == "__main__":
    main()
