"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Database credentials come from DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME
    - DATABASE_URL, when set, wins over the DB_* parts
    - get_settings() is cached (lru_cache): read once per process, no hot reload

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - extra="ignore": .env files commonly carry POSTGRES_* keys for the database container
    - URL.create over string formatting: passwords with '@' or '/' stay intact
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "todo"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 5000

    # API
    cors_origins: list[str] = ["*"]
    strict_status: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL for the configured database."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
