"""Loyalize settings, read from the environment and an optional ``.env`` file.

Sections nest with ``__``: ``DATABASE__URL``, ``SERVER__PORT``, ``LOGGING__LEVEL``.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

# async driver -> sync driver, for tools such as offline Alembic runs
_SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql",
}


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./loyalize.db"
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    # seconds SQLite waits on a locked database before failing
    sqlite_timeout: float = 30.0
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection
    sqlite_foreign_keys: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def sync_url(self) -> str:
        scheme, sep, rest = self.url.partition("://")
        return f"{_SYNC_DRIVERS.get(scheme, scheme)}{sep}{rest}"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    project_name: str = "Loyalize Back Office"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]
    debug: bool = False

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def log_level(self) -> str:
        return self.logging.level.upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
