import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_STORAGE_BACKENDS = frozenset({"database", "memory"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "EasyLog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./easylog.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Storage scope: "database" (SQL table) or "memory" (process-wide dict)
    storage_backend: str = "database"

    # Navigation
    login_path: str = "/auth/login"

    # Entry composer
    speech_dictation_enabled: bool = True
    suggestion_min_length: int = 10

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_journal: str = "INFO"          # registry, entry log, session services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Fall back to the database backend when an unknown one is configured."""
        if self.storage_backend not in _STORAGE_BACKENDS:
            _config_logger.warning(
                "Unknown storage backend '%s' — using 'database'", self.storage_backend
            )
            object.__setattr__(self, "storage_backend", "database")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
