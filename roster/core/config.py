"""
Configuration helpers for the roster application.

Settings are read once from environment variables (storage backend, roster
file path, database URL, log level) so that repositories and the entry point
do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

BACKENDS = ("file", "memory", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    roster_file: str
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: tuple[str, ...], default: str) -> str:
        if value is None:
            return default
        candidate = value.strip().lower()
        return candidate if candidate in allowed else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=_choice(os.getenv("ROSTER_BACKEND"), BACKENDS, "file"),
        roster_file=(os.getenv("ROSTER_FILE") or "roster.txt").strip(),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").strip().upper(),
    )
