"""
Create the roster table for the configured database.

Usage:
  DATABASE_URL=sqlite:///roster.db python -m roster.db.create_tables
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from roster.core.config import Settings, get_settings
from roster.domain.errors import StorageIOError

from .models import StudentRow
from .session import Base, get_engine


def create_all(settings: Settings | None = None) -> None:
    """Create the ``students`` table if it does not exist yet."""
    settings = settings or get_settings()
    engine = get_engine(settings.database_url)
    try:
        Base.metadata.create_all(bind=engine, tables=[StudentRow.__table__])
    except SQLAlchemyError as exc:
        raise StorageIOError(f"Could not create the roster table: {exc}") from exc


if __name__ == "__main__":
    try:
        create_all()
        print("Roster table created successfully.")
    except StorageIOError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
