"""
Entry point for the roster console.

Builds the repository selected by the settings, the console view and the
session, then runs the menu loop until the user picks Exit.
"""

from __future__ import annotations

import logging
import sys

from roster.core.config import Settings, get_settings
from roster.core.logs import configure_logging
from roster.repositories.base import StudentRepository
from roster.repositories.file_repository import FileStudentRepository
from roster.repositories.memory_repository import MemoryStudentRepository
from roster.services.roster_session import RosterSession
from roster.ui.user_io import ConsoleIO, UserIO
from roster.ui.view import RosterView

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> StudentRepository:
    """Instantiate the backend named by ``settings.storage_backend``."""
    backend = settings.storage_backend
    if backend == "file":
        return FileStudentRepository(settings.roster_file)
    if backend == "memory":
        return MemoryStudentRepository()
    if backend == "sql":
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
        from roster.db.create_tables import create_all
        from roster.repositories.sql_repository import SQLStudentRepository

        create_all(settings)
        return SQLStudentRepository(settings.database_url)
    raise RuntimeError(f"Unknown storage backend: {backend}")


def create_session(settings: Settings | None = None, io: UserIO | None = None) -> RosterSession:
    settings = settings or get_settings()
    repository = build_repository(settings)
    view = RosterView(io or ConsoleIO())
    logger.debug("Roster session using %s backend", settings.storage_backend)
    return RosterSession(repository, view)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        session = create_session(settings)
        session.run()
    except (KeyboardInterrupt, EOFError):
        print("\nSession aborted.")
        raise SystemExit(130)
    except Exception as exc:
        logger.debug("Roster session crashed", exc_info=True)
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
    raise SystemExit(0)


if __name__ == "__main__":
    main()
