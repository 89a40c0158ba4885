"""
Engine and unit-of-work helpers for the SQL roster backend.

``roster_session()`` is the only way repositories talk to the database: it
commits when the block finishes, rolls back when it raises and turns any
SQLAlchemy failure into a StorageIOError, so callers never see driver
exceptions or half-applied changes.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from roster.core.config import get_settings
from roster.domain.errors import StorageIOError

logger = logging.getLogger(__name__)

Base = declarative_base()

# one engine and sessionmaker per database URL for the life of the process
_engines: Dict[str, Engine] = {}
_sessionmakers: Dict[str, sessionmaker] = {}


def resolve_database_url(database_url: str | None = None) -> str:
    url = database_url if database_url is not None else get_settings().database_url
    url = (url or "").strip()
    if not url:
        raise StorageIOError("DATABASE_URL must be configured to use the SQL backend.")
    return url


def get_engine(database_url: str | None = None) -> Engine:
    url = resolve_database_url(database_url)
    engine = _engines.get(url)
    if engine is None:
        logger.debug("Creating roster engine (%s)", url.split("://", 1)[0])
        engine = _engines[url] = create_engine(url, future=True, pool_pre_ping=True)
    return engine


def _get_sessionmaker(database_url: str | None = None) -> sessionmaker:
    url = resolve_database_url(database_url)
    maker = _sessionmakers.get(url)
    if maker is None:
        maker = _sessionmakers[url] = sessionmaker(
            bind=get_engine(url), autoflush=False, autocommit=False, future=True
        )
    return maker


def dispose_engines() -> None:
    """Close every pooled connection; the next call builds fresh engines."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
    _sessionmakers.clear()


@contextmanager
def roster_session(database_url: str | None = None, action: str = "access the roster") -> Iterator[Session]:
    session: Session = _get_sessionmaker(database_url)()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageIOError(f"Could not {action}: {exc}") from exc
    finally:
        session.close()
