"""Database helpers for the SQL roster backend."""

from .session import Base, dispose_engines, get_engine, roster_session

__all__ = ["Base", "dispose_engines", "get_engine", "roster_session"]
