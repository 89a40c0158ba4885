"""Exceptions raised by the roster domain and its storage backends."""

from __future__ import annotations


class RosterError(Exception):
    """Base exception for roster workflows."""


class StorageIOError(RosterError):
    """Raised when the backing medium cannot be read or written."""


class CorruptRecordError(RosterError):
    """Raised when a stored line does not parse into a Student."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class InvalidStudentError(RosterError):
    """Raised when user input cannot form a storable Student."""
