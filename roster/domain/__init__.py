"""Domain objects for the roster (Student record and error taxonomy)."""

from .errors import CorruptRecordError, InvalidStudentError, RosterError, StorageIOError
from .students import FIELD_DELIMITER, Student

__all__ = [
    "FIELD_DELIMITER",
    "CorruptRecordError",
    "InvalidStudentError",
    "RosterError",
    "StorageIOError",
    "Student",
]
