"""Storage contract shared by every roster backend."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional

from roster.domain.students import Student


class StudentRepository(ABC):
    """
    Four-operation contract keyed by student id.

    Absence is reported as ``None`` and is never an error. Failures of the
    backing medium raise ``StorageIOError``.
    """

    @abstractmethod
    def add_student(self, student_id: str, student: Student) -> Student:
        """Insert or replace the record stored under ``student_id``."""

    @abstractmethod
    def get_all_students(self) -> List[Student]:
        """Return a snapshot of every record in insertion/load order."""

    @abstractmethod
    def get_student(self, student_id: str) -> Optional[Student]:
        """Return the record for ``student_id`` or None."""

    @abstractmethod
    def remove_student(self, student_id: str) -> Optional[Student]:
        """Remove and return the record for ``student_id``, or None if absent."""

    @staticmethod
    def _keyed(student_id: str, student: Student) -> Student:
        # the key always wins over the record's own id
        if student.student_id == student_id:
            return student
        return replace(student, student_id=student_id)
