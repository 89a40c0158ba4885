"""Dict-backed repository; nothing survives the process."""
from __future__ import annotations

from typing import Dict, List, Optional

from roster.domain.students import Student

from .base import StudentRepository


class MemoryStudentRepository(StudentRepository):
    """StudentRepository kept entirely in process memory."""

    def __init__(self, students: Optional[List[Student]] = None) -> None:
        self._students: Dict[str, Student] = {}
        for student in students or []:
            self._students[student.student_id] = student

    def add_student(self, student_id: str, student: Student) -> Student:
        stored = self._keyed(student_id, student)
        self._students[stored.student_id] = stored
        return stored

    def get_all_students(self) -> List[Student]:
        return list(self._students.values())

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def remove_student(self, student_id: str) -> Optional[Student]:
        return self._students.pop(student_id, None)
