"""SQLAlchemy model mirroring one line of the flat roster file."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from roster.domain.students import Student

from .session import Base


class StudentRow(Base):
    __tablename__ = "students"

    # surrogate key keeps insertion order; replacing a student updates in place
    position = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(String(64), unique=True, nullable=False, index=True)
    first_name = Column(String(255), nullable=False, default="")
    last_name = Column(String(255), nullable=False, default="")
    cohort = Column(String(64), nullable=False, default="")

    def apply(self, student: Student) -> None:
        self.first_name = student.first_name
        self.last_name = student.last_name
        self.cohort = student.cohort

    def to_student(self) -> Student:
        return Student(
            student_id=self.student_id,
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            cohort=self.cohort or "",
        )
