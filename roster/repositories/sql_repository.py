"""Student repository backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from roster.db.models import StudentRow
from roster.db.session import roster_session
from roster.domain.students import Student

from .base import StudentRepository

logger = logging.getLogger(__name__)


def _find(session: Session, student_id: str) -> Optional[StudentRow]:
    stmt = select(StudentRow).where(StudentRow.student_id == student_id)
    return session.execute(stmt).scalar_one_or_none()


class SQLStudentRepository(StudentRepository):
    """
    StudentRepository over the ``students`` table.

    Each call is one unit of work in ``roster_session``; a database failure
    surfaces as StorageIOError with nothing committed.
    """

    def __init__(self, database_url: str | None = None) -> None:
        self._database_url = database_url

    def add_student(self, student_id: str, student: Student) -> Student:
        stored = self._keyed(student_id, student)
        with roster_session(self._database_url, f"save student {stored.student_id}") as session:
            row = _find(session, stored.student_id)
            if row is None:
                row = StudentRow(student_id=stored.student_id)
                session.add(row)
            row.apply(stored)
        return stored

    def get_all_students(self) -> List[Student]:
        with roster_session(self._database_url, "list students") as session:
            rows = session.execute(select(StudentRow).order_by(StudentRow.position)).scalars()
            return [row.to_student() for row in rows]

    def get_student(self, student_id: str) -> Optional[Student]:
        with roster_session(self._database_url, f"read student {student_id}") as session:
            row = _find(session, student_id)
            return row.to_student() if row else None

    def remove_student(self, student_id: str) -> Optional[Student]:
        with roster_session(self._database_url, f"remove student {student_id}") as session:
            row = _find(session, student_id)
            if row is None:
                return None
            removed = row.to_student()
            session.delete(row)
        logger.debug("Removed student %s", student_id)
        return removed
