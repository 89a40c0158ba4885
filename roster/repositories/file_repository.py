"""
Flat-file persistence adapter.

One student per line, fields separated by ``::``::

    studentId::firstName::lastName::cohort

The whole file is loaded on first use and rewritten in full after every
mutation. Writes go through a temporary file that is moved over the target,
so readers only ever see the previous or the next complete roster.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from roster.domain.errors import CorruptRecordError, InvalidStudentError, StorageIOError
from roster.domain.students import FIELD_DELIMITER, Student

from .base import StudentRepository

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


def parse_line(line: str, line_number: int | None = None) -> Student:
    """Turn one stored line into a Student or raise CorruptRecordError."""
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise CorruptRecordError(
            f"expected {FIELD_COUNT} fields, found {len(parts)}", line_number
        )
    try:
        return Student(*parts)
    except InvalidStudentError as exc:
        raise CorruptRecordError(str(exc), line_number) from exc


def format_line(student: Student) -> str:
    return FIELD_DELIMITER.join(
        (student.student_id, student.first_name, student.last_name, student.cohort)
    )


def dump_roster(students: Iterable[Student]) -> str:
    return "".join(format_line(s) + "\n" for s in students)


class FileStudentRepository(StudentRepository):
    """StudentRepository backed by a ``::``-delimited UTF-8 text file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self._students: Optional[Dict[str, Student]] = None

    @property
    def path(self) -> Path:
        return self._path

    # -------------------------- contract --------------------------
    def add_student(self, student_id: str, student: Student) -> Student:
        stored = self._keyed(student_id, student)
        updated = dict(self._loaded())
        updated[stored.student_id] = stored
        self._persist(updated)
        return stored

    def get_all_students(self) -> List[Student]:
        return list(self._loaded().values())

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._loaded().get(student_id)

    def remove_student(self, student_id: str) -> Optional[Student]:
        current = self._loaded()
        if student_id not in current:
            return None
        updated = dict(current)
        removed = updated.pop(student_id)
        self._persist(updated)
        return removed

    def reload(self) -> None:
        """Forget the in-memory roster; the next call re-reads the file."""
        self._students = None

    # -------------------------- load --------------------------
    def _loaded(self) -> Dict[str, Student]:
        if self._students is None:
            self._students = self._read_file()
        return self._students

    def _read_file(self) -> Dict[str, Student]:
        students: Dict[str, Student] = {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                for number, raw in enumerate(f, start=1):
                    line = raw.rstrip("\r\n")
                    if not line.strip():
                        continue
                    try:
                        student = parse_line(line, number)
                    except CorruptRecordError as exc:
                        logger.warning("Skipping corrupt record in %s line %d: %s", self._path, number, exc)
                        continue
                    students[student.student_id] = student
        except FileNotFoundError:
            logger.debug("Roster file %s not found, starting empty", self._path)
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(f"Could not read roster file {self._path}: {exc}") from exc
        logger.debug("Loaded %d students from %s", len(students), self._path)
        return students

    # -------------------------- write --------------------------
    def _persist(self, students: Dict[str, Student]) -> None:
        """Write ``students`` to disk, then make them the live roster."""
        self._write_atomic(dump_roster(students.values()))
        self._students = students

    def _write_atomic(self, content: str) -> None:
        directory = self._path.parent
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            raise StorageIOError(f"Could not write roster file {self._path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)
        logger.debug("Wrote roster file %s", self._path)
