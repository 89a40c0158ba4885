"""Student record and the rules a record must satisfy to be stored."""
from __future__ import annotations

from dataclasses import dataclass, fields

from .errors import InvalidStudentError

FIELD_DELIMITER = "::"
_FORBIDDEN = (FIELD_DELIMITER, "\n", "\r")
# a field touching the delimiter would merge with it on disk
_EDGE = FIELD_DELIMITER[0]


@dataclass(frozen=True)
class Student:
    """One roster entry, keyed by ``student_id``."""

    student_id: str
    first_name: str = ""
    last_name: str = ""
    cohort: str = ""

    def __post_init__(self) -> None:
        if not self.student_id or not self.student_id.strip():
            raise InvalidStudentError("Student id must not be empty")
        if self.student_id != self.student_id.strip():
            raise InvalidStudentError("Student id must not have surrounding whitespace")
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise InvalidStudentError(f"{f.name} must be text")
            for token in _FORBIDDEN:
                if token in value:
                    raise InvalidStudentError(f"{f.name} must not contain {token!r}")
            if value.startswith(_EDGE) or value.endswith(_EDGE):
                raise InvalidStudentError(f"{f.name} must not start or end with {_EDGE!r}")

    @classmethod
    def from_fields(cls, student_id: str | None, first_name: str | None = "",
                    last_name: str | None = "", cohort: str | None = "") -> "Student":
        """Build a Student from raw input, trimming surrounding whitespace."""
        return cls(
            student_id=(student_id or "").strip(),
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            cohort=(cohort or "").strip(),
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
