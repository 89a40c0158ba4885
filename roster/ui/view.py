"""
Presentation layer for the roster console.

The format_* functions are pure; RosterView only forwards their output to
the I/O capability and asks the prompts the session needs. No validation
happens here.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from roster.domain.students import Student

from .user_io import UserIO

MENU_LINES = (
    "Main Menu",
    "1. List Student IDs",
    "2. Create New Student",
    "3. View a Student",
    "4. Remove a Student",
    "5. Exit",
)
MENU_MIN = 1
MENU_MAX = 5


def banner(title: str) -> str:
    return f"=== {title} ==="


def format_student_line(student: Student) -> str:
    return f"#{student.student_id} : {student.first_name} {student.last_name}"


def format_student_list(students: Iterable[Student]) -> List[str]:
    lines = [format_student_line(s) for s in students]
    return lines or ["No students on record."]


def format_student_details(student: Student) -> List[str]:
    return [
        f"ID: {student.student_id}",
        f"Name: {student.full_name}",
        f"Cohort: {student.cohort}",
    ]


def format_error_banner(error: BaseException | str) -> List[str]:
    return [banner("ERROR"), str(error)]


class RosterView:
    """Console view for the roster session."""

    def __init__(self, io: UserIO) -> None:
        self._io = io

    @property
    def io(self) -> UserIO:
        return self._io

    def print_menu_and_get_selection(self) -> int:
        for line in MENU_LINES:
            self._io.print(line)
        return self._io.read_int("Please select from the above choices", MENU_MIN, MENU_MAX)

    # -------------------------- create --------------------------
    def display_create_student_banner(self) -> None:
        self._io.print(banner("Create Student"))

    def get_new_student_info(self) -> Dict[str, str]:
        return {
            "student_id": self._io.read_string("Enter Student Id:"),
            "first_name": self._io.read_string("Enter First Name:"),
            "last_name": self._io.read_string("Enter Last Name:"),
            "cohort": self._io.read_string("Cohort:"),
        }

    def display_create_success_banner(self) -> None:
        self._io.read_string("Student successfully created.  Please hit enter to continue")

    # -------------------------- list --------------------------
    def display_all_banner(self) -> None:
        self._io.print(banner("Display All Students"))

    def display_student_list(self, students: Iterable[Student]) -> None:
        for line in format_student_list(students):
            self._io.print(line)
        self._io.read_string("Hit enter to continue.")

    # -------------------------- view / remove --------------------------
    def get_student_id_choice(self) -> str:
        return self._io.read_string("Please enter the Student ID.").strip()

    def display_display_student_banner(self) -> None:
        self._io.print(banner("Display Student"))

    def display_student(self, student: Student | None) -> None:
        if student is None:
            self._io.print("No such student.")
        else:
            for line in format_student_details(student):
                self._io.print(line)
        self._io.read_string("Please hit enter to continue.")

    def display_remove_student_banner(self) -> None:
        self._io.print(banner("Remove Student"))

    def display_remove_result(self, student: Student | None) -> None:
        if student is None:
            self._io.print("No such student.")
            self._io.read_string("Please hit enter to continue.")
            return
        self._io.print(f"Removed {format_student_line(student)}")
        self._io.read_string("Student successfully removed.  Please hit enter to continue")

    # -------------------------- misc --------------------------
    def display_unknown_command_banner(self) -> None:
        self._io.print("Unknown Command")

    def display_exit_banner(self) -> None:
        self._io.print("Goodbye")

    def display_error_message(self, error: BaseException | str) -> None:
        for line in format_error_banner(error):
            self._io.print(line)
