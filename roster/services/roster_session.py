"""Menu-driven roster session (list, create, view, remove)."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Callable, Dict

from roster.domain.errors import RosterError
from roster.domain.students import Student
from roster.repositories.base import StudentRepository
from roster.ui.view import RosterView

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


class MenuSelection(IntEnum):
    LIST = 1
    CREATE = 2
    VIEW = 3
    REMOVE = 4
    EXIT = 5


class RosterSession:
    """
    Drives the roster from menu selections.

    Every selection is one complete transition: the handler runs, its result
    is rendered and the session is back in RUNNING (or EXITING for 5).
    A RosterError raised by a handler is shown as an error banner and the
    session keeps running; the failed operation had no effect.
    """

    def __init__(self, repository: StudentRepository, view: RosterView) -> None:
        self.repository = repository
        self.view = view
        self.state = SessionState.RUNNING
        self._transitions: Dict[MenuSelection, Callable[[], SessionState]] = {
            MenuSelection.LIST: self.list_students,
            MenuSelection.CREATE: self.create_student,
            MenuSelection.VIEW: self.view_student,
            MenuSelection.REMOVE: self.remove_student,
            MenuSelection.EXIT: self.exit,
        }

    def run(self) -> SessionState:
        while self.state is SessionState.RUNNING:
            self.step(self.view.print_menu_and_get_selection())
        self.view.display_exit_banner()
        return self.state

    def step(self, selection: int) -> SessionState:
        """Apply one menu selection and return the resulting state."""
        try:
            handler = self._transitions[MenuSelection(selection)]
        except ValueError:
            self.view.display_unknown_command_banner()
            return self.state

        try:
            self.state = handler()
        except RosterError as exc:
            logger.info("Menu selection %s failed: %s", selection, exc)
            self.view.display_error_message(exc)
        return self.state

    # -------------------------- handlers --------------------------
    def list_students(self) -> SessionState:
        self.view.display_all_banner()
        students = self.repository.get_all_students()
        self.view.display_student_list(students)
        return SessionState.RUNNING

    def create_student(self) -> SessionState:
        self.view.display_create_student_banner()
        info = self.view.get_new_student_info()
        student = Student.from_fields(**info)
        self.repository.add_student(student.student_id, student)
        self.view.display_create_success_banner()
        return SessionState.RUNNING

    def view_student(self) -> SessionState:
        self.view.display_display_student_banner()
        student_id = self.view.get_student_id_choice()
        self.view.display_student(self.repository.get_student(student_id))
        return SessionState.RUNNING

    def remove_student(self) -> SessionState:
        self.view.display_remove_student_banner()
        student_id = self.view.get_student_id_choice()
        self.view.display_remove_result(self.repository.remove_student(student_id))
        return SessionState.RUNNING

    def exit(self) -> SessionState:
        return SessionState.EXITING
