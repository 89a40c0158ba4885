from __future__ import annotations

import pytest

from roster.domain.errors import StorageIOError
from roster.domain.students import Student
from roster.repositories.file_repository import FileStudentRepository
from roster.repositories.memory_repository import MemoryStudentRepository
from roster.services.roster_session import MenuSelection, RosterSession, SessionState
from roster.ui.view import RosterView


class BrokenRepository(MemoryStudentRepository):
    def add_student(self, student_id, student):
        raise StorageIOError("disk full")

    def get_all_students(self):
        raise StorageIOError("unreadable")


def make_session(io, repository=None):
    return RosterSession(repository or MemoryStudentRepository(), RosterView(io))


def test_exit_selection_ends_loop_with_goodbye(scripted_io):
    io = scripted_io(["5"])
    session = make_session(io)
    assert session.run() is SessionState.EXITING
    assert io.printed[-1] == "Goodbye"


def test_create_then_list(scripted_io):
    io = scripted_io([
        "2", "S1", "Ann", "Lee", "2024A", "",
        "1", "",
        "5",
    ])
    repo = MemoryStudentRepository()
    make_session(io, repo).run()
    assert repo.get_student("S1") == Student("S1", "Ann", "Lee", "2024A")
    assert "=== Create Student ===" in io.printed
    assert "=== Display All Students ===" in io.printed
    assert "#S1 : Ann Lee" in io.printed
    assert "Student successfully created.  Please hit enter to continue" in io.prompts


def test_view_found_and_missing(scripted_io):
    repo = MemoryStudentRepository([Student("S1", "Ann", "Lee", "2024A")])
    io = scripted_io(["3", "S1", "", "3", "X", "", "5"])
    make_session(io, repo).run()
    assert "Cohort: 2024A" in io.printed
    assert "No such student." in io.printed


def test_remove_found_and_missing(scripted_io):
    repo = MemoryStudentRepository([Student("S1", "Ann", "Lee", "2024A")])
    io = scripted_io(["4", "S1", "", "4", "S1", "", "5"])
    make_session(io, repo).run()
    assert repo.get_all_students() == []
    assert "Removed #S1 : Ann Lee" in io.printed
    assert io.printed.count("No such student.") == 1


def test_unknown_selection_keeps_running(scripted_io):
    io = scripted_io([])
    session = make_session(io)
    assert session.step(9) is SessionState.RUNNING
    assert io.printed == ["Unknown Command"]


@pytest.mark.parametrize(
    "selection, answers, banner, expected",
    [
        (MenuSelection.LIST, [""], "=== Display All Students ===", SessionState.RUNNING),
        (MenuSelection.CREATE, ["S2", "Bob", "Ray", "B", ""], "=== Create Student ===", SessionState.RUNNING),
        (MenuSelection.VIEW, ["S1", ""], "=== Display Student ===", SessionState.RUNNING),
        (MenuSelection.REMOVE, ["S1", ""], "=== Remove Student ===", SessionState.RUNNING),
        (MenuSelection.EXIT, [], None, SessionState.EXITING),
    ],
)
def test_each_menu_selection_runs_its_operation(scripted_io, selection, answers, banner, expected):
    io = scripted_io(answers)
    repo = MemoryStudentRepository([Student("S1", "Ann", "Lee", "2024A")])
    session = make_session(io, repo)

    assert session.step(int(selection)) is expected
    assert io.answers == []
    assert "Unknown Command" not in io.printed
    assert "=== ERROR ===" not in io.printed
    if banner:
        assert io.printed[0] == banner
    else:
        assert io.printed == []


def test_invalid_input_shows_error_and_stores_nothing(scripted_io):
    io = scripted_io(["2", "S::1", "Ann", "Lee", "2024A", "5"])
    repo = MemoryStudentRepository()
    assert make_session(io, repo).run() is SessionState.EXITING
    assert repo.get_all_students() == []
    assert "=== ERROR ===" in io.printed


def test_storage_failure_is_reported_and_loop_continues(scripted_io):
    io = scripted_io(["2", "S1", "Ann", "Lee", "2024A", "1", "5"])
    session = make_session(io, BrokenRepository())
    assert session.run() is SessionState.EXITING
    assert io.printed.count("=== ERROR ===") == 2
    assert "disk full" in io.printed
    assert "unreadable" in io.printed


def test_session_persists_through_file_backend(scripted_io, tmp_path):
    path = tmp_path / "roster.txt"
    io = scripted_io(["2", "S1", "Ann", "Lee", "2024A", "", "5"])
    make_session(io, FileStudentRepository(path)).run()

    io = scripted_io(["1", "", "5"])
    make_session(io, FileStudentRepository(path)).run()
    assert "#S1 : Ann Lee" in io.printed
