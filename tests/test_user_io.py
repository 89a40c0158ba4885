from __future__ import annotations

import builtins

from roster.ui.user_io import ConsoleIO


def test_read_int_reprompts_until_in_range(scripted_io):
    io = scripted_io(["abc", "", "9", "0", "3"])
    assert io.read_int("Pick", 1, 5) == 3
    assert io.prompts == ["Pick"] * 5
    assert io.printed.count("Please enter a whole number.") == 2
    assert io.printed.count("Please enter a number between 1 and 5.") == 2


def test_read_int_accepts_bounds_and_whitespace(scripted_io):
    io = scripted_io([" 1 ", "5"])
    assert io.read_int("Pick", 1, 5) == 1
    assert io.read_int("Pick", 1, 5) == 5
    assert io.printed == []


def test_console_io_uses_input_and_print(monkeypatch, capsys):
    answers = iter(["x", "2"])
    seen = []

    def fake_input(prompt):
        seen.append(prompt)
        return next(answers)

    monkeypatch.setattr(builtins, "input", fake_input)
    io = ConsoleIO()
    assert io.read_int("Choice", 1, 3) == 2
    io.print("hello")

    assert seen == ["Choice ", "Choice "]
    out = capsys.readouterr().out
    assert "Please enter a whole number." in out
    assert out.endswith("hello\n")
