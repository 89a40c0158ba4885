"""
I/O capability consumed by the roster session.

UserIO is the seam the session and view talk to. ConsoleIO wires it to
stdin/stdout; tests plug in scripted implementations.
"""

from __future__ import annotations

from typing import Protocol


class UserIO(Protocol):
    """Line-oriented user interaction."""

    def print(self, line: str) -> None:
        ...

    def read_string(self, prompt: str) -> str:
        ...

    def read_int(self, prompt: str, min_value: int, max_value: int) -> int:
        ...


class BaseUserIO:
    """Provides the bounded integer reader on top of ``read_string``."""

    invalid_number_message = "Please enter a whole number."
    out_of_range_message = "Please enter a number between {min} and {max}."

    def print(self, line: str) -> None:
        raise NotImplementedError

    def read_string(self, prompt: str) -> str:
        raise NotImplementedError

    def read_int(self, prompt: str, min_value: int, max_value: int) -> int:
        """
        Ask until the answer is an integer in ``[min_value, max_value]``.

        Bad input is never reported to the caller; the prompt simply repeats.
        """
        while True:
            raw = self.read_string(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self.print(self.invalid_number_message)
                continue
            if min_value <= value <= max_value:
                return value
            self.print(self.out_of_range_message.format(min=min_value, max=max_value))


class ConsoleIO(BaseUserIO):
    """UserIO over the process console."""

    def print(self, line: str) -> None:
        print(line)

    def read_string(self, prompt: str) -> str:
        return input(f"{prompt} ")
