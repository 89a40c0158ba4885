from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Make the roster package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core import config as core_config  # noqa: E402
from roster.ui.user_io import BaseUserIO  # noqa: E402


class ScriptedIO(BaseUserIO):
    """UserIO that answers prompts from a fixed list and records output."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers: List[str] = list(answers)
        self.printed: List[str] = []
        self.prompts: List[str] = []

    def print(self, line: str) -> None:
        self.printed.append(line)

    def read_string(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return self.answers.pop(0)


@pytest.fixture()
def scripted_io():
    return ScriptedIO


@pytest.fixture(autouse=True)
def _fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite roster with the students table created."""
    from roster.db import dispose_engines
    from roster.db.create_tables import create_all

    db_file = tmp_path / "roster.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    dispose_engines()
    create_all()

    yield db_file

    # release pooled connections so the file can be removed on Windows too
    dispose_engines()
