"""One-off migration script: roster file -> SQL database."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the roster package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.config import get_settings  # noqa: E402
from roster.db.create_tables import create_all  # noqa: E402
from roster.repositories.file_repository import FileStudentRepository  # noqa: E402
from roster.repositories.sql_repository import SQLStudentRepository  # noqa: E402


def migrate(source: Path) -> int:
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    create_all(get_settings())
    file_repo = FileStudentRepository(source)
    sql_repo = SQLStudentRepository()
    count = 0
    for student in file_repo.get_all_students():
        sql_repo.add_student(student.student_id, student)
        count += 1
    return count


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy a roster file into DATABASE_URL")
    ap.add_argument("--source", help="Roster file (default: ROSTER_FILE)")
    args = ap.parse_args()
    source = Path(args.source or get_settings().roster_file)
    count = migrate(source)
    print(f"Migrated {count} students from {source} to the SQL backend.")


if __name__ == "__main__":
    main()
