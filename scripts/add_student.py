#!/usr/bin/env python3
"""
Add (or replace) one student in the configured roster backend.

Usage:
  python scripts/add_student.py --id S1 [--first Ann] [--last Lee] [--cohort 2024A]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the roster package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.app import build_repository  # noqa: E402
from roster.core.config import get_settings  # noqa: E402
from roster.domain.students import Student  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a student to the roster")
    ap.add_argument("--id", required=True, dest="student_id", help="Student id (e.g. S1)")
    ap.add_argument("--first", default="", help="First name")
    ap.add_argument("--last", default="", help="Last name")
    ap.add_argument("--cohort", default="", help="Cohort (e.g. 2024A)")
    args = ap.parse_args()

    repo = build_repository(get_settings())
    student = Student.from_fields(args.student_id, args.first, args.last, args.cohort)
    replaced = repo.get_student(student.student_id) is not None
    repo.add_student(student.student_id, student)

    print("OK: student replaced" if replaced else "OK: student added")
    print(f"  ID: {student.student_id}")
    if student.full_name:
        print(f"  Name: {student.full_name}")
    if student.cohort:
        print(f"  Cohort: {student.cohort}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
