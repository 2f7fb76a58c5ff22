"""Reader and report writer for the comma-separated student results format.

Input lines look like ``id,name,score``. Blank lines are skipped, fields are
trimmed and anything after the third field is ignored.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from ..domain.entities.student import Student
from ..domain.errors import (
    FormatError,
    InvalidFieldError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
)
from ..domain.value_objects.ids import StudentId

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = 3
# ASCII digits with an optional sign; no digit separators.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str, label: str, line_number: int) -> int:
    if not _INTEGER.fullmatch(value):
        raise InvalidFieldError(
            f"{label} '{value}' is not a valid integer.",
            line_number=line_number,
            field=label.lower(),
        )
    return int(value)


def parse_student_line(line: str, line_number: int) -> Student:
    """Parse one non-blank line; raises a ``FormatError`` subclass on bad input."""
    parts = [p.strip() for p in line.split(",")]
    if len(parts) < REQUIRED_FIELDS:
        raise MissingFieldError("missing fields.", line_number=line_number)

    id_part, name_part, score_part = parts[:REQUIRED_FIELDS]
    student_id = _parse_int(id_part, "ID", line_number)
    score = _parse_int(score_part, "Score", line_number)
    return Student(id=StudentId(student_id), full_name=name_part, score=score)


def parse_student_lines(lines: Iterable[str]) -> Iterator[Student]:
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_student_line(line.rstrip("\r\n"), line_number)


def read_students(path: Path | str) -> list[Student]:
    """Read every student record from ``path`` in file order."""
    src = Path(path)
    try:
        with src.open("r", encoding="utf-8", newline="") as fh:
            students = list(parse_student_lines(fh))
    except UnicodeDecodeError as exc:
        raise FormatError(f"{src} is not valid UTF-8: {exc}") from exc
    except FileNotFoundError:
        raise NotFoundError(f"Could not find file '{src}'.") from None
    except OSError as exc:
        raise PersistenceError(f"Error reading {src}: {exc}") from exc
    logger.info("Students read", extra={"path": str(src), "records": len(students)})
    return students


def write_report(students: Sequence[Student], path: Path | str) -> None:
    """Write one summary line per student, overwriting ``path``."""
    dest = Path(path)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8", newline="\n") as fh:
            for student in students:
                fh.write(student.summary() + "\n")
    except OSError as exc:
        raise PersistenceError(f"Error writing {dest}: {exc}") from exc
    logger.info("Report written", extra={"path": str(dest), "records": len(students)})
