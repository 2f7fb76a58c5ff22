from __future__ import annotations

from pathlib import Path

import pytest

from recordkeeper.domain.entities.student import Student
from recordkeeper.domain.errors import (
    FormatError,
    InvalidFieldError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
)
from recordkeeper.domain.value_objects.ids import StudentId
from recordkeeper.infrastructure import delimited_text


def test_parse_lines_trims_and_skips_blanks() -> None:
    students = list(
        delimited_text.parse_student_lines(
            ["101, Alice Smith , 84\n", "\n", "   \n", "102,Bob Johnson,59,extra\n"]
        )
    )
    assert students == [
        Student(id=StudentId(101), full_name="Alice Smith", score=84),
        Student(id=StudentId(102), full_name="Bob Johnson", score=59),
    ]


def test_two_fields_is_missing_field_with_line_number() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        list(delimited_text.parse_student_lines(["101,Alice,90", "", "102,Bob"]))
    assert exc_info.value.line_number == 3
    assert str(exc_info.value) == "Line 3: missing fields."


def test_non_numeric_score_names_score_field() -> None:
    with pytest.raises(InvalidFieldError) as exc_info:
        list(delimited_text.parse_student_lines(["101,Alice,notanumber"]))
    assert exc_info.value.field == "score"
    assert exc_info.value.line_number == 1


def test_gender_in_score_column_is_format_error() -> None:
    with pytest.raises(FormatError) as exc_info:
        list(delimited_text.parse_student_lines(["", "101,Alice Smith,Female"]))
    assert exc_info.value.line_number == 2
    assert "Score 'Female'" in str(exc_info.value)


def test_non_numeric_id_names_id_field() -> None:
    with pytest.raises(InvalidFieldError) as exc_info:
        delimited_text.parse_student_line("A1,Alice,90", 7)
    assert exc_info.value.field == "id"
    assert str(exc_info.value) == "Line 7: ID 'A1' is not a valid integer."


def test_read_and_write_files(tmp_path: Path) -> None:
    src = tmp_path / "students_input.txt"
    src.write_text("101,Alice Smith,84\n102,Bob Johnson,72\n\n103,Clara Williams,45\n")
    students = delimited_text.read_students(src)
    assert [s.id for s in students] == [101, 102, 103]

    out = tmp_path / "reports" / "students_report.txt"
    delimited_text.write_report(students, out)
    assert out.read_text().splitlines() == [
        "Alice Smith (ID: 101): Score = 84, Grade = A",
        "Bob Johnson (ID: 102): Score = 72, Grade = B",
        "Clara Williams (ID: 103): Score = 45, Grade = F",
    ]


def test_missing_input_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        delimited_text.read_students(tmp_path / "nope.txt")


def test_io_failures_are_persistence_errors(tmp_path: Path) -> None:
    with pytest.raises(PersistenceError):
        delimited_text.read_students(tmp_path)
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(PersistenceError):
        delimited_text.write_report([], blocker / "report.txt")


def test_non_utf8_input_is_format_error(tmp_path: Path) -> None:
    src = tmp_path / "students_input.txt"
    src.write_bytes(b"101,Al\xffce,80\n")
    with pytest.raises(FormatError) as exc_info:
        delimited_text.read_students(src)
    assert "not valid UTF-8" in str(exc_info.value)


def test_quotes_are_plain_characters() -> None:
    student = delimited_text.parse_student_line('101,"Alice,80', 1)
    assert student.full_name == '"Alice'
    assert student.score == 80


@pytest.mark.parametrize("score", ["1_000", "٨٠", "8 0", "80.0", ""])
def test_scores_must_be_plain_ascii_integers(score: str) -> None:
    with pytest.raises(InvalidFieldError) as exc_info:
        delimited_text.parse_student_line(f"101,Alice,{score}", 5)
    assert exc_info.value.field == "score"
    assert exc_info.value.line_number == 5


def test_signed_scores_are_accepted() -> None:
    assert delimited_text.parse_student_line("101,Alice,-5", 1).score == -5
    assert delimited_text.parse_student_line("+7,Bob,+90", 1).id == 7
