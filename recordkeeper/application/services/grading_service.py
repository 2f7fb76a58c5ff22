from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from recordkeeper.domain.entities.student import Student
from recordkeeper.infrastructure.delimited_text import read_students, write_report

logger = logging.getLogger(__name__)


class StudentResultProcessor:
    """Turns a student results file into a graded report."""

    def read_students_from_file(self, input_path: Path | str) -> list[Student]:
        return read_students(input_path)

    def write_report_to_file(self, students: Sequence[Student], output_path: Path | str) -> None:
        write_report(students, output_path)

    def process(self, input_path: Path | str, output_path: Path | str) -> list[Student]:
        """Read, grade and write in one pass. Nothing is written if reading fails."""
        students = self.read_students_from_file(input_path)
        self.write_report_to_file(students, output_path)
        logger.info(
            "Grades processed",
            extra={"input": str(input_path), "output": str(output_path), "records": len(students)},
        )
        return students
