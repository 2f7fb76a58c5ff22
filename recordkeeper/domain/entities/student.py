from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..value_objects.enums import Grade
from ..value_objects.ids import StudentId

# Inclusive lower bounds, checked top-down; everything above 100 falls through to F.
GRADE_BANDS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)
MAX_SCORE = 100


def grade_for(score: int) -> Grade:
    """Return the letter grade for ``score``; values outside 0..100 get F."""
    if score > MAX_SCORE:
        return Grade.F
    for lower, grade in GRADE_BANDS:
        if score >= lower:
            return grade
    return Grade.F


class Student(BaseModel):
    id: StudentId
    full_name: str
    score: int

    model_config = ConfigDict(frozen=True)

    @property
    def grade(self) -> Grade:
        return grade_for(self.score)

    def summary(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): Score = {self.score}, "
            f"Grade = {self.grade.value}"
        )
