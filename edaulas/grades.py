"""Grade averages for a fixed list, a students-by-subjects matrix, and a student record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

VECTOR_SIZE = 5
NUM_STUDENTS = 3
NUM_SUBJECTS = 4
GRADES_PER_STUDENT = 5


def average(values: Iterable[float]) -> float:
    """Arithmetic mean of the values; an empty input has no mean."""
    items = list(values)
    if not items:
        raise ValueError("cannot average an empty sequence")
    return sum(items) / len(items)


def row_averages(matrix: Iterable[Sequence[float]]) -> list[float]:
    """Mean of each row, in row order."""
    return [average(row) for row in matrix]


@dataclass
class Student:
    """A student's name, age, identification number and grades."""

    name: str
    age: int
    id_number: int
    grades: list[float] = field(default_factory=list)

    def describe(self) -> str:
        """Text report of the student's data, one grade per subject line."""
        lines = [
            "",
            "Dados do Estudante:",
            f"Nome: {self.name}",
            f"Idade: {self.age}",
            f"Numero de Identificacao: {self.id_number}",
            "Notas:",
        ]
        lines.extend(
            f"Disciplina {number}: {grade:.2f}"
            for number, grade in enumerate(self.grades, start=1)
        )
        return "\n".join(lines) + "\n"