from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SubjectEntry:
    marks: float
    credit_hours: float


@dataclass(frozen=True)
class GradeResult:
    grade_point: float
    letter_grade: str


@dataclass(frozen=True)
class EntryIssue:
    index: int
    field: str


@dataclass(frozen=True)
class Success:
    overall_gpa: float
    grades: tuple[GradeResult, ...] = ()
    total_credit_hours: float = 0.0


@dataclass(frozen=True)
class NoEntries:
    pass


@dataclass(frozen=True)
class InvalidEntries:
    issues: tuple[EntryIssue, ...]

    @property
    def invalid_indexes(self) -> list[int]:
        return sorted({issue.index for issue in self.issues})


AggregationOutcome = Union[Success, NoEntries, InvalidEntries]
