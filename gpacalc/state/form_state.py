from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gpacalc.config.settings import CREDIT_HOUR_OPTIONS, settings
from gpacalc.domain.logic.gpa import aggregate
from gpacalc.domain.logic.parsing import entry_from_text
from gpacalc.domain.models.entities import (
    AggregationOutcome,
    InvalidEntries,
    NoEntries,
    SubjectEntry,
    Success,
)

logger = logging.getLogger(__name__)

INVALID_TEXT = "Invalid Input"
EMPTY_TEXT = "0.00"
RESET_TEXT = "--"


@dataclass
class SubjectRow:
    row_id: int
    name: str
    marks_text: str = ""
    credit_hours: int = 3

    def to_entry(self) -> SubjectEntry:
        return entry_from_text(self.marks_text, self.credit_hours)


@dataclass
class FormState:
    default_credit_hours: int = settings.default_credit_hours
    rows: List[SubjectRow] = field(default_factory=list)
    counter: int = 0
    just_reset: bool = False

    def add_row(self) -> SubjectRow:
        self.counter += 1
        row = SubjectRow(
            row_id=self.counter,
            name=f"Subject {self.counter}",
            credit_hours=self.default_credit_hours,
        )
        self.rows.append(row)
        return row

    def get_row(self, row_id: int) -> SubjectRow:
        for row in self.rows:
            if row.row_id == row_id:
                return row
        raise KeyError(f"Unknown subject row: {row_id}")

    def remove_row(self, row_id: int) -> None:
        self.rows.remove(self.get_row(row_id))

    def update_row(
        self,
        row_id: int,
        *,
        name: Optional[str] = None,
        marks_text: Optional[str] = None,
        credit_hours: Optional[int] = None,
    ) -> SubjectRow:
        row = self.get_row(row_id)
        if name is not None:
            row.name = name
        if marks_text is not None:
            row.marks_text = marks_text
        if credit_hours is not None:
            row.credit_hours = credit_hours
        return row

    def clear_all(self) -> SubjectRow:
        self.rows.clear()
        self.counter = 0
        row = self.add_row()
        self.just_reset = True
        logger.info("Form cleared")
        return row

    def entries(self) -> list[SubjectEntry]:
        return [row.to_entry() for row in self.rows]

    def calculate(self) -> AggregationOutcome:
        self.just_reset = False
        return aggregate(self.entries())

    def status_text(self) -> str:
        """Result label text; "--" until the next calculation after a reset."""
        if self.just_reset:
            return RESET_TEXT
        return format_outcome(aggregate(self.entries()))


def format_outcome(outcome: AggregationOutcome, *, after_reset: bool = False) -> str:
    if isinstance(outcome, Success):
        return f"{outcome.overall_gpa:.2f}"
    if isinstance(outcome, InvalidEntries):
        return INVALID_TEXT
    if isinstance(outcome, NoEntries):
        return RESET_TEXT if after_reset else EMPTY_TEXT
    raise TypeError(f"Unsupported outcome: {outcome!r}")
