from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Iterable

from gpacalc.domain.logic.grading import evaluate, is_valid_marks, round2
from gpacalc.domain.models.entities import (
    AggregationOutcome,
    EntryIssue,
    GradeResult,
    InvalidEntries,
    NoEntries,
    SubjectEntry,
    Success,
)

logger = logging.getLogger(__name__)


def is_valid_credit_hours(credit_hours: float) -> bool:
    if isinstance(credit_hours, bool) or not isinstance(credit_hours, (int, float)):
        return False
    try:
        value = float(credit_hours)
    except OverflowError:
        return False
    return math.isfinite(value) and value > 0


def validate_entries(entries: Iterable[SubjectEntry]) -> list[EntryIssue]:
    """Check every entry; one issue per failing field, in entry order."""
    issues: list[EntryIssue] = []
    for index, entry in enumerate(entries):
        if not is_valid_marks(entry.marks):
            issues.append(EntryIssue(index, "marks"))
        if not is_valid_credit_hours(entry.credit_hours):
            issues.append(EntryIssue(index, "credit_hours"))
    return issues


def aggregate(entries: Iterable[SubjectEntry]) -> AggregationOutcome:
    """
    Credit-weighted overall GPA of a batch of subjects.
    overall = Σ(grade_point * credit_hours) / Σ(credit_hours)
    A single invalid entry invalidates the whole batch.
    """
    entries = list(entries)
    if not entries:
        logger.debug("aggregate: no entries")
        return NoEntries()

    issues = validate_entries(entries)
    if issues:
        logger.debug("aggregate: %d invalid field(s) across %d entries", len(issues), len(entries))
        return InvalidEntries(tuple(issues))

    weighted = Decimal(0)
    total_credits = Decimal(0)
    grades: list[GradeResult] = []
    for entry in entries:
        grade = evaluate(entry.marks)
        credits = Decimal(repr(float(entry.credit_hours)))
        weighted += Decimal(repr(grade.grade_point)) * credits
        total_credits += credits
        grades.append(grade)

    if total_credits == 0:
        return NoEntries()

    overall = round2(weighted / total_credits)
    logger.debug("aggregate: %d entries, overall GPA %.2f", len(entries), overall)
    return Success(overall_gpa=overall, grades=tuple(grades), total_credit_hours=float(total_credits))
