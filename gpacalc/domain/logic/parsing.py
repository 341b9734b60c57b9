from __future__ import annotations

import math

from gpacalc.domain.models.entities import SubjectEntry


def parse_number(text: str | float | int | None) -> float:
    """Parse form input; anything unparseable becomes NaN so validation rejects it."""
    if text is None or isinstance(text, bool):
        return math.nan
    if isinstance(text, (int, float)):
        return float(text)
    cleaned = str(text).strip()
    if not cleaned:
        return math.nan
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def entry_from_text(marks_text: str | None, credit_hours_text: str | float | None) -> SubjectEntry:
    return SubjectEntry(marks=parse_number(marks_text), credit_hours=parse_number(credit_hours_text))
