from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from gpacalc.domain.models.entities import GradeResult

# (low, base_point, letter); every band except A+ adds STEP per mark above low.
GRADE_BANDS: list[tuple[int, str, str]] = [
    (90, "4.00", "A+"),
    (80, "3.50", "A"),
    (70, "3.00", "B"),
    (60, "2.50", "C"),
    (50, "2.00", "D"),
    (0, "0.00", "F"),
]

STEP = Decimal("0.05")
FLAT_LETTERS = ("A+", "F")
TWO_PLACES = Decimal("0.01")


def _to_decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def round2(value: float | Decimal) -> float:
    """Round half away from zero to two decimal places.

    Floats go through their shortest repr first, so 3.995 rounds to 4.00
    even though its binary value sits just below it.
    """
    if not isinstance(value, Decimal):
        value = _to_decimal(value)
    return float(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def is_valid_marks(marks: float) -> bool:
    if isinstance(marks, bool) or not isinstance(marks, (int, float)):
        return False
    try:
        value = float(marks)
    except OverflowError:
        return False
    return math.isfinite(value) and 0 <= value <= 100


def evaluate(marks: float) -> GradeResult:
    if not is_valid_marks(marks):
        raise ValueError(f"Marks must be a number between 0 and 100, got {marks!r}")

    exact = _to_decimal(marks)
    for low, base, letter in GRADE_BANDS:
        if exact >= low:
            point = Decimal(base)
            if letter not in FLAT_LETTERS:
                point += STEP * (exact - low)
            return GradeResult(grade_point=round2(point), letter_grade=letter)
    return GradeResult(grade_point=0.0, letter_grade="F")
