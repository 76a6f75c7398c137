# models/aggregator.py

"""
Read-only aggregate calculations over assignment grades.

Every function here is pure: inputs are never mutated and nothing is cached.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from models.assignment import Assignment

# (minimum grade, letter), checked from the top down
LETTER_THRESHOLDS: list[tuple[float, str]] = [
    (4.5, "A"),
    (3.5, "B"),
    (2.5, "C"),
    (1.5, "D"),
]
FAILING_LETTER = "F"


def round_half_up(value: float, places: int = 2) -> float:
    # go through str() so 2.675 rounds as written rather than as its binary approximation
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def average_grade(records: Iterable[Assignment]) -> float:
    """
    Returns the arithmetic mean of all grades, rounded to two decimal places (half away from zero).

    An empty input averages to 0.
    """
    grades = [record.grade for record in records]

    if not grades:
        return 0

    return round_half_up(sum(grades) / len(grades))


def letter_grade(numeric_grade: float) -> str:
    for threshold, letter in LETTER_THRESHOLDS:
        if numeric_grade >= threshold:
            return letter

    return FAILING_LETTER


def grade_histogram(records: Iterable[Assignment]) -> dict[int, int]:
    """
    Counts grades per integer bucket, where the bucket is the floor of the grade.

    Only buckets that occur are present; keys are returned in ascending order.
    """
    histogram: dict[int, int] = {}

    for record in records:
        bucket = math.floor(record.grade)
        histogram[bucket] = histogram.get(bucket, 0) + 1

    return dict(sorted(histogram.items()))


def summarize(records: Iterable[Assignment]) -> dict[str, Any]:
    records = list(records)
    grades = [record.grade for record in records]
    gpa = average_grade(records)

    return {
        "count": len(records),
        "gpa": gpa,
        "letter": letter_grade(gpa),
        "highest": max(grades) if grades else None,
        "lowest": min(grades) if grades else None,
        "histogram": grade_histogram(records),
    }
