# tests/test_aggregator.py

import pytest

from models import aggregator
from models.assignment import Assignment


def make_records(*grades):
    return [
        Assignment(id=i, name=f"a{i}", grade=grade, date_added="2025-01-01")
        for i, grade in enumerate(grades, 1)
    ]


def test_average_grade_empty():
    assert aggregator.average_grade([]) == 0


def test_average_grade_example(sample_tracker):
    gpa = aggregator.average_grade(sample_tracker.assignments)

    assert gpa == 4.13
    assert aggregator.letter_grade(gpa) == "B"


@pytest.mark.parametrize(
    "grades",
    [(5,), (0, 5), (1.1, 2.2, 3.3), (4.0, 3.0, 3.0), (2.5, 2.5, 2.5, 0.1)],
)
def test_average_grade_is_rounded_mean(grades):
    expected = round(sum(grades) / len(grades), 2)

    assert aggregator.average_grade(make_records(*grades)) == pytest.approx(expected)


def test_average_grade_rounds_half_up():
    # 4.125 and 2.675 are both ties at two decimals
    assert aggregator.average_grade(make_records(4.0, 4.25)) == 4.13
    assert aggregator.round_half_up(2.675) == 2.68
    assert aggregator.round_half_up(0.005) == 0.01


@pytest.mark.parametrize(
    "numeric_grade, letter",
    [
        (5.0, "A"),
        (4.5, "A"),
        (4.49, "B"),
        (3.5, "B"),
        (3.49, "C"),
        (2.5, "C"),
        (2.49, "D"),
        (1.5, "D"),
        (1.49, "F"),
        (0, "F"),
    ],
)
def test_letter_grade_thresholds(numeric_grade, letter):
    assert aggregator.letter_grade(numeric_grade) == letter


def test_grade_histogram():
    records = make_records(4.5, 3.8, 4.2, 4.0, 0.9, 5.0)

    assert aggregator.grade_histogram(records) == {0: 1, 3: 1, 4: 3, 5: 1}
    assert list(aggregator.grade_histogram(records)) == [0, 3, 4, 5]


def test_grade_histogram_empty():
    assert aggregator.grade_histogram([]) == {}


def test_summarize(sample_tracker):
    summary = aggregator.summarize(sample_tracker.assignments)

    assert summary == {
        "count": 4,
        "gpa": 4.13,
        "letter": "B",
        "highest": 4.5,
        "lowest": 3.8,
        "histogram": {3: 1, 4: 3},
    }


def test_summarize_empty():
    summary = aggregator.summarize([])

    assert summary["count"] == 0
    assert summary["gpa"] == 0
    assert summary["highest"] is None
    assert summary["lowest"] is None
    assert summary["histogram"] == {}
