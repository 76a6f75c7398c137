# cli/formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

import core.formatters as formatters
import models.aggregator as aggregator
from models.assignment import Assignment

# === assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    grade = formatters.format_grade(assignment.grade)

    return f"{assignment.name:<24} | {grade:>4} | Added on {formatters.format_date_added(assignment.date_added)}"


def format_assignment_multiline(assignment: Assignment) -> str:
    return dedent(
        f"""\
        Assignment:
        ... Name: {assignment.name}
        ... Grade: {formatters.format_grade(assignment.grade)} ({aggregator.letter_grade(assignment.grade)})
        ... Added on: {formatters.format_date_added(assignment.date_added)}
        ... ID: {assignment.id}"""
    )


# === summary formatters ===


def format_gpa_summary(gpa: float, count: int) -> str:
    letter = aggregator.letter_grade(gpa) if count else "--"

    return f"GPA: {formatters.format_gpa(gpa)} ({letter}) | {formatters.format_count(count, 'assignment')}"


def format_empty_state() -> str:
    return "No assignments added yet. Start by adding your first assignment!"
