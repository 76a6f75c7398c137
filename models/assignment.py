# models/assignment.py

"""
The Assignment model represents a single named, graded entry that counts toward the GPA.

Assignments are immutable once created: the GpaTracker assigns the id and the date added, and records are only ever removed.
"""

from __future__ import annotations

import math
from typing import Any

MIN_GRADE = 0.0
MAX_GRADE = 5.0


class Assignment:

    def __init__(
        self,
        id: int,
        name: str,
        grade: float,
        date_added: str,
    ):
        self._id = id
        self._name = Assignment.validate_name_input(name)
        self._grade = Assignment.validate_grade_input(grade)
        self._date_added = date_added

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def grade(self) -> float:
        return self._grade

    @property
    def date_added(self) -> str:
        return self._date_added

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "grade": self._grade,
            "dateAdded": self._date_added,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        record_id = data["id"]

        # bool is an int subclass, but never a valid id
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise TypeError(f"Assignment id must be an integer, not {record_id!r}.")

        return cls(
            id=record_id,
            name=data["name"],
            grade=data["grade"],
            date_added=str(data["dateAdded"]),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented

        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Assignment({self._id}, {self._name!r}, {self._grade}, {self._date_added!r})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: {self._name} - (ID: {self._id})"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        """
        Validates and normalizes input for an `Assignment` name.

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the input is blank after trimming.

        Notes:
            - Only surrounding whitespace is removed; the original casing is preserved.
        """
        if not isinstance(name, str):
            raise TypeError("Invalid input. Assignment name must be a string.")

        name = name.strip()

        if not name:
            raise ValueError("Invalid input. Please enter an assignment name.")

        return name

    @staticmethod
    def validate_grade_input(grade: Any) -> float:
        """
        Validates and normalizes input for an `Assignment` grade.

        Accepts any input, and then:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it lies within the grade scale (0 to 5, inclusive).

        Args:
            grade (Any): The input value to validate.

        Returns:
            The normalized grade (float).

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite, too large to cast, or outside the grade scale.
        """
        if isinstance(grade, bool):
            raise TypeError("Invalid input. Grade must be a number.")

        try:
            grade = float(grade)

        except OverflowError:
            raise ValueError("Invalid input. Grade is far outside the grade scale.")

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Grade must be a number.")

        if not math.isfinite(grade):
            raise ValueError("Invalid input. Grade must be a finite number.")

        if grade < MIN_GRADE or grade > MAX_GRADE:
            raise ValueError(
                f"Invalid input. Please enter a valid grade ({MIN_GRADE:g}-{MAX_GRADE:g})."
            )

        return grade

    @staticmethod
    def is_valid_grade_text(text: str) -> bool:
        """
        Live check for partially entered grade text.

        Blank text is treated as valid because nothing has been entered yet.
        """
        if not text.strip():
            return True

        try:
            Assignment.validate_grade_input(text)

        except (TypeError, ValueError):
            return False

        return True
