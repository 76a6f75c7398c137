# models/gpa_tracker.py

"""
The GpaTracker model is the central data object of the program and represents the "source of truth" for all assignments.

Assignments are kept in insertion order alongside a monotonic id counter. The counter only ever grows, so ids of removed
assignments are never reissued.

Provides functions for adding, removing, and finding assignments, for verifying unique names before adding, and for
converting the tracker to and from the snapshot dictionary written by the persistence layer.
Includes a session-scoped unsaved_changes marker that is set by every successful mutation.
"""

from __future__ import annotations

import logging
from typing import Any

from core.response import ErrorCode, Response
from core.utils import today_str, utc_timestamp
from models.assignment import Assignment

logger = logging.getLogger(__name__)


class GpaTracker:

    def __init__(self, assignments: list[Assignment] | None = None, id_counter: int = 1):
        self._assignments: list[Assignment] = list(assignments or [])
        self._id_counter: int = id_counter
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return tuple(self._assignments)

    @property
    def assignment_id_counter(self) -> int:
        return self._id_counter

    @property
    def count(self) -> int:
        return len(self._assignments)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def mark_clean(self) -> None:
        self._unsaved_changes = False

    # === persistence and import ===

    def to_dict(self, last_updated: str | None = None) -> dict[str, Any]:
        return {
            "assignments": [a.to_dict() for a in self._assignments],
            "assignmentIdCounter": self._id_counter,
            "lastUpdated": last_updated or utc_timestamp(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GpaTracker:
        """
        Rebuilds a `GpaTracker` from a snapshot dictionary.

        Args:
            data (dict[str, Any]): A snapshot as produced by `to_dict()`.

        Returns:
            A new `GpaTracker` holding the deserialized assignments.

        Raises:
            ValueError: If the snapshot has the wrong shape, or holds duplicate ids or names.
            TypeError: If an assignment record is missing fields or has mistyped ones.
            KeyError: If an assignment record is missing a required key.

        Notes:
            - Fails fast: a single invalid record aborts the whole import.
            - A missing or stale counter is repaired so that it is always greater than every stored id.
        """
        if not isinstance(data, dict):
            raise ValueError("Snapshot must be a dictionary.")

        raw_assignments = data.get("assignments", [])

        if not isinstance(raw_assignments, list):
            raise ValueError("Snapshot 'assignments' must be a list.")

        tracker = cls()

        for record_dict in raw_assignments:
            if not isinstance(record_dict, dict):
                raise ValueError(f"Invalid assignment record: {record_dict!r}")

            assignment = Assignment.from_dict(record_dict)

            if any(a.id == assignment.id for a in tracker._assignments):
                raise ValueError(f"Duplicate assignment id in snapshot: {assignment.id}")

            tracker.require_unique_assignment_name(assignment.name)
            tracker._assignments.append(assignment)

        stored_counter = data.get("assignmentIdCounter", 1)

        if isinstance(stored_counter, bool) or not isinstance(stored_counter, int):
            raise ValueError(f"Invalid assignment id counter: {stored_counter!r}")

        highest_id = max((a.id for a in tracker._assignments), default=0)
        tracker._id_counter = max(stored_counter, highest_id + 1, 1)

        return tracker

    # === data lookup ===

    def find_assignment_by_id(self, id: int) -> Response:
        """
        Looks up an assignment by its id.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if a matching assignment exists.
                - error (ErrorCode | str | None): `ErrorCode.NOT_FOUND` if no assignment has the given id.
                - status_code (int | None): 200 on success, 404 if not found.
                - data (dict | None): On success, "record" (Assignment) is the matching assignment.

        Notes:
            - This method is read-only.
        """
        for assignment in self._assignments:
            if assignment.id == id:
                return Response.succeed(data={"record": assignment})

        return Response.fail(
            detail=f"No assignment found with id {id}.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    def find_assignment_by_query(self, query: str) -> Response:
        """
        Returns all assignments whose name contains `query`, ignoring case.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True; an empty match list is not a failure.
                - data (dict | None): "records" (list[Assignment]) holds the matches in insertion order.

        Notes:
            - This method is read-only. A blank query matches every assignment.
        """
        normalized = self._normalize(query)

        matching_assignments = [
            a for a in self._assignments if normalized in self._normalize(a.name)
        ]

        return Response.succeed(
            data={
                "records": matching_assignments,
            },
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the tracker as having unsaved changes.
        """
        self._unsaved_changes = True

    def add_assignment(self, name: Any, grade: Any) -> Response:
        """
        Validates input, creates a new `Assignment`, and appends it to the tracker.

        Args:
            name (Any): The assignment name; surrounding whitespace is removed.
            grade (Any): The grade, coerced to float and required to lie within 0 to 5.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the assignment was created and appended.
                    - False if any validation fails.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_NAME` if the name is blank.
                    - `ErrorCode.OUT_OF_RANGE` if the grade is not a finite number in range.
                    - `ErrorCode.DUPLICATE_NAME` if the name already exists (case-insensitive).
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The newly added `Assignment` object.
                    - On failure:
                        - None

        Notes:
            - Validation runs in order: name, grade, uniqueness. The first failure wins.
            - A failed add leaves the tracker untouched. On success the id counter is incremented and `_mark_dirty()` is called.
        """
        try:
            clean_name = Assignment.validate_name_input(name)

        except (TypeError, ValueError) as e:
            return Response.fail(detail=str(e), error=ErrorCode.EMPTY_NAME)

        try:
            clean_grade = Assignment.validate_grade_input(grade)

        except (TypeError, ValueError) as e:
            return Response.fail(detail=str(e), error=ErrorCode.OUT_OF_RANGE)

        try:
            self.require_unique_assignment_name(clean_name)

        except ValueError as e:
            return Response.fail(detail=str(e), error=ErrorCode.DUPLICATE_NAME)

        try:
            assignment = Assignment(
                id=self._id_counter,
                name=clean_name,
                grade=clean_grade,
                date_added=today_str(),
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        self._assignments.append(assignment)
        self._id_counter += 1
        self._mark_dirty()

        logger.info("Assignment added: %r", assignment)

        return Response.succeed(
            detail="Assignment added successfully!",
            data={
                "record": assignment,
            },
        )

    def remove_assignment(self, id: int) -> Response:
        """
        Removes the assignment with the given id from the tracker.

        Args:
            id (int): The id of the assignment to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the assignment was found and removed.
                    - False if no assignment has the given id.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation naming the removed assignment.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no assignment has the given id.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the assignment cannot be found
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The removed `Assignment` object.
                    - On failure:
                        - None

        Notes:
            - The order of the remaining assignments is preserved.
            - The id counter is never decremented, so the removed id is not reused.
            - This method calls `_mark_dirty()` if and only if the operation succeeds.
        """
        for index, assignment in enumerate(self._assignments):
            if assignment.id == id:
                break

        else:
            return Response.fail(
                detail=f"No matching assignment could be found for deletion: {id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        removed = self._assignments.pop(index)
        self._mark_dirty()

        logger.info("Assignment removed: %r", removed)

        return Response.succeed(
            detail=f'"{removed.name}" removed successfully',
            data={
                "record": removed,
            },
        )

    # === data validators ===

    def require_unique_assignment_name(self, name: str) -> None:
        """
        Validates that no existing assignment shares the given name.

        Args:
            name (str): The assignment name to validate for uniqueness.

        Raises:
            ValueError: If an assignment with the same normalized name already exists.
        """
        normalized = self._normalize(name)
        if any(self._normalize(a.name) == normalized for a in self._assignments):
            raise ValueError(f"Assignment name already exists: '{name}'.")

    # === helper methods ===

    def _normalize(self, input: str) -> str:
        return input.strip().casefold()

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._assignments)

    def __repr__(self) -> str:
        return f"GpaTracker({len(self._assignments)} assignments, next id {self._id_counter})"
