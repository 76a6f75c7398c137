# models/session.py

"""
The GpaSession owns the single GpaTracker of a running program together with its PersistenceAdapter.

Each externally triggered action (add, remove, export, dump to console) maps onto exactly one method here.
Mutations are saved immediately after they succeed, and registered observers are called afterwards so a display
surface can re-render from `assignments` and `gpa` without the data layer knowing how it is drawn.
"""

from __future__ import annotations

import json
import logging
import os
from textwrap import dedent
from typing import Any, Callable

import core.formatters as formatters
from core.response import ErrorCode, Response
from core.utils import utc_timestamp
import models.aggregator as aggregator
from models.assignment import Assignment
from models.gpa_tracker import GpaTracker
from models.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)

Observer = Callable[["GpaSession"], None]


class GpaSession:

    def __init__(self, tracker: GpaTracker, persistence: PersistenceAdapter):
        self._tracker = tracker
        self._persistence = persistence
        self._observers: list[Observer] = []

    @classmethod
    def open(cls, persistence: PersistenceAdapter) -> GpaSession:
        return cls(persistence.load(), persistence)

    # === properties ===

    @property
    def tracker(self) -> GpaTracker:
        return self._tracker

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return self._tracker.assignments

    @property
    def gpa(self) -> float:
        return aggregator.average_grade(self._tracker.assignments)

    # === observers ===

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    # === triggers ===

    def add_assignment(self, name: Any, grade: Any) -> Response:
        """
        Adds an assignment, saves the tracker, and notifies observers.

        Returns:
            The `Response` from `GpaTracker.add_assignment()`; a failed save does not turn a successful add into a failure.
        """
        response = self._tracker.add_assignment(name, grade)

        if response.success:
            self._persist()
            self._notify()

        return response

    def remove_assignment(self, id: int) -> Response:
        """
        Removes an assignment by id, saves the tracker, and notifies observers.

        Returns:
            The `Response` from `GpaTracker.remove_assignment()`.
        """
        response = self._tracker.remove_assignment(id)

        if response.success:
            self._persist()
            self._notify()

        return response

    def export_data(self) -> dict[str, Any]:
        assignments = self._tracker.assignments

        return {
            "assignments": [a.to_dict() for a in assignments],
            "gpa": aggregator.average_grade(assignments),
            "totalAssignments": len(assignments),
            "exportDate": utc_timestamp(),
        }

    def export_to_file(self, dir_path: str, filename: str | None = None) -> Response:
        """
        Writes the export blob as indented JSON into `dir_path`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the file was written.
                - error (ErrorCode | str | None): `ErrorCode.INTERNAL_ERROR` if the file cannot be written.
                - status_code (int | None): 200 on success, 400 on failure.
                - data (dict | None): On success, "path" (str) is the written file path.

        Notes:
            - The caller is responsible for ensuring that `dir_path` exists.
            - An existing file with the same name is overwritten.
        """
        path = os.path.join(dir_path, filename or formatters.format_export_filename())

        try:
            with open(path, "w") as f:
                json.dump(self.export_data(), f, indent=2)

        except OSError as e:
            logger.error("Export to %s failed: %s", path, e)
            return Response.fail(
                detail=f"Failed to write export file: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        logger.info("Exported %d assignments to %s", self._tracker.count, path)

        return Response.succeed(
            detail=f"Data exported to {path}",
            data={
                "path": path,
            },
        )

    def dump_to_console(self) -> str:
        """
        Builds the plain-text report of every assignment, the GPA, and summary statistics.

        Notes:
            - This method is read-only; printing is left to the caller.
        """
        assignments = self._tracker.assignments
        summary = aggregator.summarize(assignments)

        lines = [formatters.format_banner_text("GPA CALCULATOR DATA")]

        if not assignments:
            lines.append("No assignments recorded.")

        for a in assignments:
            lines.append(
                f"{a.id:>3}. {a.name:<24} | {formatters.format_grade(a.grade):>4} | "
                f"added {formatters.format_date_added(a.date_added)}"
            )

        lines.append(
            dedent(
                f"""\

                GPA: {formatters.format_gpa(summary['gpa'])} ({summary['letter']})
                Total: {formatters.format_count(summary['count'], 'assignment')}
                Highest: {formatters.format_grade(summary['highest'])}
                Lowest: {formatters.format_grade(summary['lowest'])}"""
            )
        )

        for bucket, count in summary["histogram"].items():
            lines.append(f"  {bucket}: {'#' * count} ({count})")

        lines.append("\nRaw export data:")
        lines.append(json.dumps(self.export_data(), indent=2))

        return "\n".join(lines)

    # === helpers ===

    def _persist(self) -> Response:
        save_response = self._persistence.save(self._tracker)

        if not save_response.success:
            logger.warning("Continuing without persistence: %s", save_response.detail)

        return save_response
