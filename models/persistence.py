# models/persistence.py

"""
Best-effort persistence of a GpaTracker snapshot in a key-value store.

The snapshot is a single JSON document written under a fixed key:

    {"assignments": [...], "assignmentIdCounter": int, "lastUpdated": ISO-8601 string}

Neither `save()` nor `load()` raises. Failures are logged and the in-memory tracker remains the source of truth for the
rest of the session.
"""

from __future__ import annotations

import json
import logging

from core.config import DEFAULT_STORAGE_KEY
from core.response import ErrorCode, Response
from core.storage import KeyValueStorage
from core.utils import utc_timestamp
from models.gpa_tracker import GpaTracker

logger = logging.getLogger(__name__)


class PersistenceAdapter:

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, tracker: GpaTracker) -> Response:
        """
        Serializes the tracker and writes it under the fixed key.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the snapshot was written.
                - detail (str | None): Description of the result for display or logging.
                - error (ErrorCode | str | None): `ErrorCode.PERSISTENCE_FAILED` if serialization or the write fails.
                - status_code (int | None): 200 on success, 500 on failure.
                - data (dict | None): On success, "lastUpdated" (str) is the timestamp written with the snapshot.

        Notes:
            - Failures are logged and never raised.
            - Marks the tracker clean on success only.
        """
        last_updated = utc_timestamp()

        try:
            payload = json.dumps(tracker.to_dict(last_updated))
            self._storage.set(self._key, payload)

        except (TypeError, ValueError) as e:
            logger.error("Could not serialize tracker data: %s", e)
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.PERSISTENCE_FAILED,
                status_code=500,
            )

        except Exception as e:
            # quota exceeded, read-only disk, unavailable backend, ...
            logger.error("Could not save data to storage: %s", e)
            return Response.fail(
                detail=f"Failed to write data to storage: {e}",
                error=ErrorCode.PERSISTENCE_FAILED,
                status_code=500,
            )

        tracker.mark_clean()

        return Response.succeed(
            detail="Data saved to storage.",
            data={
                "lastUpdated": last_updated,
            },
        )

    def load(self) -> GpaTracker:
        """
        Reads the snapshot stored under the fixed key.

        Returns:
            The deserialized `GpaTracker`, or an empty one (no assignments, counter 1) when the key is absent, the stored
            value is malformed, or the storage backend fails.
        """
        try:
            raw = self._storage.get(self._key)

        except Exception as e:
            logger.error("Could not read data from storage: %s", e)
            return GpaTracker()

        if raw is None:
            logger.debug("No saved data under %r, starting empty.", self._key)
            return GpaTracker()

        try:
            tracker = GpaTracker.from_dict(json.loads(raw))

        except (ValueError, TypeError, KeyError, RecursionError) as e:
            logger.warning("Ignoring unreadable saved data under %r: %s", self._key, e)
            return GpaTracker()

        logger.info("Loaded %d assignments from storage.", tracker.count)

        return tracker
