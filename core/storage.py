# core/storage.py

"""
Key-value storage backends for persisted tracker snapshots.

`KeyValueStorage` is the minimal interface the persistence layer depends on: string keys mapped to string values.
`MemoryStorage` keeps values in a dictionary and is used in tests and as an in-memory fallback.
`JsonFileStorage` keeps every key in a single JSON object on disk, standing in for browser local storage.

Backends raise on failure (`OSError`, `ValueError`); callers decide whether failures are fatal.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Interface for string key-value stores."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under `key`, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, overwriting any previous value."""
        pass


class MemoryStorage(KeyValueStorage):

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._values


class JsonFileStorage(KeyValueStorage):

    def __init__(self, file_path: str):
        self._file_path = file_path

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be strings, not {type(value).__name__}.")

        try:
            values = self._read_all()

        except ValueError as e:
            logger.warning("Overwriting unreadable storage file %s: %s", self._file_path, e)
            values = {}

        values[key] = value

        # write to a sibling file first so a failed write leaves the old data intact
        temp_path = f"{self._file_path}.tmp"

        try:
            with open(temp_path, "w") as f:
                json.dump(values, f, indent=2, sort_keys=True)

            os.replace(temp_path, self._file_path)

        except OSError:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

    def _read_all(self) -> dict[str, str]:
        """
        Reads the whole backing file.

        Returns:
            The stored key-value pairs, or an empty dictionary if the file does not exist yet.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the file does not contain a JSON object.
            OSError: If the file exists but cannot be read.
        """
        if not os.path.exists(self._file_path):
            return {}

        with open(self._file_path, "r") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{self._file_path} must contain a JSON object.")

        return data
