# core/config.py

"""
Runtime configuration for the GPA Tracker.

Settings are read from environment variables with sensible defaults, so the CLI runs without any setup:

    GPA_TRACKER_DATA_DIR      directory holding the storage file and exports (default: ~/Documents/GpaTracker)
    GPA_TRACKER_STORAGE_FILE  file name of the JSON key-value store (default: storage.json)
    GPA_TRACKER_STORAGE_KEY   key under which the tracker snapshot is stored (default: gpaCalculatorData)
    GPA_TRACKER_LOG_LEVEL     logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DATA_DIR = os.path.join("~", "Documents", "GpaTracker")
DEFAULT_STORAGE_FILE = "storage.json"
DEFAULT_STORAGE_KEY = "gpaCalculatorData"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: str = DEFAULT_DATA_DIR
    storage_file: str = DEFAULT_STORAGE_FILE
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        return cls(
            data_dir=env.get("GPA_TRACKER_DATA_DIR", DEFAULT_DATA_DIR),
            storage_file=env.get("GPA_TRACKER_STORAGE_FILE", DEFAULT_STORAGE_FILE),
            storage_key=env.get("GPA_TRACKER_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            log_level=env.get("GPA_TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def storage_path(self) -> str:
        return os.path.join(os.path.expanduser(self.data_dir), self.storage_file)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric_level = logging.getLevelName(level.upper())

    # getLevelName() returns a "Level X" string for unknown names
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
