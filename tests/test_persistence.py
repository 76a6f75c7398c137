# tests/test_persistence.py

import json
import logging

from core.config import DEFAULT_STORAGE_KEY
from core.response import ErrorCode
from core.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from models.gpa_tracker import GpaTracker
from models.persistence import PersistenceAdapter


class BrokenStorage(KeyValueStorage):
    """Storage whose every call fails, like a full or unavailable backend."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("quota exceeded")


def test_save_writes_snapshot(sample_tracker, memory_storage, persistence):
    response = persistence.save(sample_tracker)
    assert response.success

    data = json.loads(memory_storage.get(DEFAULT_STORAGE_KEY))

    assert set(data) == {"assignments", "assignmentIdCounter", "lastUpdated"}
    assert data["assignmentIdCounter"] == 5
    assert len(data["assignments"]) == 4
    assert data["lastUpdated"] == response.data["lastUpdated"]


def test_save_marks_tracker_clean(empty_tracker, persistence):
    empty_tracker.add_assignment("Quiz", 4.0)
    assert empty_tracker.has_unsaved_changes

    persistence.save(empty_tracker)
    assert not empty_tracker.has_unsaved_changes


def test_save_then_load_round_trip(sample_tracker, persistence):
    sample_tracker.remove_assignment(2)
    persistence.save(sample_tracker)

    loaded = persistence.load()

    assert loaded.assignments == sample_tracker.assignments
    assert loaded.assignment_id_counter == sample_tracker.assignment_id_counter


def test_save_then_load_round_trip_json_file(sample_tracker, tmp_path):
    storage = JsonFileStorage(str(tmp_path / "storage.json"))
    PersistenceAdapter(storage).save(sample_tracker)

    loaded = PersistenceAdapter(JsonFileStorage(str(tmp_path / "storage.json"))).load()

    assert loaded.assignments == sample_tracker.assignments
    assert loaded.assignment_id_counter == 5


def test_load_missing_key_returns_empty(persistence):
    tracker = persistence.load()

    assert tracker.assignments == ()
    assert tracker.assignment_id_counter == 1


def test_load_uses_configured_key(sample_tracker, memory_storage):
    PersistenceAdapter(memory_storage, "other").save(sample_tracker)

    assert PersistenceAdapter(memory_storage).load().count == 0
    assert PersistenceAdapter(memory_storage, "other").load().count == 4


def test_load_malformed_json_returns_empty(memory_storage, persistence, caplog):
    memory_storage.set(DEFAULT_STORAGE_KEY, "{not json")

    with caplog.at_level(logging.WARNING):
        tracker = persistence.load()

    assert tracker.assignments == ()
    assert tracker.assignment_id_counter == 1
    assert "Ignoring unreadable saved data" in caplog.text


def test_load_invalid_snapshot_returns_empty(memory_storage, persistence):
    memory_storage.set(
        DEFAULT_STORAGE_KEY,
        json.dumps({"assignments": [{"id": 1, "name": "", "grade": 4}]}),
    )

    tracker = persistence.load()

    assert tracker.assignments == ()
    assert tracker.assignment_id_counter == 1


def test_load_wrong_shape_returns_empty(memory_storage, persistence):
    memory_storage.set(DEFAULT_STORAGE_KEY, json.dumps([1, 2, 3]))

    assert persistence.load().count == 0


def test_load_storage_failure_returns_empty(caplog):
    with caplog.at_level(logging.ERROR):
        tracker = PersistenceAdapter(BrokenStorage()).load()

    assert isinstance(tracker, GpaTracker)
    assert tracker.count == 0
    assert "Could not read data from storage" in caplog.text


def test_save_storage_failure_is_logged_not_raised(sample_tracker, caplog):
    sample_tracker.add_assignment("Final", 5)

    with caplog.at_level(logging.ERROR):
        response = PersistenceAdapter(BrokenStorage()).save(sample_tracker)

    assert not response.success
    assert response.error is ErrorCode.PERSISTENCE_FAILED
    assert "quota exceeded" in caplog.text

    # the in-memory tracker stays authoritative
    assert sample_tracker.count == 5
    assert sample_tracker.has_unsaved_changes


def test_load_corrupt_storage_file_returns_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("corrupted")

    tracker = PersistenceAdapter(JsonFileStorage(str(path))).load()

    assert tracker.count == 0


def test_save_does_not_touch_other_keys():
    storage = MemoryStorage({"theme": "dark"})

    PersistenceAdapter(storage).save(GpaTracker())

    assert storage.get("theme") == "dark"


def test_load_huge_integer_grade_returns_empty(memory_storage, persistence):
    memory_storage.set(
        DEFAULT_STORAGE_KEY,
        '{"assignments": [{"id": 1, "name": "Quiz", "grade": 1'
        + "0" * 400
        + ', "dateAdded": "2025-01-01"}], "assignmentIdCounter": 2}',
    )

    tracker = persistence.load()

    assert tracker.count == 0
    assert tracker.assignment_id_counter == 1


def test_load_deeply_nested_json_returns_empty(memory_storage, persistence):
    memory_storage.set(DEFAULT_STORAGE_KEY, "[" * 100000 + "]" * 100000)

    tracker = persistence.load()

    assert tracker.count == 0
