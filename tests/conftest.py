# tests/conftest.py

import pytest

from core.storage import MemoryStorage
from models.assignment import Assignment
from models.gpa_tracker import GpaTracker
from models.persistence import PersistenceAdapter
from models.session import GpaSession

SAMPLE_GRADES = [("Essay", 4.5), ("Quiz 1", 3.8), ("Lab Report", 4.2), ("Midterm", 4.0)]


@pytest.fixture
def empty_tracker():
    return GpaTracker()


@pytest.fixture
def sample_tracker():
    tracker = GpaTracker()

    for name, grade in SAMPLE_GRADES:
        tracker.add_assignment(name, grade)

    tracker.mark_clean()
    return tracker


@pytest.fixture
def sample_assignment():
    return Assignment(
        id=1,
        name="test_assignment",
        grade=4.5,
        date_added="1987-06-21",
    )


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def persistence(memory_storage):
    return PersistenceAdapter(memory_storage)


@pytest.fixture
def sample_session(sample_tracker, persistence):
    return GpaSession(sample_tracker, persistence)


@pytest.fixture
def empty_session(persistence):
    return GpaSession.open(persistence)
