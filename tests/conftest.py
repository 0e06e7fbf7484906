# tests/conftest.py

import datetime

import pytest

from core.storage import FileStore, MemoryStore
from models.exam_history import ExamHistory
from models.exam_record import ExamRecord

UTC = datetime.timezone.utc


@pytest.fixture
def math_record():
    return ExamRecord(
        date=datetime.datetime(2024, 1, 10, tzinfo=UTC),
        exam_name="Math",
        correct=8,
        incorrect=2,
        not_attempted=0,
        percentage=80.0,
    )


@pytest.fixture
def science_record():
    return ExamRecord(
        date=datetime.datetime(2024, 2, 10, tzinfo=UTC),
        exam_name="Science",
        correct=9,
        incorrect=0,
        not_attempted=1,
        percentage=90.0,
    )


@pytest.fixture
def sample_records(math_record, science_record):
    return [math_record, science_record]


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def empty_history(memory_store):
    history_response = ExamHistory.load(memory_store)
    return history_response.data["history"]


@pytest.fixture
def sample_history(empty_history, sample_records):
    empty_history.replace_all(sample_records)
    return empty_history


@pytest.fixture
def file_store(tmp_path):
    return FileStore(str(tmp_path / "history"))


class FailingStore:
    """Store whose writes always fail, for exercising write-through rollback."""

    def __init__(self, blob: str | None = None):
        self._blob = blob
        self.write_attempts = 0

    def get(self, key: str) -> str | None:
        return self._blob

    def set(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise OSError("disk full")


@pytest.fixture
def failing_store():
    return FailingStore()
