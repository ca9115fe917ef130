"""
Pytest configuration for Student Records.

Provides fixtures for:
- Empty and pre-populated in-memory stores
- The two fixed demo records
- Settings isolation (env vars + the cached settings instance)
"""

from __future__ import annotations

from typing import Generator, List

import pytest

from student_records.config import get_settings
from student_records.domain.models import StudentRecord
from student_records.store.memory import InMemoryStudentStore

_SETTINGS_ENV_VARS = ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "OUTPUT_FORMAT")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop settings env vars and the cached Settings around every test.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def aadarsh() -> StudentRecord:
    return StudentRecord.of(1, "Aadarsh", 20, "CSE", 85, "aadarsh@email.com")


@pytest.fixture
def rahul() -> StudentRecord:
    return StudentRecord.of(2, "Rahul", 21, "ECE", 78, "rahul@email.com")


@pytest.fixture
def demo_pair(aadarsh: StudentRecord, rahul: StudentRecord) -> List[StudentRecord]:
    return [aadarsh, rahul]


@pytest.fixture
def empty_store() -> InMemoryStudentStore:
    return InMemoryStudentStore()


@pytest.fixture
def seeded_store(demo_pair: List[StudentRecord]) -> InMemoryStudentStore:
    """
    Store holding the Aadarsh and Rahul records, in that order.
    """
    store = InMemoryStudentStore()
    for record in demo_pair:
        store.add(record)
    return store
