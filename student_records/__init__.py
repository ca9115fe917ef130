"""
Student Records - a minimal in-memory student record manager.

This package keeps a small ordered collection of student records and offers:

- Adding records (no uniqueness or format checks)
- Listing records in insertion order
- Looking up and deleting by identifier, first match wins
- Standalone email, marks and age format checks

Nothing is persisted; records live for the duration of the process.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_records.config import Settings, get_settings
from student_records.demo import run_demo
from student_records.domain.models import StudentRecord
from student_records.domain.validation import (
    is_valid_age,
    is_valid_email,
    is_valid_marks,
    validate_record,
)
from student_records.store.abstract import AbstractRecordStore, RecordStore
from student_records.store.memory import InMemoryStudentStore
from student_records.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "StudentRecord",
    "is_valid_age",
    "is_valid_email",
    "is_valid_marks",
    "validate_record",
    # Stores
    "AbstractRecordStore",
    "InMemoryStudentStore",
    "RecordStore",
    # Demo
    "run_demo",
    # Logging
    "configure_logging",
    "get_logger",
]
