"""
Store package for Student Records.

Re-exports the store interfaces and the concrete in-memory store so
downstream code can import from `student_records.store` directly.
"""

from student_records.store.abstract import AbstractRecordStore, RecordStore
from student_records.store.memory import InMemoryStudentStore

__all__ = [
    # Abstracts
    "AbstractRecordStore",
    "RecordStore",
    # Concrete stores
    "InMemoryStudentStore",
]
