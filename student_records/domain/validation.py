"""
Format checks for student attributes.

These predicates are standalone: the store accepts any values, so callers
decide whether and where to apply them.
"""
from __future__ import annotations

from typing import List, Optional

from student_records.domain.models import StudentRecord

MIN_MARKS = 0
MAX_MARKS = 100
MIN_AGE = 16
MAX_AGE = 60


def is_valid_email(email: Optional[str]) -> bool:
    """Superficial check: present and containing both '@' and '.'."""
    return bool(email) and "@" in email and "." in email


def is_valid_marks(marks: int) -> bool:
    return MIN_MARKS <= marks <= MAX_MARKS


def is_valid_age(age: int) -> bool:
    return MIN_AGE <= age <= MAX_AGE


def validate_record(record: StudentRecord) -> List[str]:
    """
    Return the names of the fields of `record` that fail their check.

    An empty list means the record passes all three checks.
    """
    failures: List[str] = []
    if not is_valid_age(record.age):
        failures.append("age")
    if not is_valid_marks(record.marks):
        failures.append("marks")
    if not is_valid_email(record.email):
        failures.append("email")
    return failures


__all__ = [
    "MAX_AGE",
    "MAX_MARKS",
    "MIN_AGE",
    "MIN_MARKS",
    "is_valid_age",
    "is_valid_email",
    "is_valid_marks",
    "validate_record",
]
