"""
Domain package for Student Records.

Exports the record model and the standalone validation predicates.
Keep this package focused on data definitions and validation concerns.
"""

from student_records.domain.models import StudentRecord
from student_records.domain.validation import (
    is_valid_age,
    is_valid_email,
    is_valid_marks,
    validate_record,
)

__all__ = [
    "StudentRecord",
    "is_valid_age",
    "is_valid_email",
    "is_valid_marks",
    "validate_record",
]
