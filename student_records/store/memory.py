"""
In-memory store: an ordered list scanned front to back.

Duplicate ids are accepted. Lookups and deletes act on the earliest-inserted
match, so the collection stays a list rather than an id-keyed mapping.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from student_records.domain.models import StudentRecord
from student_records.store.abstract import AbstractRecordStore
from student_records.utils.logging import get_logger

log = get_logger(__name__)


class InMemoryStudentStore(AbstractRecordStore):
    """
    Hold student records in insertion order for the lifetime of the process.

    Nothing is validated on the way in; see `student_records.domain.validation`
    for the optional checks.
    """

    def __init__(self, records: Optional[Iterable[StudentRecord]] = None) -> None:
        self._students: List[StudentRecord] = list(records) if records is not None else []

    def add(self, record: StudentRecord) -> None:
        self._students.append(record)
        log.debug(
            "Student added",
            extra={"student_id": record.id, "total": len(self._students)},
        )

    def list_records(self) -> List[StudentRecord]:
        return list(self._students)

    def find_by_id(self, student_id: int) -> Optional[StudentRecord]:
        for student in self._students:
            if student.id == student_id:
                return student
        log.debug("Student not found", extra={"student_id": student_id})
        return None

    def delete_by_id(self, student_id: int) -> bool:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                del self._students[index]
                log.debug(
                    "Student deleted",
                    extra={"student_id": student_id, "total": len(self._students)},
                )
                return True
        log.debug("Nothing to delete", extra={"student_id": student_id})
        return False

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._students))


__all__ = ["InMemoryStudentStore"]
