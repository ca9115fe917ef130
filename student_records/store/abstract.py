"""
Abstract store interfaces for Student Records.

Concrete stores should implement the RecordStore protocol (or subclass the
AbstractRecordStore helper) so the demo and the CLI can work against any
backing collection.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol, runtime_checkable

from student_records.domain.models import StudentRecord
from student_records.reporter import Echo, print_listing


@runtime_checkable
class RecordStore(Protocol):
    """
    Common interface all record stores must implement.

    "Not found" is an ordinary outcome: `find_by_id` returns None and
    `delete_by_id` returns False. Neither raises.
    """

    def add(self, record: StudentRecord) -> None:
        """Append `record` after every record already stored."""
        ...

    def list_records(self) -> List[StudentRecord]:
        """Return all records in insertion order."""
        ...

    def display(self, echo: Optional[Echo] = None) -> None:
        """Write the listing to `echo`, one line per call."""
        ...

    def find_by_id(self, student_id: int) -> Optional[StudentRecord]:
        """
        Return the first record whose id equals `student_id`.

        Returns
        -------
        StudentRecord | None
            The earliest-inserted match, or None when no record has that id.
        """
        ...

    def delete_by_id(self, student_id: int) -> bool:
        """Remove the first record whose id equals `student_id`."""
        ...


class AbstractRecordStore(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses implement the four primitive operations; `display` is shared.
    """

    @abc.abstractmethod
    def add(self, record: StudentRecord) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def list_records(self) -> List[StudentRecord]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def find_by_id(self, student_id: int) -> Optional[StudentRecord]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def delete_by_id(self, student_id: int) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    def display(self, echo: Optional[Echo] = None) -> None:
        """Write the plain listing of all records to `echo` (stdout by default)."""
        print_listing(self.list_records(), echo=echo)


__all__ = [
    "AbstractRecordStore",
    "RecordStore",
]
