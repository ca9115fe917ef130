"""
Scripted walkthrough of the store operations.

Usage:
    from student_records.demo import run_demo

    store = run_demo()
    print(len(store))  # 1

Prints a fixed console session: the listing, a lookup of id 1, a delete of
id 2 and the listing again.
"""

from __future__ import annotations

import io
from typing import List, Optional

import typer
from rich.console import Console

from student_records.domain.models import StudentRecord
from student_records.reporter import Echo, print_table
from student_records.store.abstract import RecordStore
from student_records.store.memory import InMemoryStudentStore
from student_records.utils.logging import get_logger

log = get_logger(__name__)

LOOKUP_ID = 1
DELETE_ID = 2
TABLE_WIDTH = 100


def demo_records() -> List[StudentRecord]:
    """The two fixed records the walkthrough inserts."""
    return [
        StudentRecord.of(1, "Aadarsh", 20, "CSE", 85, "aadarsh@email.com"),
        StudentRecord.of(2, "Rahul", 21, "ECE", 78, "rahul@email.com"),
    ]


def run_demo(
    store: Optional[RecordStore] = None,
    echo: Optional[Echo] = None,
    table: bool = False,
    console: Optional[Console] = None,
) -> RecordStore:
    """
    Run the scripted add / list / find / delete sequence.

    Parameters
    ----------
    store : RecordStore | None
        Store to operate on. A fresh in-memory store is created when omitted.
    echo : callable | None
        Line sink for plain output. Defaults to `typer.echo`.
    table : bool
        Render listings as rich tables instead of labelled lines.
    console : rich.console.Console | None
        Console used for table output. When omitted and `echo` is given, tables
        are rendered as plain text and sent through `echo` line by line.

    Returns
    -------
    RecordStore
        The store in its final state, after the delete.
    """
    write = echo or typer.echo
    store = store if store is not None else InMemoryStudentStore()

    def show() -> None:
        if table and console is None and echo is not None:
            buffer = io.StringIO()
            print_table(store.list_records(), console=Console(file=buffer, width=TABLE_WIDTH))
            for line in buffer.getvalue().splitlines():
                write(line)
        elif table:
            print_table(store.list_records(), console=console)
        else:
            store.display(echo=write)

    log.debug("Demo started", extra={"table": table})
    for record in demo_records():
        store.add(record)

    write("All Students:")
    show()

    write("")
    write(f"Searching for student with ID {LOOKUP_ID}:")
    student = store.find_by_id(LOOKUP_ID)
    if student is not None:
        write(f"Found: {student.name}")
    else:
        write("Student not found.")

    write("")
    write(f"Deleting student with ID {DELETE_ID}")
    deleted = store.delete_by_id(DELETE_ID)

    write("")
    write("After Deletion:")
    show()

    log.debug("Demo finished", extra={"deleted": deleted, "remaining": len(store.list_records())})
    return store


__all__ = ["DELETE_ID", "LOOKUP_ID", "demo_records", "run_demo"]
