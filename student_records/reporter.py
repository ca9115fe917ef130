from __future__ import annotations

from typing import Callable, Iterable, List, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from student_records.domain.models import StudentRecord

Echo = Callable[[str], None]

EMPTY_NOTICE = "No students found."
SEPARATOR = "-" * 27


def format_listing(records: Iterable[StudentRecord]) -> List[str]:
    """
    Build the plain listing lines for `records`.

    Each record contributes its six labelled field lines followed by a dashed
    separator. An empty input yields the single empty-store notice.
    """
    lines: List[str] = []
    for record in records:
        lines.extend(record.summary())
        lines.append(SEPARATOR)
    return lines or [EMPTY_NOTICE]


def print_listing(records: Iterable[StudentRecord], echo: Optional[Echo] = None) -> None:
    """Write the plain listing to `echo`, one call per line."""
    write = echo or typer.echo
    for line in format_listing(records):
        write(line)


def print_table(records: Iterable[StudentRecord], console: Optional[Console] = None) -> None:
    """
    Render the records as a rich table, in insertion order.
    """
    console = console or Console()
    rows = list(records)

    if not rows:
        console.print(f"[yellow]{EMPTY_NOTICE}[/yellow]")
        return

    table = Table(
        title="Students",
        box=box.ROUNDED,
        caption=f"{len(rows)} record(s)",
    )

    table.add_column("Id", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Age", justify="right", style="magenta")
    table.add_column("Course", style="blue")
    table.add_column("Marks", justify="right", style="green")
    table.add_column("Email", style="yellow")

    for record in rows:
        table.add_row(
            str(record.id),
            record.name,
            str(record.age),
            record.course,
            str(record.marks),
            record.email,
        )

    console.print(table)


__all__ = ["EMPTY_NOTICE", "Echo", "SEPARATOR", "format_listing", "print_listing", "print_table"]
