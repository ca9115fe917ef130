from __future__ import annotations

from rich.console import Console

from student_records.reporter import (
    EMPTY_NOTICE,
    SEPARATOR,
    format_listing,
    print_listing,
    print_table,
)

LINES_PER_RECORD = 7


def test_separator_is_27_dashes():
    assert SEPARATOR == "---------------------------"


def test_format_listing_empty_is_single_notice():
    assert format_listing([]) == ["No students found."]


def test_format_listing_block_per_record(demo_pair):
    lines = format_listing(demo_pair)

    assert len(lines) == LINES_PER_RECORD * len(demo_pair)
    assert lines[:LINES_PER_RECORD] == demo_pair[0].summary() + [SEPARATOR]
    assert lines[LINES_PER_RECORD:] == demo_pair[1].summary() + [SEPARATOR]
    assert EMPTY_NOTICE not in lines


def test_print_listing_uses_given_echo(aadarsh):
    lines = []
    print_listing([aadarsh], echo=lines.append)

    assert lines[-1] == SEPARATOR
    assert lines[1] == "Name    : Aadarsh"


def test_print_table_renders_rows(demo_pair):
    console = Console(record=True, width=120)
    print_table(demo_pair, console=console)

    text = console.export_text()
    assert "Aadarsh" in text
    assert "rahul@email.com" in text
    assert "2 record(s)" in text


def test_print_table_empty_prints_notice():
    console = Console(record=True, width=120)
    print_table([], console=console)

    assert EMPTY_NOTICE in console.export_text()
