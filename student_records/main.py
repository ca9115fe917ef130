from __future__ import annotations

import sys
from typing import Optional

import typer

from student_records.config import get_settings
from student_records.demo import run_demo
from student_records.domain.validation import is_valid_age, is_valid_email, is_valid_marks
from student_records.utils.logging import configure_logging

app = typer.Typer(help="Student Records CLI.")


def _label(valid: bool) -> str:
    return "valid" if valid else "invalid"


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    """
    In-memory student records. Runs the demo when no command is given.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if ctx.invoked_subcommand is None:
        run_demo(table=settings.output_format == "table")


@app.command()
def demo(
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Render listings as a table instead of labelled lines.",
    ),
) -> None:
    """
    Add two students, list, look one up, delete the other and list again.
    """
    settings = get_settings()
    run_demo(table=table or settings.output_format == "table")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"log_json={settings.log_json} | output={settings.output_format}"
    )


@app.command()
def validate(
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address to check."),
    marks: Optional[int] = typer.Option(None, "--marks", "-m", help="Marks to check (0-100)."),
    age: Optional[int] = typer.Option(None, "--age", "-a", help="Age to check (16-60)."),
) -> None:
    """
    Check values against the record format rules without storing anything.
    """
    if email is None and marks is None and age is None:
        typer.echo("Nothing to validate. Pass --email, --marks or --age.")
        return

    if email is not None:
        typer.echo(f"email: {_label(is_valid_email(email))}")
    if marks is not None:
        typer.echo(f"marks: {_label(is_valid_marks(marks))}")
    if age is not None:
        typer.echo(f"age: {_label(is_valid_age(age))}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
