"""
Utilities package for Student Records.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of domain-specific logic.
"""

from student_records.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
