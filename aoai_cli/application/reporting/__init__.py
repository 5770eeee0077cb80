"""Output formatting for command results."""

from .chat_report import iter_report_lines

__all__ = ["iter_report_lines"]
