"""Stdout formatting for run output."""

from .stdout import format_error, format_status_line

__all__ = ["format_error", "format_status_line"]
