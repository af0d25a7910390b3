"""Line formatting for stdout output."""

from __future__ import annotations

from chisel.constants.branding import PROGRAM_NAME
from chisel.constants.reporting import STATUS_BAD, STATUS_GOOD
from chisel.model import Verdict


def format_status_line(verdict: Verdict) -> str:
    """Render ``<name>: GOOD`` or ``<name>: BAD`` for a verdict."""
    return f"{verdict.name}: {STATUS_GOOD if verdict.passed else STATUS_BAD}"


def format_error(message: str) -> str:
    """Render a fatal error line prefixed with the program name."""
    return f"{PROGRAM_NAME}: {message}"
