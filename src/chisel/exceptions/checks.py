"""Exceptions raised by validation checks."""

from __future__ import annotations


class CheckError(Exception):
    """Raised when a check cannot evaluate a module."""


class UnknownPresetError(CheckError, LookupError):
    """Raised when a check is configured with a preset it does not define."""

    def __init__(self, check_name: str, preset: str) -> None:
        super().__init__(f"{check_name} has no preset named {preset!r}")
        self.check_name = check_name
        self.preset = preset
