"""Exceptions raised while loading the target binary."""

from __future__ import annotations

from chisel.exceptions.base import ChiselError


class ArtifactError(ChiselError):
    """Raised when the target binary cannot be read or decoded."""
