"""Configuration-related exceptions."""

from __future__ import annotations

from chisel.exceptions.base import ChiselError


class ConfigError(ChiselError, ValueError):
    """Raised when the chisel config cannot be loaded or resolved."""
