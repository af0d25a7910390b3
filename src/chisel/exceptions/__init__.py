"""Shared exception hierarchy for Chisel."""

from __future__ import annotations

from .artifact import ArtifactError
from .base import ChiselError
from .checks import CheckError, UnknownPresetError
from .config import ConfigError
from .kinds import ErrorKind
from .wasm import WasmDecodeError

__all__ = [
    "ArtifactError",
    "CheckError",
    "ChiselError",
    "ConfigError",
    "ErrorKind",
    "UnknownPresetError",
    "WasmDecodeError",
]
