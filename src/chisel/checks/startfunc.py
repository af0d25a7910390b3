"""Start function presence check."""

from __future__ import annotations

from typing import Self

from chisel.checks.base import Check
from chisel.constants.config import DEFAULT_START_REQUIRED
from chisel.wasm import WasmModule


class CheckStartFunc(Check):
    """Pass when the presence of a start function matches ``start_required``."""

    name = "checkstartfunc"

    def __init__(self, start_required: bool) -> None:
        self.start_required = start_required

    @classmethod
    def configure(cls, preset: str) -> Self:
        # Presets are not consulted; the requirement is fixed until flags are wired in.
        return cls(DEFAULT_START_REQUIRED)

    def validate(self, module: WasmModule) -> bool:
        return (module.start is not None) == self.start_required
