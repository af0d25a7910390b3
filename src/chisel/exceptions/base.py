"""Base exception for fatal Chisel run errors."""

from __future__ import annotations

from chisel.exceptions.kinds import ErrorKind
from chisel.types.run import RunStage


class ChiselError(Exception):
    """Raised when a run cannot evaluate its configuration.

    ``str(exc)`` is the kind's fixed display text; ``detail`` carries the
    underlying cause for diagnostics.
    """

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.detail = detail

    @property
    def stage(self) -> RunStage:
        return self.kind.stage
