"""Verdict and report value types."""

from __future__ import annotations

from dataclasses import dataclass

from chisel.constants.reporting import EXIT_CHECK_FAILED, EXIT_SUCCESS


@dataclass(frozen=True)
class Verdict:
    """Pass/fail outcome of one configured check."""

    name: str
    passed: bool


@dataclass(frozen=True)
class Report:
    """Verdicts of a completed run, in execution order."""

    verdicts: tuple[Verdict, ...] = ()

    @property
    def overall(self) -> bool:
        """True when every check passed; vacuously true with no checks."""
        return all(verdict.passed for verdict in self.verdicts)

    @property
    def exit_code(self) -> int:
        return EXIT_SUCCESS if self.overall else EXIT_CHECK_FAILED

    @property
    def failed(self) -> tuple[Verdict, ...]:
        return tuple(verdict for verdict in self.verdicts if not verdict.passed)
