"""Check registry keyed by the names used in ruleset configs.

Names missing from the registry resolve to ``RejectAll`` so an unknown
check yields a failing verdict instead of aborting the run.
"""

from __future__ import annotations

from typing import Self

from chisel.checks.base import Check
from chisel.checks.exports import VerifyExports
from chisel.checks.imports import VerifyImports
from chisel.checks.startfunc import CheckStartFunc
from chisel.wasm import WasmModule


class RejectAll(Check):
    """Stand-in for unrecognized check names; never passes."""

    name = "_reject"

    @classmethod
    def configure(cls, preset: str) -> Self:
        return cls()

    def validate(self, module: WasmModule) -> bool:
        return False


CHECK_REGISTRY: dict[str, type[Check]] = {
    check.name: check
    for check in (
        VerifyExports,
        VerifyImports,
        CheckStartFunc,
    )
}


def resolve_check(name: str) -> type[Check]:
    """Return the check class registered under ``name``, or ``RejectAll``."""
    return CHECK_REGISTRY.get(name, RejectAll)
