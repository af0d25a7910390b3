"""Export verification against a preset of expected exports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Self, cast

from chisel.checks.base import Check
from chisel.constants.presets import EWASM_EXPORTS, EWASM_PRESET, RawSignature
from chisel.exceptions import CheckError, UnknownPresetError
from chisel.types import ExternalKind, ValueType
from chisel.wasm import FunctionType, WasmModule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportRule:
    """A required export; ``signature`` applies to function exports only."""

    name: str
    kind: ExternalKind
    signature: FunctionType | None = None


def _build_rules(raw: tuple[tuple[str, str, RawSignature | None], ...]) -> tuple[ExportRule, ...]:
    rules = []
    for name, kind, signature in raw:
        function_type = None
        if signature is not None:
            params, results = signature
            function_type = FunctionType(
                params=cast(tuple[ValueType, ...], params),
                results=cast(tuple[ValueType, ...], results),
            )
        rules.append(ExportRule(name=name, kind=cast(ExternalKind, kind), signature=function_type))
    return tuple(rules)


EXPORT_PRESETS: dict[str, tuple[ExportRule, ...]] = {
    EWASM_PRESET: _build_rules(EWASM_EXPORTS),
}


class VerifyExports(Check):
    """Require a fixed set of exports, optionally rejecting any others."""

    name = "verifyexports"

    def __init__(self, rules: tuple[ExportRule, ...], *, allow_unlisted: bool = False) -> None:
        self.rules = rules
        self.allow_unlisted = allow_unlisted

    @classmethod
    def configure(cls, preset: str) -> Self:
        rules = EXPORT_PRESETS.get(preset)
        if rules is None:
            raise UnknownPresetError(cls.name, preset)
        return cls(rules, allow_unlisted=False)

    def validate(self, module: WasmModule) -> bool:
        exports = {export.name: export for export in module.exports}

        for rule in self.rules:
            export = exports.get(rule.name)
            if export is None:
                logger.debug("Missing export %r", rule.name)
                return False
            if export.kind != rule.kind:
                logger.debug("Export %r is a %s, expected %s", rule.name, export.kind, rule.kind)
                return False
            if rule.signature is None:
                continue
            try:
                signature = module.function_type(export.index)
            except IndexError as exc:
                raise CheckError(f"export {rule.name!r}: {exc}") from exc
            if signature != rule.signature:
                logger.debug("Export %r has signature %s, expected %s", rule.name, signature, rule.signature)
                return False

        if not self.allow_unlisted:
            unlisted = sorted(set(exports) - {rule.name for rule in self.rules})
            if unlisted:
                logger.debug("Unlisted exports: %s", ", ".join(unlisted))
                return False
        return True
