"""Import verification against a preset of host functions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Self, cast

from chisel.checks.base import Check
from chisel.constants.presets import EWASM_IMPORT_NAMESPACE, EWASM_IMPORTS, EWASM_PRESET
from chisel.exceptions import CheckError, UnknownPresetError
from chisel.types import ValueType
from chisel.wasm import FunctionType, WasmModule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportRule:
    """A permitted function import and its exact signature."""

    module: str
    field: str
    signature: FunctionType


EWASM_IMPORT_RULES: tuple[ImportRule, ...] = tuple(
    ImportRule(
        module=EWASM_IMPORT_NAMESPACE,
        field=field,
        signature=FunctionType(
            params=cast(tuple[ValueType, ...], params),
            results=cast(tuple[ValueType, ...], results),
        ),
    )
    for field, (params, results) in EWASM_IMPORTS
)

IMPORT_PRESETS: dict[str, tuple[ImportRule, ...]] = {
    EWASM_PRESET: EWASM_IMPORT_RULES,
}


class VerifyImports(Check):
    """Check function imports against a list of permitted host functions."""

    name = "verifyimports"

    def __init__(
        self,
        rules: tuple[ImportRule, ...],
        *,
        require_all: bool = False,
        allow_unlisted: bool = False,
    ) -> None:
        self.rules = rules
        self.require_all = require_all
        self.allow_unlisted = allow_unlisted

    @classmethod
    def configure(cls, preset: str) -> Self:
        rules = IMPORT_PRESETS.get(preset)
        if rules is None:
            raise UnknownPresetError(cls.name, preset)
        return cls(rules, require_all=False, allow_unlisted=False)

    def validate(self, module: WasmModule) -> bool:
        expected = {(rule.module, rule.field): rule.signature for rule in self.rules}
        matched: set[tuple[str, str]] = set()

        for entry in module.imports:
            key = (entry.module, entry.field)
            signature = expected.get(key)
            if signature is None or entry.kind != "function":
                if self.allow_unlisted:
                    continue
                logger.debug("Unlisted %s import %s.%s", entry.kind, entry.module, entry.field)
                return False
            if entry.type_index is None:
                raise CheckError(f"function import {entry.module}.{entry.field} has no type index")
            try:
                actual = module.type_at(entry.type_index)
            except IndexError as exc:
                raise CheckError(f"import {entry.module}.{entry.field}: {exc}") from exc
            if actual != signature:
                logger.debug("Import %s.%s has signature %s, expected %s", entry.module, entry.field, actual, signature)
                return False
            matched.add(key)

        if self.require_all:
            missing = sorted(f"{module_name}.{field}" for module_name, field in set(expected) - matched)
            if missing:
                logger.debug("Missing imports: %s", ", ".join(missing))
                return False
        return True
