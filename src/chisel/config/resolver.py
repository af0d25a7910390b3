"""Ruleset resolution: generic YAML document to ``ChiselContext``.

Only the shape of the document is validated here. Whether a check name is
known is decided at dispatch time, so an unrecognized check is a failing
verdict rather than a configuration error.
"""

from __future__ import annotations

import logging
from typing import Any

from chisel.config.model import ChiselContext, ModuleConfig
from chisel.constants.config import FILE_KEY, PRESET_KEY
from chisel.exceptions import ConfigError, ErrorKind

logger = logging.getLogger(__name__)


def resolve_context(document: Any) -> ChiselContext:
    """Build a ``ChiselContext`` from the first ruleset in ``document``."""
    ruleset_name, ruleset = _select_ruleset(document)
    target_file = _resolve_target_file(ruleset)
    modules = tuple(_resolve_module(name, flags) for name, flags in ruleset.items() if name != FILE_KEY)
    logger.debug(
        "Resolved ruleset %r: target %s, %d module(s)",
        ruleset_name,
        target_file,
        len(modules),
    )
    return ChiselContext(target_file=target_file, modules=modules)


def _select_ruleset(document: Any) -> tuple[str, dict[Any, Any]]:
    """Return the first string-keyed entry whose value is a mapping."""
    if not isinstance(document, dict):
        raise ConfigError(
            ErrorKind.CONFIG_INVALID,
            f"top-level document is {type(document).__name__}, expected a mapping",
        )

    rulesets = [(key, value) for key, value in document.items() if isinstance(key, str) and isinstance(value, dict)]
    if not rulesets:
        raise ConfigError(ErrorKind.CONFIG_INVALID, "no ruleset mapping found at top level")

    if len(rulesets) > 1:
        ignored = ", ".join(repr(name) for name, _ in rulesets[1:])
        logger.debug("Using ruleset %r; ignoring %s", rulesets[0][0], ignored)
    return rulesets[0]


def _resolve_target_file(ruleset: dict[Any, Any]) -> str:
    if FILE_KEY not in ruleset:
        raise ConfigError(ErrorKind.CONFIG_MISSING_FILE)
    target_file = ruleset[FILE_KEY]
    if not isinstance(target_file, str):
        raise ConfigError(
            ErrorKind.FILE_TYPE_MISMATCH,
            f"'{FILE_KEY}' is {type(target_file).__name__}",
        )
    if not target_file:
        raise ConfigError(ErrorKind.CONFIG_MISSING_FILE, f"'{FILE_KEY}' is empty")
    return target_file


def _resolve_module(name: Any, flags: Any) -> ModuleConfig:
    if not isinstance(name, str) or not isinstance(flags, dict):
        raise ConfigError(
            ErrorKind.MODULE_TYPE_MISMATCH,
            f"module {name!r} maps to {type(flags).__name__}",
        )

    preset = flags.get(PRESET_KEY)
    if PRESET_KEY in flags and not isinstance(preset, str):
        raise ConfigError(
            ErrorKind.PRESET_TYPE_MISMATCH,
            f"preset of module {name!r} is {type(preset).__name__}",
        )
    return ModuleConfig(name=name, preset=preset)
