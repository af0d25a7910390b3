"""Dispatch of configured checks to their validation capabilities."""

from __future__ import annotations

import logging

from chisel.checks import CHECK_REGISTRY, resolve_check
from chisel.config import ModuleConfig
from chisel.constants.config import DEFAULT_PRESET
from chisel.exceptions import CheckError, UnknownPresetError
from chisel.model import Verdict
from chisel.reporting import format_status_line
from chisel.types import Emitter
from chisel.wasm import WasmModule

logger = logging.getLogger(__name__)


def resolve_preset(config: ModuleConfig) -> str:
    """Return the declared preset, or the default when none was declared."""
    return config.preset if config.preset is not None else DEFAULT_PRESET


def dispatch_check(config: ModuleConfig, module: WasmModule) -> bool:
    """Run the check named by ``config`` against ``module``.

    Unknown names, unknown presets and checks that fail internally all
    produce ``False``; none of them raise.
    """
    if config.name not in CHECK_REGISTRY:
        logger.debug("Unknown check %r", config.name)
    check_cls = resolve_check(config.name)
    preset = resolve_preset(config)

    try:
        check = check_cls.configure(preset)
    except UnknownPresetError as exc:
        logger.debug("Cannot configure %s: %s", config.name, exc)
        return False

    try:
        return check.validate(module)
    except CheckError as exc:
        logger.debug("Check %s failed to evaluate: %s", config.name, exc)
        return False


def execute_module(config: ModuleConfig, module: WasmModule, *, emit: Emitter = print) -> Verdict:
    """Dispatch one check and emit its status line."""
    verdict = Verdict(name=config.name, passed=dispatch_check(config, module))
    emit(format_status_line(verdict))
    return verdict
