"""End-to-end run orchestration.

``run`` is the primary entry point: it loads the config, resolves the
ruleset, loads the target binary and executes every configured check.
Errors raised before checks start abort the run; once checks start, every
configured check is attempted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chisel.config import ChiselContext, load_document, resolve_context
from chisel.constants.reporting import RESULTS_BANNER
from chisel.exceptions import ArtifactError, ChiselError, ErrorKind, WasmDecodeError
from chisel.model import Report
from chisel.runner.dispatch import execute_module
from chisel.types import Emitter, RunStage
from chisel.wasm import WasmModule, decode_module

logger = logging.getLogger(__name__)


def _enter(stage: RunStage) -> None:
    logger.debug("Run stage: %s", stage)


def load_artifact(target_file: str) -> WasmModule:
    """Read the target binary in one pass and decode it."""
    _enter(RunStage.READING_BINARY)
    try:
        with open(target_file, "rb") as handle:
            data = handle.read()
    except (OSError, ValueError) as exc:
        raise ArtifactError(ErrorKind.BINARY_OPEN_FAILED, f"{target_file}: {exc}") from exc

    _enter(RunStage.DECODING_ARTIFACT)
    try:
        return decode_module(data)
    except WasmDecodeError as exc:
        raise ArtifactError(ErrorKind.ARTIFACT_DECODE_FAILED, f"{target_file}: {exc}") from exc


def execute(context: ChiselContext, *, emit: Emitter = print) -> Report:
    """Run every configured check against the context's target binary."""
    module = load_artifact(context.target_file)

    _enter(RunStage.EXECUTING_MODULES)
    emit(RESULTS_BANNER)
    verdicts = tuple(execute_module(config, module, emit=emit) for config in context.modules)

    _enter(RunStage.REPORTING)
    report = Report(verdicts=verdicts)
    logger.debug(
        "%d check(s) run, %d failed",
        len(report.verdicts),
        len(report.failed),
    )
    return report


def run(config_path: Path, *, emit: Emitter = print) -> Report:
    """Load ``config_path`` and execute its first ruleset."""
    try:
        _enter(RunStage.LOADING_CONFIG)
        document = load_document(config_path)
        _enter(RunStage.RESOLVING_RULESET)
        context = resolve_context(document)
        report = execute(context, emit=emit)
    except ChiselError as exc:
        logger.debug("Run %s during %s: %s", RunStage.ERRORED, exc.stage, exc.detail or exc)
        raise

    _enter(RunStage.DONE)
    return report
