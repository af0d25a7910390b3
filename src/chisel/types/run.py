"""Run lifecycle stages."""

from __future__ import annotations

from enum import StrEnum


class RunStage(StrEnum):
    """Stages a single chisel run moves through, in order."""

    IDLE = "idle"
    LOADING_CONFIG = "loading_config"
    RESOLVING_RULESET = "resolving_ruleset"
    READING_BINARY = "reading_binary"
    DECODING_ARTIFACT = "decoding_artifact"
    EXECUTING_MODULES = "executing_modules"
    REPORTING = "reporting"
    DONE = "done"
    ERRORED = "errored"
