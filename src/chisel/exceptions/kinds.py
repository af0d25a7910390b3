"""Closed set of fatal run error kinds and their display text."""

from __future__ import annotations

from enum import Enum

from chisel.types.run import RunStage


class ErrorKind(Enum):
    """Fatal error kinds, each carrying its message and the stage that raises it."""

    NO_SUBCOMMAND = ("No subcommand provided.", RunStage.IDLE)
    CONFIG_OPEN_FAILED = ("Failed to open configuration file.", RunStage.LOADING_CONFIG)
    CONFIG_PARSE_FAILED = ("Failed to parse configuration file.", RunStage.LOADING_CONFIG)
    CONFIG_INVALID = ("Config is invalid.", RunStage.RESOLVING_RULESET)
    CONFIG_MISSING_FILE = ("Config missing file path to chisel.", RunStage.RESOLVING_RULESET)
    FILE_TYPE_MISMATCH = ("Entry 'file' does not map to a string.", RunStage.RESOLVING_RULESET)
    MODULE_TYPE_MISMATCH = (
        "An entry 'module' does not point to a key-value map.",
        RunStage.RESOLVING_RULESET,
    )
    PRESET_TYPE_MISMATCH = (
        "A field 'preset' belonging to a module is not a string",
        RunStage.RESOLVING_RULESET,
    )
    BINARY_OPEN_FAILED = ("Failed to open wasm binary.", RunStage.READING_BINARY)
    ARTIFACT_DECODE_FAILED = ("Failed to deserialize the wasm binary.", RunStage.DECODING_ARTIFACT)

    def __init__(self, message: str, stage: RunStage) -> None:
        self.message = message
        self.stage = stage
