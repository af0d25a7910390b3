"""Configuration defaults and well-known ruleset keys."""

from __future__ import annotations

DEFAULT_CONFIG_PATH: str = "chisel.yml"

FILE_KEY: str = "file"
PRESET_KEY: str = "preset"

DEFAULT_PRESET: str = "ewasm"

# The start-function check is not wired to module flags yet.
DEFAULT_START_REQUIRED: bool = False
