"""Branding constants for terminal output."""

from __future__ import annotations

PROGRAM_NAME: str = "chisel"
CLI_DESCRIPTION: str = "Validate WebAssembly modules against rulesets declared in a YAML config."
