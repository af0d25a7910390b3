"""Configuration loading and ruleset resolution for chisel runs."""

from __future__ import annotations

from chisel.config.loader import load_context, load_document
from chisel.config.model import ChiselContext, ModuleConfig
from chisel.config.resolver import resolve_context

__all__ = [
    "ChiselContext",
    "ModuleConfig",
    "load_context",
    "load_document",
    "resolve_context",
]
