"""Run orchestration package."""

from __future__ import annotations

from .dispatch import dispatch_check, execute_module, resolve_preset
from .orchestrator import execute, load_artifact, run

__all__ = [
    "dispatch_check",
    "execute",
    "execute_module",
    "load_artifact",
    "resolve_preset",
    "run",
]
