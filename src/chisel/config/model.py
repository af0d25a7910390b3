"""Typed configuration model resolved from a ruleset document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleConfig:
    """A single check declaration from the selected ruleset.

    ``preset`` is ``None`` when the declaration omits it; defaults are
    applied at dispatch time, never here.
    """

    name: str
    preset: str | None = None


@dataclass(frozen=True)
class ChiselContext:
    """Target binary path and the checks to run against it, in declaration order."""

    target_file: str
    modules: tuple[ModuleConfig, ...] = ()
