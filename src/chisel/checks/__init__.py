"""Validation checks runnable from a chisel ruleset."""

from .base import Check
from .exports import ExportRule, VerifyExports
from .imports import ImportRule, VerifyImports
from .registry import CHECK_REGISTRY, RejectAll, resolve_check
from .startfunc import CheckStartFunc

__all__ = [
    "CHECK_REGISTRY",
    "Check",
    "CheckStartFunc",
    "ExportRule",
    "ImportRule",
    "RejectAll",
    "VerifyExports",
    "VerifyImports",
    "resolve_check",
]
