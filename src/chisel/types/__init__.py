"""Shared type aliases for Chisel."""

from .common import Emitter, ExternalKind, ValueType
from .run import RunStage

__all__ = ["Emitter", "ExternalKind", "RunStage", "ValueType"]
