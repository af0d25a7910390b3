"""Core result models for Chisel."""

from .entities import Report, Verdict

__all__ = ["Report", "Verdict"]
