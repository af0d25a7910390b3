"""Chisel: rule-driven validation for WebAssembly modules."""

__version__ = "0.1.0"
