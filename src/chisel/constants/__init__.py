"""Constant tables shared across Chisel."""
