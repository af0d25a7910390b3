"""Command-line interface for Chisel."""
