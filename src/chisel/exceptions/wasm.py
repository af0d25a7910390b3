"""Decoder-level exceptions."""

from __future__ import annotations


class WasmDecodeError(ValueError):
    """Raised when bytes are not a well-formed WebAssembly module."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset:#x})"
        super().__init__(message)
        self.offset = offset
