"""WebAssembly binary decoding."""

from .decoder import decode_module
from .model import Export, FunctionType, Import, WasmModule

__all__ = ["Export", "FunctionType", "Import", "WasmModule", "decode_module"]
