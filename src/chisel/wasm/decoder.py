"""WebAssembly binary decoder.

Decodes the header and the type, import, function, export and start
sections. Custom sections must carry a valid name; every other known
section is validated for framing and skipped.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from typing import TypeVar, cast

from chisel.constants.wasm import (
    EXTERNAL_KINDS,
    FUNC_TYPE_FORM,
    KNOWN_SECTION_IDS,
    LEB128_U32_MAX_BYTES,
    LIMITS_HAS_MAX,
    LIMITS_VALID_FLAGS,
    REFERENCE_TYPES,
    SECTION_CUSTOM,
    SECTION_EXPORT,
    SECTION_FUNCTION,
    SECTION_IMPORT,
    SECTION_START,
    SECTION_TYPE,
    U32_MAX,
    VALUE_TYPES,
    WASM_HEADER_SIZE,
    WASM_MAGIC,
    WASM_VERSION,
)
from chisel.exceptions import WasmDecodeError
from chisel.types import ExternalKind, ValueType
from chisel.wasm.model import Export, FunctionType, Import, WasmModule

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class _Reader:
    """Cursor over a bounded slice of the module bytes."""

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None) -> None:
        self._data = data
        self.offset = offset
        self.end = len(data) if end is None else end

    def at_end(self) -> bool:
        return self.offset >= self.end

    def byte(self) -> int:
        if self.offset >= self.end:
            raise WasmDecodeError("unexpected end of data", self.offset)
        value = self._data[self.offset]
        self.offset += 1
        return value

    def take(self, size: int) -> bytes:
        if size > self.end - self.offset:
            raise WasmDecodeError(f"expected {size} bytes, {self.end - self.offset} left", self.offset)
        chunk = self._data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def u32(self) -> int:
        """Read an unsigned LEB128 value that must fit in 32 bits."""
        start = self.offset
        result = 0
        shift = 0
        for _ in range(LEB128_U32_MAX_BYTES):
            byte = self.byte()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                if result > U32_MAX:
                    raise WasmDecodeError("LEB128 value exceeds 32 bits", start)
                return result
            shift += 7
        raise WasmDecodeError("LEB128 value is too long", start)

    def name(self) -> str:
        start = self.offset
        raw = self.take(self.u32())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WasmDecodeError(f"name is not valid UTF-8: {exc.reason}", start) from exc

    def vector(self, read_item: Callable[[_Reader], _T]) -> tuple[_T, ...]:
        count = self.u32()
        return tuple(read_item(self) for _ in range(count))


def decode_module(data: bytes) -> WasmModule:
    """Decode raw module bytes into a ``WasmModule``."""
    _check_header(data)

    reader = _Reader(data, WASM_HEADER_SIZE)
    seen: set[int] = set()
    types: tuple[FunctionType, ...] = ()
    imports: tuple[Import, ...] = ()
    functions: tuple[int, ...] = ()
    exports: tuple[Export, ...] = ()
    start: int | None = None

    while not reader.at_end():
        section_offset = reader.offset
        section_id = reader.byte()
        size = reader.u32()
        if size > reader.end - reader.offset:
            raise WasmDecodeError(f"section {section_id} overruns the module", section_offset)
        if section_id not in KNOWN_SECTION_IDS:
            raise WasmDecodeError(f"unknown section id {section_id}", section_offset)
        if section_id != SECTION_CUSTOM:
            if section_id in seen:
                raise WasmDecodeError(f"duplicate section id {section_id}", section_offset)
            seen.add(section_id)

        body = _Reader(data, reader.offset, reader.offset + size)
        reader.offset += size

        if section_id == SECTION_CUSTOM:
            logger.debug("Skipping custom section %r (%d bytes)", body.name(), size)
            continue

        if section_id == SECTION_TYPE:
            types = body.vector(_read_function_type)
        elif section_id == SECTION_IMPORT:
            imports = body.vector(_read_import)
        elif section_id == SECTION_FUNCTION:
            functions = body.vector(_Reader.u32)
        elif section_id == SECTION_EXPORT:
            exports = body.vector(_read_export)
        elif section_id == SECTION_START:
            start = body.u32()
        else:
            logger.debug("Skipping section %d (%d bytes)", section_id, size)
            continue

        if not body.at_end():
            raise WasmDecodeError(f"section {section_id} has {body.end - body.offset} trailing bytes", body.offset)

    return WasmModule(types=types, imports=imports, functions=functions, exports=exports, start=start)


def _check_header(data: bytes) -> None:
    if len(data) < WASM_HEADER_SIZE:
        raise WasmDecodeError(f"module is {len(data)} bytes, shorter than the header")
    if data[:4] != WASM_MAGIC:
        raise WasmDecodeError("missing \\0asm magic", 0)
    version = int(cast(tuple[int], struct.unpack_from("<I", data, 4))[0])
    if version != WASM_VERSION:
        raise WasmDecodeError(f"unsupported version {version}", 4)


def _read_value_type(reader: _Reader) -> ValueType:
    offset = reader.offset
    code = reader.byte()
    if code not in VALUE_TYPES:
        raise WasmDecodeError(f"unknown value type {code:#x}", offset)
    return cast(ValueType, VALUE_TYPES[code])


def _read_function_type(reader: _Reader) -> FunctionType:
    offset = reader.offset
    form = reader.byte()
    if form != FUNC_TYPE_FORM:
        raise WasmDecodeError(f"unexpected type form {form:#x}", offset)
    params = reader.vector(_read_value_type)
    results = reader.vector(_read_value_type)
    return FunctionType(params=params, results=results)


def _read_external_kind(reader: _Reader) -> ExternalKind:
    offset = reader.offset
    code = reader.byte()
    if code not in EXTERNAL_KINDS:
        raise WasmDecodeError(f"unknown external kind {code:#x}", offset)
    return cast(ExternalKind, EXTERNAL_KINDS[code])


def _skip_limits(reader: _Reader) -> None:
    offset = reader.offset
    flags = reader.byte()
    if flags not in LIMITS_VALID_FLAGS:
        raise WasmDecodeError(f"invalid limits flags {flags:#x}", offset)
    reader.u32()
    if flags & LIMITS_HAS_MAX:
        reader.u32()


def _read_import(reader: _Reader) -> Import:
    module = reader.name()
    field = reader.name()
    kind = _read_external_kind(reader)
    type_index: int | None = None
    if kind == "function":
        type_index = reader.u32()
    elif kind == "table":
        offset = reader.offset
        if reader.byte() not in REFERENCE_TYPES:
            raise WasmDecodeError("table import element type is not a reference type", offset)
        _skip_limits(reader)
    elif kind == "memory":
        _skip_limits(reader)
    else:
        _read_value_type(reader)
        offset = reader.offset
        if reader.byte() not in (0, 1):
            raise WasmDecodeError("invalid global mutability flag", offset)
    return Import(module=module, field=field, kind=kind, type_index=type_index)


def _read_export(reader: _Reader) -> Export:
    name = reader.name()
    kind = _read_external_kind(reader)
    return Export(name=name, kind=kind, index=reader.u32())
