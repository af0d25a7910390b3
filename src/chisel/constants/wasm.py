"""Binary format constants for the WebAssembly module decoder."""

from __future__ import annotations

WASM_MAGIC: bytes = b"\x00asm"
WASM_VERSION: int = 1
WASM_HEADER_SIZE: int = 8

SECTION_CUSTOM: int = 0
SECTION_TYPE: int = 1
SECTION_IMPORT: int = 2
SECTION_FUNCTION: int = 3
SECTION_TABLE: int = 4
SECTION_MEMORY: int = 5
SECTION_GLOBAL: int = 6
SECTION_EXPORT: int = 7
SECTION_START: int = 8
SECTION_ELEMENT: int = 9
SECTION_CODE: int = 10
SECTION_DATA: int = 11
SECTION_DATA_COUNT: int = 12

KNOWN_SECTION_IDS: frozenset[int] = frozenset(range(SECTION_CUSTOM, SECTION_DATA_COUNT + 1))

FUNC_TYPE_FORM: int = 0x60

VALUE_TYPES: dict[int, str] = {
    0x7F: "i32",
    0x7E: "i64",
    0x7D: "f32",
    0x7C: "f64",
    0x7B: "v128",
    0x70: "funcref",
    0x6F: "externref",
}

REFERENCE_TYPES: frozenset[int] = frozenset({0x70, 0x6F})

EXTERNAL_KINDS: dict[int, str] = {
    0x00: "function",
    0x01: "table",
    0x02: "memory",
    0x03: "global",
}

# Bit 0 marks a maximum, bit 1 a shared memory.
LIMITS_HAS_MAX: int = 0x01
LIMITS_VALID_FLAGS: frozenset[int] = frozenset({0x00, 0x01, 0x02, 0x03})

LEB128_U32_MAX_BYTES: int = 5
U32_MAX: int = 0xFFFFFFFF
