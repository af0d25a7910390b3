"""Shared pytest fixtures for building WebAssembly modules and config files."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

import pytest

_VALUE_TYPE_CODES: dict[str, int] = {"i32": 0x7F, "i64": 0x7E, "f32": 0x7D, "f64": 0x7C}
_KIND_CODES: dict[str, int] = {"function": 0, "table": 1, "memory": 2, "global": 3}

Signature: TypeAlias = tuple[Sequence[str], Sequence[str]]
ImportSpec: TypeAlias = tuple[str, str, str, int | None]
ExportSpec: TypeAlias = tuple[str, str, int]


def uleb(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _name(text: str) -> bytes:
    raw = text.encode("utf-8")
    return uleb(len(raw)) + raw


def _vec(items: Sequence[bytes]) -> bytes:
    return uleb(len(items)) + b"".join(items)


def section(section_id: int, payload: bytes) -> bytes:
    return bytes([section_id]) + uleb(len(payload)) + payload


def _import_entry(module: str, field: str, kind: str, type_index: int | None) -> bytes:
    head = _name(module) + _name(field) + bytes([_KIND_CODES[kind]])
    if kind == "function":
        assert type_index is not None
        return head + uleb(type_index)
    if kind == "memory":
        return head + b"\x00" + uleb(1)
    if kind == "table":
        return head + b"\x70\x00" + uleb(1)
    return head + b"\x7f\x00"


def encode_module(
    *,
    types: Sequence[Signature] = (),
    imports: Sequence[ImportSpec] = (),
    functions: Sequence[int] = (),
    memory: bool = False,
    exports: Sequence[ExportSpec] = (),
    start: int | None = None,
) -> bytes:
    """Encode a minimal module; function bodies are omitted."""
    parts = [b"\x00asm", (1).to_bytes(4, "little")]
    if types:
        entries = [
            b"\x60"
            + _vec([bytes([_VALUE_TYPE_CODES[p]]) for p in params])
            + _vec([bytes([_VALUE_TYPE_CODES[r]]) for r in results])
            for params, results in types
        ]
        parts.append(section(1, _vec(entries)))
    if imports:
        parts.append(section(2, _vec([_import_entry(*entry) for entry in imports])))
    if functions:
        parts.append(section(3, _vec([uleb(index) for index in functions])))
    if memory:
        parts.append(section(5, _vec([b"\x00" + uleb(1)])))
    if exports:
        parts.append(
            section(7, _vec([_name(name) + bytes([_KIND_CODES[kind]]) + uleb(index) for name, kind, index in exports]))
        )
    if start is not None:
        parts.append(section(8, uleb(start)))
    return b"".join(parts)


@pytest.fixture(scope="session")
def build_wasm() -> Callable[..., bytes]:
    """Return the module encoder."""
    return encode_module


@pytest.fixture(scope="session")
def ewasm_bytes() -> bytes:
    """A module that satisfies the ewasm export and import presets."""
    return encode_module(
        types=[((), ()), (("i64",), ())],
        imports=[("ethereum", "useGas", "function", 1)],
        functions=[0],
        memory=True,
        exports=[("main", "function", 1), ("memory", "memory", 0)],
    )


@pytest.fixture(scope="session")
def start_func_bytes() -> bytes:
    """A module that declares a start function."""
    return encode_module(
        types=[((), ())],
        functions=[0],
        memory=True,
        exports=[("main", "function", 0), ("memory", "memory", 0)],
        start=0,
    )


@pytest.fixture
def write_wasm(tmp_path: Path) -> Callable[[bytes], Path]:
    """Write module bytes to ``a.wasm`` under ``tmp_path``."""

    def _write(data: bytes, name: str = "a.wasm") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to ``chisel.yml`` under ``tmp_path``."""

    def _write(text: str, name: str = "chisel.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
