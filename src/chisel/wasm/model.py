"""Immutable view of a decoded WebAssembly module."""

from __future__ import annotations

from dataclasses import dataclass

from chisel.types import ExternalKind, ValueType


@dataclass(frozen=True)
class FunctionType:
    """Function signature as parameter and result value types."""

    params: tuple[ValueType, ...] = ()
    results: tuple[ValueType, ...] = ()

    def __str__(self) -> str:
        return f"({', '.join(self.params)}) -> ({', '.join(self.results)})"


@dataclass(frozen=True)
class Import:
    """Import entry; ``type_index`` is set for function imports only."""

    module: str
    field: str
    kind: ExternalKind
    type_index: int | None = None


@dataclass(frozen=True)
class Export:
    """Export entry pointing into the index space of its kind."""

    name: str
    kind: ExternalKind
    index: int


@dataclass(frozen=True)
class WasmModule:
    """Sections of a module consulted by the validation checks."""

    types: tuple[FunctionType, ...] = ()
    imports: tuple[Import, ...] = ()
    functions: tuple[int, ...] = ()
    exports: tuple[Export, ...] = ()
    start: int | None = None

    @property
    def imported_functions(self) -> tuple[Import, ...]:
        return tuple(entry for entry in self.imports if entry.kind == "function")

    def type_at(self, index: int) -> FunctionType:
        """Return the signature at ``index`` in the type section."""
        if not 0 <= index < len(self.types):
            raise IndexError(f"type index {index} out of range ({len(self.types)} types)")
        return self.types[index]

    def function_type(self, index: int) -> FunctionType:
        """Return the signature of a function in the joint imported + defined index space."""
        imported = self.imported_functions
        if 0 <= index < len(imported):
            type_index = imported[index].type_index
        elif len(imported) <= index < len(imported) + len(self.functions):
            type_index = self.functions[index - len(imported)]
        else:
            raise IndexError(f"function index {index} out of range")
        if type_index is None:
            raise IndexError(f"function import {index} has no type index")
        return self.type_at(type_index)
