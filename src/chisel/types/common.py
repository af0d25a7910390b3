"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

ExternalKind: TypeAlias = Literal["function", "table", "memory", "global"]
ValueType: TypeAlias = Literal["i32", "i64", "f32", "f64", "v128", "funcref", "externref"]

Emitter: TypeAlias = Callable[[str], None]
