"""Check interface for module validation capabilities."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Self

from chisel.wasm import WasmModule

_CHECK_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9]+$")


class Check(ABC):
    """Abstract base class for validation checks.

    A check is built from a preset name with ``configure`` and then applied
    to a decoded module with ``validate``.
    """

    name: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate check subclasses define a lowercase alphanumeric `name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `name`")
        if not name.startswith("_") and not _CHECK_NAME_PATTERN.match(name):
            raise TypeError(f"{cls.__name__}.name must be lowercase alphanumeric (got {name!r})")

    @classmethod
    @abstractmethod
    def configure(cls, preset: str) -> Self:
        """Build an instance for ``preset``; raise ``UnknownPresetError`` if undefined."""

    @abstractmethod
    def validate(self, module: WasmModule) -> bool:
        """Return whether ``module`` satisfies this check; raise ``CheckError`` if it cannot tell."""
