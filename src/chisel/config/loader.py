"""Config file loading for chisel runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chisel.config.model import ChiselContext
from chisel.config.resolver import resolve_context
from chisel.exceptions import ConfigError, ErrorKind

logger = logging.getLogger(__name__)


def load_document(path: Path) -> Any:
    """Read and parse a YAML config file into a generic document."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(ErrorKind.CONFIG_OPEN_FAILED, f"{path}: {exc}") from exc

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(ErrorKind.CONFIG_PARSE_FAILED, f"{path}: {exc}") from exc

    logger.debug("Loaded config document from %s", path)
    return document


def load_context(path: Path) -> ChiselContext:
    """Load a config file and resolve its first ruleset."""
    return resolve_context(load_document(path))
