"""
load_config.py.

Does: Read one JSON object of tunables from the data directory and hand it
      to a validator.
Returns: dict[str, Any] as produced by the validator (or the parsed object).
Used by: search.get_search_defaults.

The data directory is $FUZZY_COMPARE_DATA_DIR when set, otherwise the
``data/`` folder shipped inside the package.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "Validator",
    "data_dir",
    "load_config",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

ENV_VAR = "FUZZY_COMPARE_DATA_DIR"
PACKAGED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """The configured data directory does not exist."""


class ConfigFileNotFound(FileNotFoundError):
    """No <name>.json in the data directory."""


class ConfigParseError(ValueError):
    """The file is not valid JSON, or the validator rejected its values."""


class ConfigTypeError(TypeError):
    """The file parsed, but its top level is not a JSON object."""


# ── Resolution ───────────────────────────────────────────────────────────────
def data_dir() -> Path:
    """
    Does: Pick the directory config files are read from.
    Returns: $FUZZY_COMPARE_DATA_DIR (resolved) if set, else the packaged data dir.
    """
    override = os.environ.get(ENV_VAR)
    if not override:
        return PACKAGED_DATA_DIR

    path = Path(override).expanduser().resolve()
    if not path.is_dir():
        raise DataDirNotFound(f"{ENV_VAR}={override!r} is not a directory")
    return path


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(name: str, *, validator: Validator | None = None) -> dict[str, Any]:
    """
    Does: Parse <data_dir>/<name>.json, require an object at top level,
          then run `validator` over it.
    Returns: The validated dict.
    Raises: ConfigFileNotFound, ConfigParseError (bad JSON or a validator
            ValueError/TypeError), ConfigTypeError (not an object).
    """
    path = data_dir() / f"{name}.json"

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, dict):
        raise ConfigTypeError(f"{path} must hold a JSON object, got {type(payload).__name__}")

    if validator is not None:
        try:
            payload = validator(payload)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"Rejected values in {path}: {e}") from e

    log.debug("Loaded %s (%d keys)", path, len(payload))
    return payload
