"""
utils.

Does: Expose the JSON tunables reader and the topic-gated stderr tracer.
Used by: search defaults and candidate search tracing.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    data_dir,
    load_config,
)
from .log import debug, is_enabled, reload_topics

__all__ = [
    "load_config",
    "data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "debug",
    "is_enabled",
    "reload_topics",
]
