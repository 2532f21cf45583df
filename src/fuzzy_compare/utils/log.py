"""
log.py.

Does: Opt-in stderr tracing by topic. FUZZY_COMPARE_DEBUG_TOPICS holds a comma
      list of topics (e.g. "search") or "all"; nothing is printed when unset.
Used by: search helpers.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

ENV_VAR = "FUZZY_COMPARE_DEBUG_TOPICS"
ALL_TOPICS = "all"


def _topic_key(topic: str) -> str:
    return topic.strip().lower()


def _read_env() -> frozenset[str]:
    return frozenset(_topic_key(t) for t in os.getenv(ENV_VAR, "").split(",") if t.strip())


_enabled: frozenset[str] = _read_env()


def reload_topics() -> None:
    """Re-read FUZZY_COMPARE_DEBUG_TOPICS (tests flip it with monkeypatch)."""
    global _enabled
    _enabled = _read_env()


def is_enabled(topic: str) -> bool:
    return ALL_TOPICS in _enabled or _topic_key(topic) in _enabled


def debug(
    msg: str,
    topic: str = "compare",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Write `[time] [topic][LEVEL] msg` to `stream` (stderr) when `topic` is enabled."""
    if not is_enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{stamp}] [{_topic_key(topic)}][{level.upper()}] {msg}", file=stream or sys.stderr)
