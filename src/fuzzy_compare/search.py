# src/fuzzy_compare/search.py
"""
search.py

Does: Score one query against a collection of candidates with any metric:
      best match above a floor, or every match above it ranked by score.
Returns: find_best() -> (candidate, score) | None; find_all() -> ranked list.
Used by: Callers matching free text against a known vocabulary.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Final

from fuzzy_compare.scoring import Comparable, compare
from fuzzy_compare.utils.load_config import load_config
from fuzzy_compare.utils.log import debug

__all__ = [
    "SearchDefaults",
    "get_search_defaults",
    "find_best",
    "find_all",
]

__docformat__ = "google"

DEFAULTS_FILE = "search_defaults"


class _Unset(Enum):
    """Marks `limit` as not passed, since None already means "no limit"."""

    UNSET = "unset"


_UNSET: Final = _Unset.UNSET


@dataclass(frozen=True)
class SearchDefaults:
    min_score: float = 0.8
    limit: int | None = None


def _validate_defaults(raw: dict[str, Any]) -> dict[str, Any]:
    min_score = raw.get("min_score", SearchDefaults.min_score)
    if isinstance(min_score, bool) or not isinstance(min_score, (int, float)):
        raise ValueError(f"min_score must be a number, got {min_score!r}")
    min_score = float(min_score)
    if not 0.0 <= min_score <= 1.0:
        raise ValueError(f"min_score must lie in [0, 1], got {min_score}")
    limit = raw.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        raise ValueError(f"limit must be null or a positive integer, got {limit!r}")
    return {"min_score": min_score, "limit": limit}


@lru_cache(maxsize=1)
def get_search_defaults() -> SearchDefaults:
    """
    Does: Load <data>/search_defaults.json once (validated).
    Returns: SearchDefaults. Call get_search_defaults.cache_clear() after changing the file.
    """
    values = load_config(DEFAULTS_FILE, validator=_validate_defaults)
    return SearchDefaults(**values)


def _scored(
    query: str,
    candidates: Iterable[str],
    metric: Comparable,
    min_score: float,
) -> list[tuple[str, float]]:
    hits: list[tuple[str, float]] = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            debug(f"skip non-str candidate {candidate!r}", topic="search")
            continue
        score = compare(query, candidate, metric)
        if score >= min_score:
            hits.append((candidate, score))
    return hits


def find_best(
    query: str,
    candidates: Iterable[str],
    metric: Comparable,
    *,
    min_score: float | None = None,
) -> tuple[str, float] | None:
    """
    Does: Highest-scoring candidate with score >= min_score; ties keep the earliest.
    Returns: (candidate, score) or None when nothing reaches the floor.
    """
    if min_score is None:
        min_score = get_search_defaults().min_score

    best: tuple[str, float] | None = None
    for candidate, score in _scored(query, candidates, metric, min_score):
        if best is None or score > best[1]:
            best = (candidate, score)

    debug(f"find_best {query!r} -> {best!r} (min_score={min_score})", topic="search")
    return best


def find_all(
    query: str,
    candidates: Iterable[str],
    metric: Comparable,
    *,
    min_score: float | None = None,
    limit: int | None | _Unset = _UNSET,
) -> list[tuple[str, float]]:
    """
    Does: Every candidate with score >= min_score, best first (stable for ties).
    Returns: List of (candidate, score), truncated to `limit` when set.
    """
    if min_score is None or limit is _UNSET:
        defaults = get_search_defaults()
        if min_score is None:
            min_score = defaults.min_score
        if limit is _UNSET:
            limit = defaults.limit

    hits = sorted(_scored(query, candidates, metric, min_score), key=lambda h: h[1], reverse=True)
    if limit is not None:
        hits = hits[:limit]

    debug(f"find_all {query!r} -> {len(hits)} hit(s) (min_score={min_score})", topic="search")
    return hits
