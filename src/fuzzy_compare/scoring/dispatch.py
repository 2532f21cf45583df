# src/fuzzy_compare/scoring/dispatch.py
from __future__ import annotations

"""
dispatch.py

Does: Public `compare(s1, s2, metric)`: route composites to their scorer and
      primitives to the family normalizer. Composite scorers recurse through
      `compare`, so any nesting depth works.
Returns: Similarity in [0,1]; pure, no I/O, no shared state.
Used by: Callers, search helpers, every composite scorer.
"""

import logging
from collections.abc import Callable
from typing import Any

from fuzzy_compare.metrics.types import BlockMatchingMetric
from .composites import Comparable, Partial, TokenMax, TokenSet, TokenSort, Winkler
from .normalize import normalize_distance
from .tokens import partition_tokens, sort_tokens, split_tokens

__all__ = ["compare", "common_prefix_len"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
WINKLER_PREFIX_CAP = 4        # prefix chars counted by the Winkler boost
UNBASE_SCALE = 0.95           # penalty on every token-based TokenMax candidate
UNEQUAL_LENGTH_RATIO = 1.5    # len2 >= ratio * len1 switches TokenMax to partials
EXTREME_LENGTH_RATIO = 8      # len2 > ratio * len1 uses the harsher partial scale
PARTIAL_SCALE = 0.9
EXTREME_PARTIAL_SCALE = 0.6


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def common_prefix_len(a: str, b: str, limit: int | None = None) -> int:
    """
    Does: Count leading characters shared by a and b, stopping at `limit`.
    Returns: Integer in [0, min(len(a), len(b), limit)].
    """
    n = min(len(a), len(b))
    if limit is not None:
        n = min(n, limit)
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _shorter_first(s1: str, s2: str) -> tuple[str, str]:
    # ties keep argument order
    if len(s1) > len(s2):
        return s2, s1
    return s1, s2


# ─────────────────────────────────────────────────────────────────────────────
# 1) Winkler
# ─────────────────────────────────────────────────────────────────────────────

def _compare_winkler(s1: str, s2: str, metric: Winkler) -> float:
    score = compare(s1, s2, metric.inner)
    if score >= metric.boosting_limit:
        prefix = common_prefix_len(s1, s2, WINKLER_PREFIX_CAP)
        score += prefix * metric.scaling_factor * (1 - score)
    return score


# ─────────────────────────────────────────────────────────────────────────────
# 2) Partial
# ─────────────────────────────────────────────────────────────────────────────

def _block_windows(short: str, long: str, metric: BlockMatchingMetric) -> list[str]:
    """
    Does: One window of len(short) per matching block, placed so the block lines
          up inside it, shifted back inside `long` when it would overflow.
    """
    len1, len2 = len(short), len(long)
    windows = []
    for block in metric.matching_blocks(short, long):
        start = block.b - block.a
        if start < 0:
            start = 0
        elif start + len1 > len2:
            start = len2 - len1
        windows.append(long[start : start + len1])
    return windows


def _compare_partial(s1: str, s2: str, metric: Partial) -> float:
    short, long = _shorter_first(s1, s2)
    inner = metric.inner
    len1, len2 = len(short), len(long)

    if len1 == len2:
        return compare(short, long, inner)
    if len1 == 0:
        # empty-vs-empty policy belongs to the inner metric
        return compare("", "", inner)

    if isinstance(inner, BlockMatchingMetric):
        windows = _block_windows(short, long, inner)
        log.debug("Partial: %d block windows (len1=%d, len2=%d)", len(windows), len1, len2)
    else:
        windows = [long[i : i + len1] for i in range(len2 - len1 + 1)]

    best = 0.0
    for window in windows:
        best = max(best, compare(short, window, inner))
    return best


# ─────────────────────────────────────────────────────────────────────────────
# 3) TokenSort / TokenSet
# ─────────────────────────────────────────────────────────────────────────────

def _compare_token_sort(s1: str, s2: str, metric: TokenSort) -> float:
    return compare(sort_tokens(s1), sort_tokens(s2), metric.inner)


def _compare_token_set(s1: str, s2: str, metric: TokenSet) -> float:
    common, rest1, rest2 = partition_tokens(split_tokens(s1), split_tokens(s2))
    s0 = " ".join(common)
    s1_full = " ".join(common + rest1)
    s2_full = " ".join(common + rest2)

    if not s0:
        # an empty common part would inflate scores against ""
        return compare(s1_full, s2_full, metric.inner)

    return max(
        compare(s0, s1_full, metric.inner),
        compare(s1_full, s2_full, metric.inner),
        compare(s0, s2_full, metric.inner),
    )


# ─────────────────────────────────────────────────────────────────────────────
# 4) TokenMax
# ─────────────────────────────────────────────────────────────────────────────

def _compare_token_max(s1: str, s2: str, metric: TokenMax) -> float:
    inner = metric.inner
    base = compare(s1, s2, inner)
    short, long = _shorter_first(s1, s2)
    len1, len2 = len(short), len(long)

    if len2 >= UNEQUAL_LENGTH_RATIO * len1:
        partial_scale = EXTREME_PARTIAL_SCALE if len2 > EXTREME_LENGTH_RATIO * len1 else PARTIAL_SCALE
        partial = compare(short, long, Partial(inner))
        ptsor = compare(short, long, TokenSort(Partial(inner)))
        ptser = compare(short, long, TokenSet(Partial(inner)))
        log.debug(
            "TokenMax[partial x%.2f]: base=%.4f partial=%.4f sort=%.4f set=%.4f",
            partial_scale, base, partial, ptsor, ptser,
        )
        return max(
            base,
            partial * partial_scale,
            ptsor * UNBASE_SCALE * partial_scale,
            ptser * UNBASE_SCALE * partial_scale,
        )

    tsor = compare(short, long, TokenSort(inner))
    tser = compare(short, long, TokenSet(inner))
    log.debug("TokenMax[direct]: base=%.4f sort=%.4f set=%.4f", base, tsor, tser)
    return max(base, tsor * UNBASE_SCALE, tser * UNBASE_SCALE)


# ─────────────────────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────────────────────

_COMPOSITE_SCORERS: dict[type, Callable[[str, str, Any], float]] = {
    Winkler: _compare_winkler,
    Partial: _compare_partial,
    TokenSort: _compare_token_sort,
    TokenSet: _compare_token_set,
    TokenMax: _compare_token_max,
}


def compare(s1: str, s2: str, metric: Comparable) -> float:
    """
    Does: Score two strings with a primitive metric or a composite.
    Returns: Float in [0,1], 1.0 meaning identical.
    Raises: UnsupportedMetricError if `metric` is neither.
    """
    scorer = _COMPOSITE_SCORERS.get(type(metric))
    if scorer is not None:
        return scorer(s1, s2, metric)
    return normalize_distance(s1, s2, metric)
