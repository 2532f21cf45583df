# src/fuzzy_compare/scoring/__init__.py
"""
scoring.

Does: Facade exposing `compare`, the composite metrics, the family normalizer,
and the token helpers they are built on.

Returns: Public API for normalized string similarity.
Used by: fuzzy_compare package root, search helpers.
"""

from __future__ import annotations

# ── Composites ───────────────────────────────────────────────────────────────
from .composites import (
    Comparable,
    CompositeMetric,
    Partial,
    TokenMax,
    TokenSet,
    TokenSort,
    Winkler,
)

# ── Dispatch ─────────────────────────────────────────────────────────────────
from .dispatch import common_prefix_len, compare

# ── Normalization ────────────────────────────────────────────────────────────
from .normalize import UnsupportedMetricError, normalize_distance

# ── Tokens ───────────────────────────────────────────────────────────────────
from .tokens import partition_tokens, sort_tokens, split_tokens

__all__ = [
    # Dispatch
    "compare",
    "common_prefix_len",
    # Composites
    "Winkler",
    "Partial",
    "TokenSort",
    "TokenSet",
    "TokenMax",
    "CompositeMetric",
    "Comparable",
    # Normalization
    "normalize_distance",
    "UnsupportedMetricError",
    # Tokens
    "split_tokens",
    "sort_tokens",
    "partition_tokens",
]

__docformat__ = "google"
