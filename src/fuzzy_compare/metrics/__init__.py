# src/fuzzy_compare/metrics/__init__.py
"""
metrics.

Does: Facade over the primitive distance metrics and their structural contracts.
Returns: Metric families, Protocols, and ready-to-use adapters (edit, q-gram, bounded).
Used by: scoring dispatch, search helpers, callers building composite metrics.
"""

from __future__ import annotations

# ── Contracts ────────────────────────────────────────────────────────────────
from .types import (
    BlockMatchingMetric,
    DistanceMetric,
    MatchingBlock,
    MetricFamily,
    QGramMetric,
)

# ── Edit family ──────────────────────────────────────────────────────────────
from .edit import DamerauLevenshtein, Hamming, Levenshtein

# ── Q-gram family ────────────────────────────────────────────────────────────
from .qgram import Cosine, Jaccard, Overlap, QGram, SorensenDice, qgram_profile

# ── Bounded ──────────────────────────────────────────────────────────────────
from .bounded import ExactMatch, Jaro, RatcliffObershelp

__all__ = [
    # Contracts
    "MetricFamily",
    "MatchingBlock",
    "DistanceMetric",
    "QGramMetric",
    "BlockMatchingMetric",
    # Edit
    "Hamming",
    "Levenshtein",
    "DamerauLevenshtein",
    # Q-gram
    "qgram_profile",
    "QGram",
    "Cosine",
    "Jaccard",
    "SorensenDice",
    "Overlap",
    # Bounded
    "ExactMatch",
    "Jaro",
    "RatcliffObershelp",
]

__docformat__ = "google"
