# src/fuzzy_compare/metrics/types.py
"""
types.py.

Does: Define the metric families and the structural contracts any distance
      metric must satisfy to be normalized by `compare`.
Used by: metric adapters, scoring.normalize, scoring.dispatch (Partial block windows).
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Protocol, runtime_checkable

__all__ = [
    "MetricFamily",
    "MatchingBlock",
    "DistanceMetric",
    "QGramMetric",
    "BlockMatchingMetric",
]

__docformat__ = "google"


class MetricFamily(str, Enum):
    """How a raw distance is turned into a similarity score."""

    BOUNDED = "bounded"                    # raw already in [0,1]
    EDIT = "edit"                          # raw is an edit count
    QGRAM_COUNT = "qgram_count"            # raw is a q-gram count difference
    QGRAM_NORMALIZED = "qgram_normalized"  # raw already in [0,1], needs q-gram fallback


class MatchingBlock(NamedTuple):
    """A maximal common substring: s1[a:a+size] == s2[b:b+size]."""

    a: int
    b: int
    size: int


@runtime_checkable
class DistanceMetric(Protocol):
    """
    Structural contract for primitive metrics.

    - family: selects the normalization rule.
    - evaluate(s1, s2): raw, non-negative distance.
    """

    family: MetricFamily

    def evaluate(self, s1: str, s2: str) -> float: ...


@runtime_checkable
class QGramMetric(DistanceMetric, Protocol):
    q: int


@runtime_checkable
class BlockMatchingMetric(DistanceMetric, Protocol):
    """Metric that also exposes matching blocks ordered by position in s1."""

    def matching_blocks(self, s1: str, s2: str) -> list[MatchingBlock]: ...
