# src/fuzzy_compare/metrics/qgram.py
"""
qgram.py

Does: Q-gram metrics over contiguous substrings of length q.
      - QGram: count-based L1 distance between q-gram profiles (family QGRAM_COUNT).
      - Cosine / Jaccard / SorensenDice / Overlap: distances already in [0,1]
        (family QGRAM_NORMALIZED).
Returns: Frozen metric values exposing `q`, `family` and `evaluate`.
Used by: compare (length fallback when a string has no q-gram), composite metrics.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import ClassVar

from .types import MetricFamily

__all__ = [
    "qgram_profile",
    "QGram",
    "Cosine",
    "Jaccard",
    "SorensenDice",
    "Overlap",
]

__docformat__ = "google"


def qgram_profile(s: str, q: int) -> Counter[str]:
    """
    Does: Count every contiguous substring of length q.
    Returns: Counter (empty when len(s) < q).
    """
    return Counter(s[i : i + q] for i in range(len(s) - q + 1))


@dataclass(frozen=True)
class _QGramDistance:
    q: int = 2

    family: ClassVar[MetricFamily] = MetricFamily.QGRAM_NORMALIZED

    def __post_init__(self) -> None:
        if not isinstance(self.q, int) or self.q < 1:
            raise ValueError(f"q-gram size must be a positive integer, got {self.q!r}")

    def evaluate(self, s1: str, s2: str) -> float:
        c1 = qgram_profile(s1, self.q)
        c2 = qgram_profile(s2, self.q)
        if c1 == c2:
            return 0.0
        return self._distance(c1, c2)

    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class QGram(_QGramDistance):
    """Sum of absolute count differences; bounded by the total number of q-grams."""

    family: ClassVar[MetricFamily] = MetricFamily.QGRAM_COUNT

    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        return float(sum(abs(c1[g] - c2[g]) for g in c1.keys() | c2.keys()))


@dataclass(frozen=True)
class Cosine(_QGramDistance):
    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        norm1 = math.sqrt(sum(v * v for v in c1.values()))
        norm2 = math.sqrt(sum(v * v for v in c2.values()))
        if norm1 == 0 or norm2 == 0:
            return 1.0
        dot = sum(v * c2[g] for g, v in c1.items() if g in c2)
        return max(0.0, 1.0 - dot / (norm1 * norm2))


@dataclass(frozen=True)
class Jaccard(_QGramDistance):
    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        a, b = set(c1), set(c2)
        return 1.0 - len(a & b) / len(a | b)


@dataclass(frozen=True)
class SorensenDice(_QGramDistance):
    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        a, b = set(c1), set(c2)
        return 1.0 - 2 * len(a & b) / (len(a) + len(b))


@dataclass(frozen=True)
class Overlap(_QGramDistance):
    """1 - shared / smaller set; a subset profile scores 0."""

    def _distance(self, c1: Counter[str], c2: Counter[str]) -> float:
        a, b = set(c1), set(c2)
        smaller = min(len(a), len(b))
        if smaller == 0:
            return 1.0
        return 1.0 - len(a & b) / smaller
