# src/fuzzy_compare/metrics/bounded.py
"""
bounded.py

Does: Metrics whose raw distance already lies in [0,1]:
      - ExactMatch: 0 when equal, 1 otherwise.
      - Jaro: rapidfuzz Jaro distance.
      - RatcliffObershelp: 1 - 2*matched/(len1+len2) using difflib's recursive
        longest-common-substring procedure, which also yields matching blocks.
Returns: Frozen metric values of family BOUNDED.
Used by: compare, Partial (block-window specialization), tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import ClassVar

from rapidfuzz.distance import Jaro as rf_jaro

from .types import MatchingBlock, MetricFamily

__all__ = ["ExactMatch", "Jaro", "RatcliffObershelp"]

__docformat__ = "google"


@dataclass(frozen=True)
class ExactMatch:
    family: ClassVar[MetricFamily] = MetricFamily.BOUNDED

    def evaluate(self, s1: str, s2: str) -> float:
        return 0.0 if s1 == s2 else 1.0


@dataclass(frozen=True)
class Jaro:
    family: ClassVar[MetricFamily] = MetricFamily.BOUNDED

    def evaluate(self, s1: str, s2: str) -> float:
        return float(rf_jaro.distance(s1, s2))


@dataclass(frozen=True)
class RatcliffObershelp:
    """Gestalt pattern matching. No junk heuristic, so results depend only on the inputs."""

    family: ClassVar[MetricFamily] = MetricFamily.BOUNDED

    @staticmethod
    def _matcher(s1: str, s2: str) -> SequenceMatcher:
        return SequenceMatcher(None, s1, s2, autojunk=False)

    def evaluate(self, s1: str, s2: str) -> float:
        # ratio() is 1.0 for two empty strings
        return 1.0 - self._matcher(s1, s2).ratio()

    def matching_blocks(self, s1: str, s2: str) -> list[MatchingBlock]:
        """
        Does: Maximal common substrings found recursively, ordered by position in s1.
        Returns: List of MatchingBlock(a, b, size), without difflib's zero-size sentinel.
        """
        return [
            MatchingBlock(m.a, m.b, m.size)
            for m in self._matcher(s1, s2).get_matching_blocks()
            if m.size
        ]
