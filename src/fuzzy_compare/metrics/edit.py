# src/fuzzy_compare/metrics/edit.py
"""
edit.py

Does: Edit-count metrics (Hamming, Levenshtein, Damerau-Levenshtein) backed by
      rapidfuzz.distance. Raw distance is an integer number of edits.
Returns: Frozen metric values of family EDIT.
Used by: compare (normalized by max length), composite metrics as inner metric.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rapidfuzz.distance import OSA as rf_osa
from rapidfuzz.distance import Hamming as rf_hamming
from rapidfuzz.distance import Levenshtein as rf_levenshtein

from .types import MetricFamily

__all__ = ["Hamming", "Levenshtein", "DamerauLevenshtein"]

__docformat__ = "google"


@dataclass(frozen=True)
class Hamming:
    """Substitutions on the overlapping part, plus the length difference."""

    family: ClassVar[MetricFamily] = MetricFamily.EDIT

    def evaluate(self, s1: str, s2: str) -> float:
        return float(rf_hamming.distance(s1, s2, pad=True))


@dataclass(frozen=True)
class Levenshtein:
    family: ClassVar[MetricFamily] = MetricFamily.EDIT

    def evaluate(self, s1: str, s2: str) -> float:
        return float(rf_levenshtein.distance(s1, s2))


@dataclass(frozen=True)
class DamerauLevenshtein:
    """Optimal string alignment: Levenshtein plus adjacent transpositions."""

    family: ClassVar[MetricFamily] = MetricFamily.EDIT

    def evaluate(self, s1: str, s2: str) -> float:
        return float(rf_osa.distance(s1, s2))
