"""
fuzzy_compare
=============

Does: Root package for normalized fuzzy string similarity.
Returns: `compare`, the composite metrics (Winkler, Partial, TokenSort, TokenSet,
         TokenMax), the primitive metric adapters, and candidate search helpers.
Used by: All imports starting from `fuzzy_compare.*`.
"""

from __future__ import annotations

from .metrics import (
    Cosine,
    DamerauLevenshtein,
    ExactMatch,
    Hamming,
    Jaccard,
    Jaro,
    Levenshtein,
    MetricFamily,
    Overlap,
    QGram,
    RatcliffObershelp,
    SorensenDice,
)
from .scoring import (
    Partial,
    TokenMax,
    TokenSet,
    TokenSort,
    UnsupportedMetricError,
    Winkler,
    compare,
)
from .search import find_all, find_best

__all__: list[str] = [
    "compare",
    "UnsupportedMetricError",
    # Composites
    "Winkler",
    "Partial",
    "TokenSort",
    "TokenSet",
    "TokenMax",
    # Metrics
    "MetricFamily",
    "Hamming",
    "Levenshtein",
    "DamerauLevenshtein",
    "QGram",
    "Cosine",
    "Jaccard",
    "SorensenDice",
    "Overlap",
    "ExactMatch",
    "Jaro",
    "RatcliffObershelp",
    # Search
    "find_best",
    "find_all",
]
__docformat__ = "google"
