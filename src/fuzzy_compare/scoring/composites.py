# src/fuzzy_compare/scoring/composites.py
"""
composites.py

Does: Closed set of composite metrics. Each wraps one inner metric (primitive or
      composite), so they nest freely: TokenSort(Partial(Levenshtein())).
Returns: Frozen value objects; the scoring logic lives in scoring.dispatch.
Used by: compare, search helpers, callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fuzzy_compare.metrics.types import DistanceMetric

__all__ = [
    "Winkler",
    "Partial",
    "TokenSort",
    "TokenSet",
    "TokenMax",
    "CompositeMetric",
    "Comparable",
]

__docformat__ = "google"


@dataclass(frozen=True)
class Winkler:
    """
    Prefix booster: when the inner score reaches `boosting_limit`, add
    `l * scaling_factor * (1 - score)` with l the shared prefix length (max 4).
    Parameters are not range-checked.
    """

    inner: Comparable
    scaling_factor: float = 0.1
    boosting_limit: float = 0.7


@dataclass(frozen=True)
class Partial:
    """Best score of the shorter string against every same-length window of the longer one."""

    inner: Comparable


@dataclass(frozen=True)
class TokenSort:
    """Compare after sorting whitespace tokens."""

    inner: Comparable


@dataclass(frozen=True)
class TokenSet:
    """Compare the common tokens and the two common+remainder strings."""

    inner: Comparable


@dataclass(frozen=True)
class TokenMax:
    """Length-ratio weighted max over direct, partial and token-based scores."""

    inner: Comparable


CompositeMetric = Union[Winkler, Partial, TokenSort, TokenSet, TokenMax]
Comparable = Union[DistanceMetric, CompositeMetric]
