# src/fuzzy_compare/scoring/tokens.py
"""
tokens.

Does: Whitespace tokenization helpers for the token-based composites:
      sorted canonical form (TokenSort) and common/remainder partition (TokenSet).
Returns: split_tokens(), sort_tokens(), partition_tokens().
Used by: scoring.dispatch.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable

__all__ = [
    "split_tokens",
    "sort_tokens",
    "partition_tokens",
]


def split_tokens(text: str) -> list[str]:
    """Does: Split on any run of whitespace, dropping leading/trailing blanks."""
    return text.split()


def sort_tokens(text: str) -> str:
    """
    Does: Canonicalize word order: split, sort, rejoin with single spaces.
    Returns: e.g. "wuzzy fuzzy" -> "fuzzy wuzzy".
    """
    return " ".join(sorted(split_tokens(text)))


def partition_tokens(
    v1: Iterable[str],
    v2: Iterable[str],
) -> tuple[list[str], list[str], list[str]]:
    """
    Does: Split two token sequences into (common, remainder1, remainder2).
          Works on sorted copies: each v1 token is binary-searched in the
          unconsumed suffix of v2; a hit moves the token to `common` from both
          sides and advances the search floor. Duplicates pair up one-to-one.
    Returns: Three new sorted lists; the inputs are never mutated.
    """
    rest1 = sorted(v1)
    rest2 = sorted(v2)
    common: list[str] = []

    floor = 0
    i1 = 0
    while i1 < len(rest1):
        token = rest1[i1]
        i2 = bisect_left(rest2, token, floor)
        if i2 == len(rest2):
            # every remaining v1 token sorts after all of v2
            break
        if rest2[i2] == token:
            del rest1[i1]
            del rest2[i2]
            common.append(token)
            floor = i2
        else:
            i1 += 1

    return common, rest1, rest2
