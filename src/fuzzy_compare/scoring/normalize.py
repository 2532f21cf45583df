# src/fuzzy_compare/scoring/normalize.py
from __future__ import annotations

"""
normalize.py

Does: Turn the raw distance of a primitive metric into a similarity in [0,1],
      using the rule of the metric's family. Every length combination has a
      defined result (both empty, one empty, shorter than q).
Returns: normalize_distance(s1, s2, metric) -> float.
Used by: scoring.dispatch.compare for every non-composite metric.
"""

import logging

from fuzzy_compare.metrics.types import DistanceMetric, MetricFamily

__all__ = ["UnsupportedMetricError", "normalize_distance"]

__docformat__ = "google"

log = logging.getLogger(__name__)


class UnsupportedMetricError(TypeError):
    """Raise when an object is neither a composite nor a metric with a known family."""


def _family_of(metric: object) -> MetricFamily:
    family = getattr(metric, "family", None)
    if not isinstance(family, MetricFamily) or not callable(getattr(metric, "evaluate", None)):
        raise UnsupportedMetricError(
            f"{type(metric).__name__} is not a distance metric "
            "(needs a MetricFamily `family` and an `evaluate(s1, s2)` method)"
        )
    return family


def normalize_distance(s1: str, s2: str, metric: DistanceMetric) -> float:
    """
    Does: Dispatch on metric.family:
          - BOUNDED: 1 - raw
          - EDIT: 1 - raw / max(len); 1.0 when both are empty
          - QGRAM_*: exact equality when a string is shorter than q;
            else 1 - raw / (total q-grams) for counts, 1 - raw for normalized.
    Returns: Similarity score in [0,1].
    """
    family = _family_of(metric)

    if family is MetricFamily.BOUNDED:
        return 1.0 - metric.evaluate(s1, s2)

    len1, len2 = len(s1), len(s2)

    if family is MetricFamily.EDIT:
        longest = max(len1, len2)
        if longest == 0:
            return 1.0
        return 1.0 - metric.evaluate(s1, s2) / longest

    q = getattr(metric, "q", None)
    if not isinstance(q, int):
        raise UnsupportedMetricError(f"{type(metric).__name__} is a q-gram metric without an integer `q`")
    if min(len1, len2) <= q - 1:
        # No q-gram can be extracted from the shorter string
        return float(s1 == s2)

    if family is MetricFamily.QGRAM_COUNT:
        return 1.0 - metric.evaluate(s1, s2) / (len1 + len2 - 2 * q + 2)
    return 1.0 - metric.evaluate(s1, s2)
