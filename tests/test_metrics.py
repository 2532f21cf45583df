# tests/test_metrics.py


from __future__ import annotations

import importlib

import pytest

"""
metric adapter tests
====================

Does: Validate raw distances of the edit, q-gram and bounded adapters, the
      q-gram profile helper, and Ratcliff/Obershelp matching blocks.
"""

M = importlib.import_module("fuzzy_compare.metrics")


# ──────────────────────────────────────────────────────────────────────────────
# Edit family
# ──────────────────────────────────────────────────────────────────────────────
def test_levenshtein_raw_counts():
    lev = M.Levenshtein()
    assert lev.evaluate("kitten", "sitting") == 3.0
    assert lev.evaluate("", "abc") == 3.0
    assert lev.evaluate("same", "same") == 0.0


def test_hamming_pads_unequal_lengths():
    ham = M.Hamming()
    assert ham.evaluate("abc", "abd") == 1.0
    assert ham.evaluate("abc", "ab") == 1.0
    assert ham.evaluate("abc", "xyz12") == 5.0


def test_damerau_counts_adjacent_swap_once():
    assert M.DamerauLevenshtein().evaluate("ab", "ba") == 1.0
    assert M.Levenshtein().evaluate("ab", "ba") == 2.0


def test_edit_metrics_declare_edit_family():
    for metric in (M.Hamming(), M.Levenshtein(), M.DamerauLevenshtein()):
        assert metric.family is M.MetricFamily.EDIT
        assert isinstance(metric, M.DistanceMetric)


# ──────────────────────────────────────────────────────────────────────────────
# Q-gram family
# ──────────────────────────────────────────────────────────────────────────────
def test_qgram_profile_counts_overlapping_grams():
    assert M.qgram_profile("abab", 2) == {"ab": 2, "ba": 1}
    assert M.qgram_profile("a", 2) == {}


def test_qgram_count_distance():
    # ab bc cd  vs  ab bc ce
    assert M.QGram(2).evaluate("abcd", "abce") == 2.0
    assert M.QGram(2).family is M.MetricFamily.QGRAM_COUNT


@pytest.mark.parametrize(
    "cls,expected",
    [
        ("Jaccard", 0.5),
        ("SorensenDice", 1 / 3),
        ("Overlap", 1 / 3),
        ("Cosine", 1 / 3),
    ],
)
def test_normalized_qgram_distances(cls, expected):
    metric = getattr(M, cls)(2)
    assert metric.family is M.MetricFamily.QGRAM_NORMALIZED
    assert metric.evaluate("abcd", "abce") == pytest.approx(expected, abs=1e-12)


def test_qgram_identical_profiles_are_zero():
    for cls in (M.QGram, M.Cosine, M.Jaccard, M.SorensenDice, M.Overlap):
        assert cls(3).evaluate("night night", "night night") == 0.0


@pytest.mark.parametrize("q", [0, -2])
def test_qgram_rejects_non_positive_size(q):
    with pytest.raises(ValueError):
        M.QGram(q)


def test_qgram_metrics_are_hashable_values():
    assert M.Jaccard(3) == M.Jaccard(3)
    assert len({M.Jaccard(3), M.Jaccard(3), M.Jaccard(2)}) == 2
    assert isinstance(M.Cosine(2), M.QGramMetric)


# ──────────────────────────────────────────────────────────────────────────────
# Bounded metrics
# ──────────────────────────────────────────────────────────────────────────────
def test_exact_match():
    assert M.ExactMatch().evaluate("a", "a") == 0.0
    assert M.ExactMatch().evaluate("a", "A") == 1.0


def test_jaro_identity_and_range():
    jaro = M.Jaro()
    assert jaro.evaluate("martha", "martha") == 0.0
    d = jaro.evaluate("martha", "marhta")
    assert 0.0 < d < 0.1


def test_ratcliff_obershelp_distance():
    ro = M.RatcliffObershelp()
    assert ro.evaluate("abcd", "abce") == pytest.approx(0.25)
    assert ro.evaluate("", "") == 0.0
    assert ro.evaluate("abc", "xyz") == 1.0


def test_ratcliff_obershelp_matching_blocks_drop_sentinel():
    ro = M.RatcliffObershelp()
    blocks = ro.matching_blocks("yankees", "new york yankees")
    assert blocks == [M.MatchingBlock(0, 9, 7)]
    assert ro.matching_blocks("abc", "xyz") == []
    assert isinstance(ro, M.BlockMatchingMetric)


def test_ratcliff_obershelp_blocks_ordered_by_first_string():
    blocks = M.RatcliffObershelp().matching_blocks("abxcd", "abycd")
    assert [b.a for b in blocks] == sorted(b.a for b in blocks)
    assert sum(b.size for b in blocks) == 4


def test_only_block_metric_exposes_blocks():
    assert not isinstance(M.Levenshtein(), M.BlockMatchingMetric)
