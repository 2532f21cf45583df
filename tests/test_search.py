# tests/test_search.py
"""Candidate search tests: ranking, ties, thresholds, and config-driven defaults."""

from __future__ import annotations

import json

import pytest

from fuzzy_compare import search as S
from fuzzy_compare.metrics import DamerauLevenshtein, Levenshtein
from fuzzy_compare.scoring import TokenSort
from fuzzy_compare.utils import ConfigParseError


# ---------- Fixtures ----------
@pytest.fixture(autouse=True)
def _reset_defaults(monkeypatch):
    """Use the packaged defaults unless a test points elsewhere."""
    monkeypatch.delenv("FUZZY_COMPARE_DATA_DIR", raising=False)
    S.get_search_defaults.cache_clear()
    yield
    S.get_search_defaults.cache_clear()


@pytest.fixture
def custom_defaults(tmp_path, monkeypatch):
    """Write a search_defaults.json into an isolated data dir."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("FUZZY_COMPARE_DATA_DIR", str(data))

    def _write(payload: dict) -> None:
        (data / "search_defaults.json").write_text(json.dumps(payload), encoding="utf-8")
        S.get_search_defaults.cache_clear()

    return _write


FRUITS = ["apple", "banana", "apply"]


# ---------- find_best ----------
def test_find_best_picks_highest_score():
    hit = S.find_best("appel", FRUITS, DamerauLevenshtein(), min_score=0.5)
    assert hit is not None
    assert hit[0] == "apple"
    assert hit[1] == pytest.approx(0.8)


def test_find_best_ties_keep_first_candidate():
    # Levenshtein scores both "apple" and "apply" at 0.6
    assert S.find_best("appel", ["apple", "apply"], Levenshtein(), min_score=0.5)[0] == "apple"
    assert S.find_best("appel", ["apply", "apple"], Levenshtein(), min_score=0.5)[0] == "apply"


def test_find_best_none_below_floor():
    assert S.find_best("appel", FRUITS, Levenshtein(), min_score=0.99) is None
    assert S.find_best("appel", [], Levenshtein(), min_score=0.0) is None


def test_find_best_skips_non_string_candidates():
    hit = S.find_best("apple", [None, 3, "apple"], Levenshtein(), min_score=0.0)
    assert hit == ("apple", 1.0)


def test_find_best_with_composite_metric():
    hit = S.find_best("york new", ["new york", "boston"], TokenSort(Levenshtein()), min_score=0.9)
    assert hit == ("new york", 1.0)


# ---------- find_all ----------
def test_find_all_ranks_descending():
    hits = S.find_all("appel", FRUITS, DamerauLevenshtein(), min_score=0.5, limit=None)
    assert [c for c, _ in hits] == ["apple", "apply"]
    assert [s for _, s in hits] == pytest.approx([0.8, 0.6])


def test_find_all_limit_truncates():
    hits = S.find_all("appel", FRUITS, DamerauLevenshtein(), min_score=0.5, limit=1)
    assert [c for c, _ in hits] == ["apple"]


def test_find_all_accepts_generators():
    hits = S.find_all("apple", (f for f in FRUITS), Levenshtein(), min_score=1.0, limit=None)
    assert hits == [("apple", 1.0)]


# ---------- defaults ----------
def test_packaged_defaults():
    defaults = S.get_search_defaults()
    assert defaults == S.SearchDefaults(min_score=0.8, limit=None)


def test_defaults_drive_threshold_and_limit(custom_defaults):
    custom_defaults({"min_score": 0.5, "limit": 1})
    hits = S.find_all("appel", FRUITS, DamerauLevenshtein())
    assert [c for c, _ in hits] == ["apple"]

    # explicit arguments win over the config
    hits = S.find_all("appel", FRUITS, DamerauLevenshtein(), limit=None)
    assert len(hits) == 2


def test_packaged_floor_filters_weak_matches():
    assert S.find_best("appel", FRUITS, Levenshtein()) is None
    assert S.find_best("appel", FRUITS, DamerauLevenshtein()) == ("apple", pytest.approx(0.8))


@pytest.mark.parametrize(
    "payload",
    [
        {"min_score": 1.5},
        {"min_score": True},
        {"min_score": "0.5"},
        {"min_score": 0.5, "limit": 0},
        {"limit": "ten"},
        {"limit": True},
    ],
)
def test_invalid_defaults_raise_parse_error(custom_defaults, payload):
    custom_defaults(payload)
    with pytest.raises(ConfigParseError):
        S.get_search_defaults()


# ---------- tracing ----------
def test_search_trace_goes_to_stderr_when_enabled(monkeypatch, capsys):
    from fuzzy_compare.utils import log as LOG

    monkeypatch.setenv("FUZZY_COMPARE_DEBUG_TOPICS", "search")
    LOG.reload_topics()
    try:
        S.find_best("apple", [None, "apple"], Levenshtein(), min_score=0.5)
    finally:
        monkeypatch.delenv("FUZZY_COMPARE_DEBUG_TOPICS")
        LOG.reload_topics()

    err = capsys.readouterr().err
    assert "[search][DEBUG]" in err
    assert "skip non-str candidate None" in err
