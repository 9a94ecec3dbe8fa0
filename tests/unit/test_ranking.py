"""Unit tests for the shared ranking helpers."""

from datetime import datetime, timezone

import pytest

from sanctuary_cms.application.services.ranking import (
    as_timestamp,
    is_descending,
    numeric_value,
    resolve_sort_by,
    suggest,
)
from sanctuary_cms.domain.entities import SortBy, SortOrder


def test_suggest_matches_substring():
    assert suggest("donat", ["donations", "volunteer", "adoption"]) == ["donations"]


def test_suggest_matches_first_word_contained_in_query():
    vocabulary = ["parking lot", "group tours"]
    assert suggest("where is parking", vocabulary) == ["parking lot"]


def test_suggest_respects_limit_and_vocabulary_order():
    vocabulary = ["animal care", "animal behavior", "animal stories"]
    assert suggest("animal", vocabulary, limit=2) == ["animal care", "animal behavior"]


def test_suggest_blank_query():
    assert suggest("  ", ["anything"]) == []


@pytest.mark.parametrize(
    "requested, expected",
    [
        (None, SortBy.RELEVANCE),
        ("popularity", SortBy.POPULARITY),
        (SortBy.DATE, SortBy.DATE),
        ("title", SortBy.ALPHABETICAL),
        ("helpfulness", SortBy.RATING),
        ("nonsense", SortBy.RELEVANCE),
    ],
)
def test_resolve_sort_by(requested, expected):
    assert resolve_sort_by(requested) == expected


def test_natural_direction_per_strategy():
    assert is_descending(SortBy.POPULARITY, None) is True
    assert is_descending(SortBy.ALPHABETICAL, None) is False
    assert is_descending(SortBy.POPULARITY, SortOrder.ASC) is False
    assert is_descending(SortBy.ALPHABETICAL, "desc") is True


@pytest.mark.parametrize(
    "sort_order, expected",
    [("ASC", False), ("Asc", False), ("DESC", True), ("bogus", True), ("", True)],
)
def test_sort_order_values_never_raise(sort_order, expected):
    assert is_descending(SortBy.RATING, sort_order) is expected


def test_numeric_value_treats_missing_as_zero():
    assert numeric_value(None) == 0.0
    assert numeric_value(True) == 1.0
    assert numeric_value(3) == 3.0


def test_as_timestamp_normalizes_to_aware_utc():
    assert as_timestamp("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert as_timestamp(datetime(2024, 1, 15)).tzinfo is not None
    assert as_timestamp(None) < as_timestamp("1970-01-01")
