"""Unit tests for ordered record search."""

import pytest

from versioned_store.components.search import bisect_first_not_before
from versioned_store.core.types import Record


@pytest.fixture
def records():
    """Five records at timestamps 10, 20, 30, 40, 50."""
    return [Record(ts, f"v{ts}") for ts in (10, 20, 30, 40, 50)]


def test_search_empty_sequence():
    """Test that an empty sequence always yields position 0."""
    assert bisect_first_not_before([], 100) == 0


def test_search_exact_match_points_at_match(records):
    """Test that an existing timestamp is not counted as before itself."""
    assert bisect_first_not_before(records, 30) == 2


def test_search_between_timestamps(records):
    """Test bounds that fall between two records."""
    assert bisect_first_not_before(records, 31) == 3
    assert bisect_first_not_before(records, 11) == 1


def test_search_before_all(records):
    """Test that a bound at or below the first record yields 0."""
    assert bisect_first_not_before(records, 10) == 0
    assert bisect_first_not_before(records, -1) == 0


def test_search_after_all(records):
    """Test that a bound past the last record yields the full length."""
    assert bisect_first_not_before(records, 51) == len(records)


def test_search_with_duplicate_timestamps():
    """Test that duplicates are all treated as not before their own timestamp."""
    records = [Record(1, "a"), Record(2, "b"), Record(2, "c"), Record(3, "d")]

    assert bisect_first_not_before(records, 2) == 1
    assert bisect_first_not_before(records, 3) == 3


def test_search_matches_linear_scan(records):
    """Test binary search against a linear scan for every bound in range."""
    for bound in range(0, 61):
        expected = sum(1 for r in records if r.timestamp < bound)
        assert bisect_first_not_before(records, bound) == expected
