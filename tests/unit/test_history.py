"""Unit tests for KeyHistory."""

import pytest

from versioned_store.components.history import KeyHistory
from versioned_store.core.errors import OutOfOrderError, TimestampNotFoundError, VersionedStoreError
from versioned_store.core.types import Record


@pytest.fixture
def history():
    """Create empty history for tests."""
    return KeyHistory("dog")


@pytest.fixture
def filled(history):
    """History with woof/bark/sigh at 100/200/300."""
    for ts, value in [(100, "woof"), (200, "bark"), (300, "sigh")]:
        history.append(Record(ts, value))
    return history


def test_history_starts_empty(history):
    """Test that a new history holds no records."""
    assert len(history) == 0
    assert history.records == []
    assert history.timestamps() == []
    assert history.last_timestamp is None


def test_history_latest_on_empty_raises(history):
    """Test that latest() on an empty history raises IndexError."""
    with pytest.raises(IndexError):
        history.latest()


def test_history_append_updates_both_views(history):
    """Test that one append is visible in the list and in the index."""
    record = Record(100, "woof")
    history.append(record)

    assert history.records == [record]
    assert history.at(100) is record
    assert 100 in history
    assert history.timestamps() == [100]


def test_history_latest(filled):
    """Test that latest() returns the last appended record."""
    assert filled.latest() == Record(300, "sigh")
    assert filled.last_timestamp == 300


def test_history_at_exact_timestamp(filled):
    """Test exact-timestamp lookups."""
    assert filled.at(100).value == "woof"
    assert filled.at(200).value == "bark"
    assert filled.at(300).value == "sigh"


def test_history_at_missing_timestamp(filled):
    """Test that a non-indexed timestamp raises with no nearest fallback."""
    with pytest.raises(TimestampNotFoundError) as exc_info:
        filled.at(150)

    assert exc_info.value.key == "dog"
    assert exc_info.value.timestamp == 150


def test_history_before(filled):
    """Test the strictly-before prefix query."""
    assert [r.value for r in filled.before(200)] == ["woof"]
    assert [r.value for r in filled.before(201)] == ["woof", "bark"]
    assert filled.before(100) == []
    assert [r.value for r in filled.before(10_000)] == ["woof", "bark", "sigh"]


def test_history_before_returns_copy(filled):
    """Test that mutating a query result leaves the history untouched."""
    result = filled.before(10_000)
    result.clear()

    assert len(filled) == 3


def test_history_rejects_out_of_order_append(filled):
    """Test that an older record cannot be appended."""
    with pytest.raises(OutOfOrderError) as exc_info:
        filled.append(Record(50, "growl"))

    assert isinstance(exc_info.value, VersionedStoreError)
    assert isinstance(exc_info.value, ValueError)

    assert len(filled) == 3
    assert 50 not in filled


def test_history_equal_timestamp_keeps_newest_in_index(history):
    """Test that equal timestamps append to the list and repoint the index."""
    history.append(Record(100, "woof"))
    history.append(Record(100, "bark"))

    assert [r.value for r in history] == ["woof", "bark"]
    assert history.at(100).value == "bark"
    assert history.timestamps() == [100]


def test_history_timestamps_sorted(history):
    """Test that indexed timestamps come back in ascending order."""
    for ts in (5, 7, 11, 13):
        history.append(Record(ts, ts))

    assert history.timestamps() == [5, 7, 11, 13]
