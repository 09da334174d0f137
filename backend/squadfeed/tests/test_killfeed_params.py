"""Tests for killfeed query-string parsing."""
import pytest
from squadfeed.services.killfeed_params import (
    MAX_TIMESTAMP_MS,
    parse_int_prefix,
    parse_last_n,
    parse_last_time,
)


@pytest.mark.parametrize("value,expected", [
    ("42", 42),
    ("  42", 42),
    ("+7", 7),
    ("-3", -3),
    ("25abc", 25),
    ("5.9", 5),
    ("abc", None),
    ("", None),
    (None, None),
])
def test_parse_int_prefix(value, expected):
    assert parse_int_prefix(value) == expected


def test_parse_last_time_valid():
    assert parse_last_time("1700000000000") == 1700000000000


@pytest.mark.parametrize("value", [None, "", "soon", "0", str(MAX_TIMESTAMP_MS + 1), "9" * 40])
def test_parse_last_time_unusable(value):
    """Test unusable cursors fall back to the count query."""
    assert parse_last_time(value) is None


def test_parse_last_time_range_limit():
    assert parse_last_time(str(MAX_TIMESTAMP_MS)) == MAX_TIMESTAMP_MS


@pytest.mark.parametrize("value,expected", [
    ("5", 5),
    ("100", 100),
    (None, 10),
    ("", 10),
    ("many", 10),
    ("0", 10),
    ("-4", 10),
])
def test_parse_last_n(value, expected):
    assert parse_last_n(value, default=10) == expected


def test_parse_int_prefix_ascii_digits_only():
    """Test non-ASCII digits are not numbers."""
    assert parse_int_prefix("٣") is None
    assert parse_last_n("٣", default=10) == 10


def test_parse_int_prefix_overlong_stays_out_of_range():
    """Test thousands of digits parse without error as a very large value."""
    value = parse_int_prefix("1" * 5000)
    
    assert value > MAX_TIMESTAMP_MS
    assert parse_int_prefix("-" + "1" * 5000) < -MAX_TIMESTAMP_MS
    assert parse_int_prefix("0" * 5000 + "42") == 42


def test_parse_overlong_parameters():
    """Test overlong cursors are unusable and overlong counts mean "everything"."""
    assert parse_last_time("9" * 5000) is None
    assert parse_last_n("9" * 5000, default=10) > MAX_TIMESTAMP_MS
    assert parse_last_n("-" + "9" * 5000, default=10) == 10
