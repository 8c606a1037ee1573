"""Unit tests for form-date parsing and day-index computation."""

from datetime import date, datetime

import pytest

from core.services.dates import compute_day_index, parse_date

# --- parse_date ---


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-06-01", date(2024, 6, 1)),
        ("2024-6-3", date(2024, 6, 3)),
        ("2024-06-01T09:30:00", date(2024, 6, 1)),
        ("06/03/2024", date(2024, 6, 3)),
        ("6/3/2024", date(2024, 6, 3)),
        ("June 3, 2024", date(2024, 6, 3)),
        (date(2024, 6, 1), date(2024, 6, 1)),
        (datetime(2024, 6, 1, 23, 59), date(2024, 6, 1)),
    ],
)
def test_parse_date_accepted_shapes(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "2024-13-01", "2024-02-30", "13/01/2024", "1/2", "a/b/c", "not a date", "June-3"],
)
def test_parse_date_invalid_returns_none(value):
    assert parse_date(value) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("June 3", date(2001, 6, 3)),
        ("15", date(2001, 1, 15)),
        ("12:00", date(2001, 1, 1)),
    ],
)
def test_partial_dates_do_not_use_current_date(value, expected):
    assert parse_date(value) == expected


# --- compute_day_index ---


def test_same_day_is_day_one():
    assert compute_day_index("2024-06-01", "2024-06-01") == 1


def test_iso_offset():
    assert compute_day_index("2024-06-01", "2024-06-03") == 3


def test_slash_and_iso_mix():
    assert compute_day_index("06/01/2024", "2024-06-10") == 10


def test_offset_across_month_boundary():
    assert compute_day_index("2024-05-30", "06/02/2024") == 4


def test_time_part_does_not_shift_day():
    assert compute_day_index("2024-06-01", "2024-06-02T23:45:00") == 2


def test_item_before_trip_clamps_to_one():
    assert compute_day_index("2024-06-10", "2024-06-01") == 1


@pytest.mark.parametrize(
    "start, item",
    [
        ("2024-06-01", None),
        ("2024-06-01", ""),
        ("2024-06-01", "garbage"),
        (None, "2024-06-03"),
        ("13/45/2024", "2024-06-03"),
    ],
)
def test_unparseable_dates_clamp_to_one(start, item):
    assert compute_day_index(start, item) == 1


@pytest.mark.parametrize("item", ["June 3", "12:00", "15"])
def test_yearless_item_dates_clamp_to_one(item):
    assert compute_day_index("2024-06-01", item) == 1


def test_day_index_always_positive_for_valid_pairs():
    start = date(2024, 1, 1)
    for offset in range(-40, 400, 7):
        item = date.fromordinal(start.toordinal() + offset)
        result = compute_day_index(start.isoformat(), item.strftime("%m/%d/%Y"))
        assert result >= 1
        assert result == (offset + 1 if offset >= 0 else 1)
