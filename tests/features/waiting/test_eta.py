"""Tests for ETA and remaining-time formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from zzsleep.features.waiting import format_eta, format_remaining

TOKYO = timezone(timedelta(hours=9))


def _at(*parts: int) -> datetime:
    return datetime(*parts, tzinfo=TOKYO)


def test_format_eta_same_day() -> None:
    assert format_eta(_at(2026, 2, 20, 14, 30, 45), _at(2026, 2, 20, 10, 0, 0)) == "14:30:45"


def test_format_eta_next_day_same_year() -> None:
    assert format_eta(_at(2026, 2, 21, 8, 0, 0), _at(2026, 2, 20, 10, 0, 0)) == "02-21 08:00:00"


def test_format_eta_next_year() -> None:
    assert format_eta(_at(2027, 3, 1, 9, 0, 0), _at(2026, 2, 20, 10, 0, 0)) == "2027-03-01 09:00:00"


def test_format_eta_year_boundary() -> None:
    assert format_eta(_at(2027, 1, 1, 0, 0, 0), _at(2026, 12, 31, 23, 0, 0)) == "2027-01-01 00:00:00"


def test_format_eta_compares_dates_in_end_zone() -> None:
    # 16:00 UTC on the 20th is already the 21st in Tokyo
    now = datetime(2026, 2, 20, 16, 0, tzinfo=timezone.utc)
    assert format_eta(_at(2026, 2, 21, 3, 0, 0), now) == "03:00:00"


def test_format_eta_naive_datetimes() -> None:
    assert format_eta(datetime(2026, 2, 21, 8, 0), datetime(2026, 2, 20, 10, 0)) == "02-21 08:00:00"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00:00:00"),
        (59, "00:00:59"),
        (61, "00:01:01"),
        (3600, "01:00:00"),
        (86_399, "23:59:59"),
        (90_000, "25:00:00"),
        (360_000 + 62, "100:01:02"),
        (-5, "00:00:00"),
    ],
)
def test_format_remaining(seconds: int, expected: str) -> None:
    assert format_remaining(seconds) == expected
