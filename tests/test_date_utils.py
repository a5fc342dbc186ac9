from datetime import UTC, date, datetime

import pytest

from date_utils import (
    format_display_date,
    month_key,
    month_label,
    parse_calendar_date,
)


def test_parse_calendar_date_handles_empty_and_invalid() -> None:
    assert parse_calendar_date("") is None
    assert parse_calendar_date(None) is None
    assert parse_calendar_date("not-a-date") is None
    assert parse_calendar_date(12345) is None


def test_parse_calendar_date_accepts_plain_dates() -> None:
    assert parse_calendar_date("2025-01-05") == date(2025, 1, 5)
    assert parse_calendar_date(date(2025, 1, 5)) == date(2025, 1, 5)


def test_parse_calendar_date_drops_time_of_day() -> None:
    assert parse_calendar_date("2025-01-05T23:10:00Z") == date(2025, 1, 5)
    assert parse_calendar_date(datetime(2025, 1, 5, 7, 0, tzinfo=UTC)) == date(
        2025, 1, 5
    )


def test_month_key_zero_pads() -> None:
    assert month_key(date(2025, 3, 31)) == "2025-03"
    assert month_key(date(987, 11, 1)) == "0987-11"


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [(2025, 1, "Jan 2025"), (2024, 9, "Sep 2024"), (2025, 12, "Dec 2025")],
)
def test_month_label(year: int, month: int, expected: str) -> None:
    assert month_label(year, month) == expected


def test_format_display_date() -> None:
    assert format_display_date(date(2025, 2, 3)) == "03/02/2025"
