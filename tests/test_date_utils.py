from datetime import date, datetime, timedelta, timezone

import pytest

from lifestyle.utils import (
    days_between, get_week_bounds, is_in_week, is_review_day, get_interval_days,
    is_task_due, get_frequency_text, parse_iso_date, parse_iso_datetime
)


def test_days_between_floors_partial_days():
    start = datetime(2026, 10, 1, 18, 0)
    assert days_between(start, datetime(2026, 10, 4, 17, 59)) == 2
    assert days_between(start, datetime(2026, 10, 4, 18, 0)) == 3


def test_days_between_mixes_aware_and_naive():
    start = datetime(2026, 10, 1, 0, 0)
    end = datetime(2026, 10, 3, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    assert days_between(start, end) == 2


def test_days_between_negative():
    assert days_between(date(2026, 10, 10), date(2026, 10, 1)) == -9


def test_week_bounds_monday_to_sunday():
    assert get_week_bounds(date(2026, 10, 14)) == (date(2026, 10, 12), date(2026, 10, 18))
    assert get_week_bounds(date(2026, 10, 12)) == (date(2026, 10, 12), date(2026, 10, 18))
    assert get_week_bounds(datetime(2026, 10, 18, 23, 59)) == (date(2026, 10, 12), date(2026, 10, 18))


def test_is_in_week():
    assert is_in_week(date(2026, 10, 18), date(2026, 10, 12))
    assert not is_in_week(date(2026, 10, 19), date(2026, 10, 12))


def test_review_day_is_sunday():
    assert is_review_day(date(2026, 10, 18))
    assert not is_review_day(date(2026, 10, 17))


@pytest.mark.parametrize("frequency,custom_days,interval", [
    ("daily", None, 1),
    ("every_2_days", None, 2),
    ("weekly", None, 7),
    ("custom", 3, 3),
    ("custom", 0, 1),
    ("custom", None, 1),
    ("fortnightly", None, 1),
])
def test_interval_days(frequency, custom_days, interval):
    assert get_interval_days(frequency, custom_days) == interval


def test_is_task_due():
    start = date(2026, 10, 10)
    assert is_task_due("daily", None, start, date(2026, 10, 10))
    assert not is_task_due("daily", None, start, date(2026, 10, 9))
    assert is_task_due("every_2_days", None, start, date(2026, 10, 14))
    assert not is_task_due("every_2_days", None, start, date(2026, 10, 13))
    assert is_task_due("weekly", None, start, date(2026, 10, 17))
    assert not is_task_due("weekly", None, start, date(2026, 10, 16))
    assert is_task_due("custom", 3, start, date(2026, 10, 16))


def test_frequency_text():
    assert get_frequency_text("daily") == "Daily"
    assert get_frequency_text("every_2_days") == "Every 2 days"
    assert get_frequency_text("weekly") == "Weekly"
    assert get_frequency_text("custom", 5) == "Every 5 days"


def test_parse_iso_date():
    assert parse_iso_date("2026-10-14") == date(2026, 10, 14)
    assert parse_iso_date("2026-10-14T08:00:00+00:00") == date(2026, 10, 14)
    assert parse_iso_date(None) is None


def test_parse_iso_datetime():
    parsed = parse_iso_datetime("2026-10-14T08:30:00Z")
    assert parsed == datetime(2026, 10, 14, 8, 30, tzinfo=timezone.utc)
    assert parse_iso_datetime("2026-10-14") == datetime(2026, 10, 14)
    assert parse_iso_datetime("2026-10-14T08:30:00.123456+05:30").utcoffset() == timedelta(hours=5, minutes=30)
    assert parse_iso_datetime("") is None
