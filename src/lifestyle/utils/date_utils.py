"""
Date Utilities

Day arithmetic, week windows and recurrence checks shared by the scorer,
the log generator and the dashboard.
"""
from typing import Optional, Tuple, Union
from datetime import date, datetime, timedelta, timezone

DateLike = Union[date, datetime]

# Interval in days between occurrences for the fixed frequencies
FREQUENCY_INTERVALS = {
    "daily": 1,
    "every_2_days": 2,
    "weekly": 7,
}


def to_naive_utc(value: DateLike) -> datetime:
    """
    Normalise a date or datetime to a naive UTC datetime.

    Aware datetimes are converted to UTC, naive ones are assumed to already
    be UTC and plain dates become midnight.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def to_date(value: DateLike) -> date:
    """Calendar date of a date or datetime"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole days from start to end (floored, negative when end is earlier).

    Parameters:
        start: Earlier instant
        end: Later instant

    Returns:
        int: Number of whole days
    """
    return (to_naive_utc(end) - to_naive_utc(start)).days


def get_week_bounds(d: DateLike) -> Tuple[date, date]:
    """
    Get the Monday and Sunday of the week containing d.
    """
    day = to_date(d)
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def is_in_week(d: date, reference: DateLike) -> bool:
    week_start, week_end = get_week_bounds(reference)
    return week_start <= d <= week_end


def is_review_day(d: DateLike) -> bool:
    """Weekly reviews happen on Sundays (weekday 6)"""
    return to_date(d).weekday() == 6


def get_interval_days(frequency: str, custom_days: Optional[int] = None) -> int:
    """
    Days between two occurrences of a task.

    'custom' uses custom_days (anything below 1 counts as daily), unknown
    frequencies fall back to daily.
    """
    if frequency == "custom":
        return max(1, custom_days or 1)
    return FREQUENCY_INTERVALS.get(frequency, 1)


def is_task_due(frequency: str, custom_days: Optional[int],
                start_date: date, target_date: date) -> bool:
    """
    Check whether a recurring task has an occurrence on target_date.

    Occurrences fall on start_date and every interval days after it.
    """
    if target_date < start_date:
        return False
    interval = get_interval_days(frequency, custom_days)
    return (target_date - start_date).days % interval == 0


def get_frequency_text(frequency: str, custom_days: Optional[int] = None) -> str:
    if frequency == "daily":
        return "Daily"
    if frequency == "every_2_days":
        return "Every 2 days"
    if frequency == "weekly":
        return "Weekly"
    if frequency == "custom":
        return f"Every {custom_days} days"
    return frequency


def parse_iso_date(value) -> Optional[date]:
    """Parse 'YYYY-MM-DD' (or a full ISO timestamp) into a date"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_iso_datetime(value) -> Optional[datetime]:
    """
    Parse an ISO timestamp as sent by PostgREST.

    Accepts date-only strings (midnight) and a trailing 'Z' for UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    if len(text) == 10:
        return datetime.fromisoformat(text + "T00:00:00")
    return datetime.fromisoformat(text)
