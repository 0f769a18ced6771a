from .date_utils import (
    to_naive_utc, to_date, days_between, get_week_bounds, is_in_week,
    is_review_day, get_interval_days, is_task_due, get_frequency_text,
    parse_iso_date, parse_iso_datetime
)


__all__ = [
    "to_naive_utc",
    "to_date",
    "days_between",
    "get_week_bounds",
    "is_in_week",
    "is_review_day",
    "get_interval_days",
    "is_task_due",
    "get_frequency_text",
    "parse_iso_date",
    "parse_iso_datetime",
]
