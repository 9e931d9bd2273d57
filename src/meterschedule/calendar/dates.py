"""Calendar-date helpers shared by the schedule pipeline.

All internal comparisons work on ``datetime.date`` values.  Formatting to
strings happens only in :func:`format_date`, for display.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Union

import numpy as np

DateLike = Union[date, datetime, "np.datetime64", str]

ONE_DAY = timedelta(days=1)
SUNDAY = 6

_DISPLAY_PATTERNS = {
    "yyyy-MM-dd": "%Y-%m-%d",
    "MMM dd": "%b %d",
}


def to_date(value: DateLike) -> date:
    """Drop any time component and return a plain calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return np.datetime64(value, "D").item()


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def next_monday(day: date) -> date:
    """First Monday strictly after ``day``."""
    return day + timedelta(days=7 - day.weekday())


def calendar_grid(reference: DateLike, week_starts_on: int = SUNDAY) -> list[date]:
    """
    Every day of the complete weeks that intersect the month of ``reference``.

    The grid runs from the first day of the week holding the 1st through the
    last day of the week holding the month's last day, so its length is
    always a multiple of 7.
    """
    ref = to_date(reference)
    first, last = month_start(ref), month_end(ref)
    week_ends_on = (week_starts_on + 6) % 7

    first -= timedelta(days=(first.weekday() - week_starts_on) % 7)
    last += timedelta(days=(week_ends_on - last.weekday()) % 7)

    days = np.arange(
        np.datetime64(first, "D"),
        np.datetime64(last + ONE_DAY, "D"),
        dtype="datetime64[D]",
    )
    return days.tolist()


def format_date(day: Optional[DateLike], pattern: str = "yyyy-MM-dd") -> Optional[str]:
    if day is None:
        return None
    try:
        fmt = _DISPLAY_PATTERNS[pattern]
    except KeyError:
        raise ValueError(
            f"Unsupported date pattern {pattern!r}; "
            f"expected one of {sorted(_DISPLAY_PATTERNS)}."
        ) from None
    return to_date(day).strftime(fmt)
