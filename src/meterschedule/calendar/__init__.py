"""
meterschedule.calendar
~~~~~~~~~~~~~~~~~~~~~~

Holiday-aware business-day arithmetic on calendar dates.  A DateAdjuster
combines a weekmask (Saturday and Sunday off by default) with a HolidayIndex
and rolls dates forward to the next business day.

Basic usage::

    from datetime import date
    from meterschedule.calendar import DateAdjuster, HolidayIndex

    index = HolidayIndex.build([
        {"id": "1", "name": "Juneteenth", "holidayDate": "June 19, 2024", "type": "regular"},
    ])
    adjuster = DateAdjuster(index)
    adjuster.roll_forward(date(2024, 6, 19))            # → date(2024, 6, 20)
    adjuster.add_business_days(date(2024, 6, 17), 3)    # → date(2024, 6, 21)

NumPy ``datetime64[D]`` arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2024-06-15", "2024-06-19"], dtype="datetime64[D]")
    adjuster.roll_forward(days)

Public API
----------
Holiday             Validated holiday record.
HolidayIndex        Exact-match set of holiday dates.
DateAdjuster        Roll forward / add business days.
calendar_grid       Days of the complete weeks covering a month.
format_date         Display formatting ("yyyy-MM-dd", "MMM dd").
CalendarError       Base exception for all calendar-related errors.
ConfigurationError  Bad holiday data or settings.
"""

from __future__ import annotations

from meterschedule.calendar._exceptions import CalendarError, ConfigurationError
from meterschedule.calendar.adjuster import DateAdjuster
from meterschedule.calendar.dates import (
    calendar_grid,
    format_date,
    is_sunday,
    month_end,
    month_start,
    next_monday,
    same_month,
    to_date,
)
from meterschedule.calendar.holidays import Holiday, HolidayIndex

__all__ = [
    "CalendarError",
    "ConfigurationError",
    "DateAdjuster",
    "Holiday",
    "HolidayIndex",
    "calendar_grid",
    "format_date",
    "is_sunday",
    "month_end",
    "month_start",
    "next_monday",
    "same_month",
    "to_date",
]
