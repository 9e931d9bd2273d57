"""
meterschedule
~~~~~~~~~~~~~

Holiday-aware monthly meter-reading schedules.

Subpackages
-----------
calendar   Holiday index, business-day arithmetic, calendar grid.
schedule   Reading, due and disconnection dates and the Sunday toggle.
"""

from meterschedule.calendar import CalendarError, ConfigurationError, Holiday, HolidayIndex
from meterschedule.config import ScheduleSettings, get_settings
from meterschedule.schedule import MeterReadingScheduler, ScheduleEntry

__all__ = [
    "CalendarError",
    "ConfigurationError",
    "Holiday",
    "HolidayIndex",
    "MeterReadingScheduler",
    "ScheduleEntry",
    "ScheduleSettings",
    "get_settings",
]
