from __future__ import annotations

from typing import Iterable, Sequence

from ..calendar import to_date
from ..calendar.dates import DateLike
from .entries import ScheduleEntry


def assemble(
    calendar_days: Iterable[DateLike],
    sequence: Sequence[ScheduleEntry],
) -> tuple[ScheduleEntry, ...]:
    """Place reading entries on the grid; other days get an empty entry."""
    by_date = {entry.reading_date: entry for entry in reversed(sequence)}
    schedule = []
    for day in calendar_days:
        day = to_date(day)
        schedule.append(by_date.get(day) or ScheduleEntry(day))
    return tuple(schedule)
