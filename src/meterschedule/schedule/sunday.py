"""Toggle whether Sunday entries share the dates of the day before.

Both functions scan neighbouring pairs in array order and return a new
tuple; entries of the input are never modified.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from ..calendar import is_sunday, same_month
from .entries import ScheduleEntry

_Merge = Callable[[ScheduleEntry, ScheduleEntry], ScheduleEntry]


def _scan(schedule: Sequence[ScheduleEntry], merge: _Merge) -> tuple[ScheduleEntry, ...]:
    if not schedule:
        return ()
    result = [schedule[0]]
    for current in schedule[1:]:
        previous = result[-1]
        if is_sunday(current.reading_date) and same_month(current.reading_date, previous.reading_date):
            current = merge(previous, current)
        result.append(current)
    return tuple(result)


def add_sunday_readings(schedule: Sequence[ScheduleEntry]) -> tuple[ScheduleEntry, ...]:
    return _scan(
        schedule,
        lambda previous, current: replace(
            current,
            due_date=previous.due_date,
            disconnection_date=previous.disconnection_date,
        ),
    )


def remove_sunday_readings(schedule: Sequence[ScheduleEntry]) -> tuple[ScheduleEntry, ...]:
    return _scan(
        schedule,
        lambda _previous, current: replace(current, due_date=None, disconnection_date=None),
    )
