from __future__ import annotations

from datetime import date, timedelta
from typing import NamedTuple, Optional

from loguru import logger

from ..calendar import DateAdjuster, is_sunday, month_start, next_monday, same_month, to_date
from ..calendar.dates import ONE_DAY, DateLike
from ..config import get_settings
from .entries import ReadingSequence, ScheduleEntry

MAX_READINGS = 21


class ReadingCursor(NamedTuple):
    """Accumulator carried from one reading slot to the next."""

    reading_date: date
    due_date: date


class ReadingSequenceGenerator:
    """
    Reading dates of one month with their due dates.

    The due date starts ``due_offset_days`` after the first reading and then
    moves in lockstep with the reading date, rolled forward past holidays and
    weekends at every slot.  A reading that lands on a Sunday is moved to the
    following Monday, and the next slot continues from the moved date.
    """

    def __init__(self, adjuster: DateAdjuster, due_offset_days: Optional[int] = None) -> None:
        self._adjuster = adjuster
        self._due_offset = timedelta(
            days=due_offset_days if due_offset_days is not None else get_settings().due_offset_days
        )

    @staticmethod
    def starting_reading_date(reference: DateLike) -> date:
        start = month_start(to_date(reference))
        return next_monday(start) if is_sunday(start) else start

    def first_cursor(self, reference: DateLike) -> ReadingCursor:
        start = self.starting_reading_date(reference)
        return ReadingCursor(start, start + self._due_offset)

    def step(self, cursor: ReadingCursor) -> tuple[ScheduleEntry, ReadingCursor]:
        due_date = self._adjuster.roll_forward(cursor.due_date)
        reading_date = cursor.reading_date
        if is_sunday(reading_date):
            reading_date = next_monday(reading_date)

        entry = ScheduleEntry(reading_date, due_date)
        return entry, ReadingCursor(reading_date + ONE_DAY, due_date + ONE_DAY)

    def generate(self, reference: DateLike) -> ReadingSequence:
        first = month_start(to_date(reference))
        cursor = self.first_cursor(first)
        entries: list[ScheduleEntry] = []

        while same_month(cursor.reading_date, first) and len(entries) < MAX_READINGS:
            entry, cursor = self.step(cursor)
            entries.append(entry)

        logger.debug(f"Generated {len(entries)} readings for {first:%Y-%m}")
        return tuple(entries)

    @property
    def due_offset_days(self) -> int:
        return self._due_offset.days
