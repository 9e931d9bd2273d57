from __future__ import annotations

from dataclasses import replace
from datetime import date
from itertools import accumulate
from typing import Optional, Sequence

from ..calendar import DateAdjuster
from ..calendar.dates import ONE_DAY
from ..config import get_settings
from .entries import ReadingSequence, ScheduleEntry


class DisconnectionCalculator:
    """
    Disconnection dates for a reading sequence.

    The first is ``business_days`` business days after the first due date;
    every later one is the next business day after its predecessor, so the
    dates stay evenly spaced whatever happens to the individual due dates.
    """

    def __init__(self, adjuster: DateAdjuster, business_days: Optional[int] = None) -> None:
        self._adjuster = adjuster
        self._business_days = (
            business_days if business_days is not None
            else get_settings().disconnection_business_days
        )

    def first_disconnection_date(self, entry: ScheduleEntry) -> date:
        if entry.due_date is None:
            raise ValueError(f"Reading on {entry.reading_date} has no due date.")
        return self._adjuster.roll_forward(
            self._adjuster.add_business_days(entry.due_date, self._business_days)
        )

    def next_disconnection_date(self, previous: date) -> date:
        return self._adjuster.roll_forward(previous + ONE_DAY)

    def compute(self, sequence: Sequence[ScheduleEntry]) -> ReadingSequence:
        if not sequence:
            return ()
        dates = accumulate(
            sequence[1:],
            lambda previous, _entry: self.next_disconnection_date(previous),
            initial=self.first_disconnection_date(sequence[0]),
        )
        return tuple(
            replace(entry, disconnection_date=day) for entry, day in zip(sequence, dates)
        )
