from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ScheduleEntry:
    """
    One calendar day of a schedule.

    ``due_date`` is None on days without a scheduled reading;
    ``disconnection_date`` is only ever set together with ``due_date``.
    """

    reading_date: date
    due_date: Optional[date] = None
    disconnection_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.disconnection_date is not None and self.due_date is None:
            raise ValueError(
                f"Entry for {self.reading_date} has a disconnection date but no due date."
            )
        if self.due_date is not None and self.due_date <= self.reading_date:
            raise ValueError(
                f"Due date {self.due_date} is not after reading date {self.reading_date}."
            )
        if self.disconnection_date is not None and self.disconnection_date <= self.due_date:
            raise ValueError(
                f"Disconnection date {self.disconnection_date} is not after due date {self.due_date}."
            )

    @property
    def has_reading(self) -> bool:
        return self.due_date is not None


ReadingSequence = tuple[ScheduleEntry, ...]
