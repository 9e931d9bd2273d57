from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from loguru import logger

from ..calendar import DateAdjuster, Holiday, HolidayIndex, calendar_grid, format_date, to_date
from ..calendar.dates import DateLike
from ..config import ScheduleSettings, get_settings
from .assembler import assemble
from .disconnection import DisconnectionCalculator
from .entries import ReadingSequence, ScheduleEntry
from .readings import ReadingSequenceGenerator
from .sunday import add_sunday_readings, remove_sunday_readings

HolidayRecords = Iterable[Union[Holiday, Mapping[str, Any]]]


class MeterReadingScheduler:
    """
    Monthly meter-reading schedule for one reference date and holiday list.

    Every calculation starts from scratch and returns new immutable entries,
    so schedules handed out earlier stay valid snapshots.
    """

    def __init__(
        self,
        holidays: Union[HolidayRecords, HolidayIndex] = (),
        reference_date: Optional[DateLike] = None,
        settings: Optional[ScheduleSettings] = None,
    ) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._holidays = (
            holidays if isinstance(holidays, HolidayIndex)
            else HolidayIndex.build(holidays, date_format=self._settings.holiday_date_format)
        )
        self._current_date: date = (
            to_date(reference_date) if reference_date is not None else date.today()
        )

        self._adjuster = DateAdjuster(
            self._holidays,
            weekmask=self._settings.weekmask,
            max_days=self._settings.roll_forward_max_days,
        )
        self._readings = ReadingSequenceGenerator(
            self._adjuster, due_offset_days=self._settings.due_offset_days
        )
        self._disconnections = DisconnectionCalculator(
            self._adjuster, business_days=self._settings.disconnection_business_days
        )

    def for_month(self, reference_date: DateLike) -> MeterReadingScheduler:
        return MeterReadingScheduler(self._holidays, reference_date, self._settings)

    # ── calculations ─────────────────────────────────────────────────────

    def calendar_days(self) -> list[date]:
        return calendar_grid(self._current_date, self._settings.week_starts_on)

    def calculate_due_dates(self) -> ReadingSequence:
        return self._readings.generate(self._current_date)

    def calculate_disconnection_dates(self, sequence: Sequence[ScheduleEntry]) -> ReadingSequence:
        return self._disconnections.compute(sequence)

    def calculate_schedule(self) -> tuple[ScheduleEntry, ...]:
        sequence = self.calculate_disconnection_dates(self.calculate_due_dates())
        schedule = assemble(self.calendar_days(), sequence)
        logger.debug(
            f"Schedule for {self._current_date:%Y-%m}: "
            f"{len(sequence)} readings over {len(schedule)} days"
        )
        return schedule

    # ── Sunday toggle ────────────────────────────────────────────────────

    @staticmethod
    def add_sunday_readings(schedule: Sequence[ScheduleEntry]) -> tuple[ScheduleEntry, ...]:
        return add_sunday_readings(schedule)

    @staticmethod
    def remove_sunday_readings(schedule: Sequence[ScheduleEntry]) -> tuple[ScheduleEntry, ...]:
        return remove_sunday_readings(schedule)

    # ── display ──────────────────────────────────────────────────────────

    @staticmethod
    def format_date(day: Optional[DateLike], pattern: str = "yyyy-MM-dd") -> Optional[str]:
        return format_date(day, pattern)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def current_date(self) -> date:
        return self._current_date

    @property
    def holidays(self) -> HolidayIndex:
        return self._holidays

    @property
    def adjuster(self) -> DateAdjuster:
        return self._adjuster

    def __repr__(self) -> str:
        return (
            f"MeterReadingScheduler(month={self._current_date:%Y-%m}, "
            f"holidays={len(self._holidays)})"
        )
