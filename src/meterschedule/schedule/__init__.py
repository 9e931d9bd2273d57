"""
meterschedule.schedule
~~~~~~~~~~~~~~~~~~~~~~

Monthly meter-reading schedules.  For each reading day a due date and a
disconnection date are derived, skipping weekends and holidays, and the
results are laid out on a full calendar grid.

Basic usage::

    from datetime import date
    from meterschedule.schedule import MeterReadingScheduler

    scheduler = MeterReadingScheduler(holidays, reference_date=date(2024, 6, 1))
    schedule  = scheduler.calculate_schedule()        # 42 ScheduleEntry values
    schedule  = scheduler.add_sunday_readings(schedule)

Public API
----------
MeterReadingScheduler     Facade used by presentation layers.
ScheduleEntry             One calendar day of a schedule.
ReadingSequenceGenerator  Reading and due dates of one month.
DisconnectionCalculator   Disconnection dates chained off the first due date.
assemble                  Lay a reading sequence onto a calendar grid.
add_sunday_readings       Give Sundays the dates of the day before.
remove_sunday_readings    Clear the dates of those Sundays again.
"""

from __future__ import annotations

from meterschedule.schedule.assembler import assemble
from meterschedule.schedule.disconnection import DisconnectionCalculator
from meterschedule.schedule.entries import ReadingSequence, ScheduleEntry
from meterschedule.schedule.readings import MAX_READINGS, ReadingSequenceGenerator
from meterschedule.schedule.scheduler import MeterReadingScheduler
from meterschedule.schedule.sunday import add_sunday_readings, remove_sunday_readings

__all__ = [
    "MAX_READINGS",
    "DisconnectionCalculator",
    "MeterReadingScheduler",
    "ReadingSequence",
    "ReadingSequenceGenerator",
    "ScheduleEntry",
    "add_sunday_readings",
    "assemble",
    "remove_sunday_readings",
]
