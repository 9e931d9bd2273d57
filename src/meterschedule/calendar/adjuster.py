from __future__ import annotations

from datetime import date
from typing import Optional, Union

import numpy as np
from loguru import logger

from ..config import get_settings
from ._exceptions import ConfigurationError
from .dates import DateLike, to_date
from .holidays import HolidayIndex

DateArrayLike = Union[DateLike, "np.ndarray"]


class DateAdjuster:
    """
    Business-day arithmetic over a weekmask plus a holiday index.

    Backed by a numpy business-day calendar.  Scalar dates return
    ``datetime.date``; ``datetime64[D]`` arrays are accepted everywhere a
    scalar is and return arrays of the same shape.
    """

    def __init__(
        self,
        holidays: Optional[HolidayIndex] = None,
        weekmask: Optional[str] = None,
        max_days: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._holidays: HolidayIndex = holidays if holidays is not None else HolidayIndex()
        self._weekmask: str = weekmask if weekmask is not None else settings.weekmask
        self._max_days: int = max_days if max_days is not None else settings.roll_forward_max_days

        if self._max_days < 1:
            raise ConfigurationError(f"max_days must be >= 1; got {self._max_days}.")
        try:
            self._busdaycal = np.busdaycalendar(
                weekmask=self._weekmask,
                holidays=self._holidays.as_datetime64(),
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid weekmask {self._weekmask!r}: {exc}") from exc

    # ── predicates ───────────────────────────────────────────────────────

    def is_business_day(self, day: DateArrayLike) -> Union[bool, np.ndarray]:
        scalar, d = self._as_days(day)
        result = np.is_busday(d, busdaycal=self._busdaycal)
        return bool(result[0]) if scalar else result.reshape(np.shape(day))

    # ── adjustments ──────────────────────────────────────────────────────

    def roll_forward(self, day: DateArrayLike) -> Union[date, np.ndarray]:
        """Advance past holidays and weekend days to the first business day."""
        scalar, d = self._as_days(day)
        rolled = np.busday_offset(d, 0, roll="forward", busdaycal=self._busdaycal)
        self._check_span(d, rolled, self._max_days, "roll forward")
        return self._from_days(scalar, rolled, day)

    def add_business_days(self, day: DateArrayLike, n: int) -> Union[date, np.ndarray]:
        """
        The ``n``-th business day strictly after ``day``.

        The result is not rolled further; callers that need it apply
        :meth:`roll_forward` themselves.
        """
        scalar, d = self._as_days(day)
        if n <= 0:
            return self._from_days(scalar, d, day)
        # Rolling backward first counts business days strictly after `day`
        # even when `day` itself is not one.
        moved = np.busday_offset(d, n, roll="backward", busdaycal=self._busdaycal)
        self._check_span(d, moved, self._max_days + 7 * n, f"adding {n} business days")
        return self._from_days(scalar, moved, day)

    # ── helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _as_days(day: DateArrayLike) -> tuple[bool, np.ndarray]:
        if np.ndim(day) == 0:
            return True, np.array([to_date(day)], dtype="datetime64[D]")
        return False, np.ascontiguousarray(np.asarray(day, dtype="datetime64[D]").ravel())

    @staticmethod
    def _from_days(scalar: bool, days: np.ndarray, original: DateArrayLike) -> Union[date, np.ndarray]:
        if scalar:
            return days[0].item()
        return days.reshape(np.shape(original))

    @staticmethod
    def _check_span(start: np.ndarray, end: np.ndarray, limit: int, what: str) -> None:
        if not start.size:
            return
        span = int((end - start).max().astype(int))
        if span > limit:
            logger.error(f"{what} moved {span} days, more than the {limit}-day bound")
            raise ConfigurationError(
                f"No business day reachable within {limit} days while {what}; "
                "check the holiday data."
            )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> HolidayIndex:
        return self._holidays

    @property
    def weekmask(self) -> str:
        return self._weekmask

    @property
    def max_days(self) -> int:
        return self._max_days

    def __repr__(self) -> str:
        return (
            f"DateAdjuster(weekmask={self._weekmask!r}, "
            f"holidays={len(self._holidays)}, "
            f"max_days={self._max_days})"
        )
