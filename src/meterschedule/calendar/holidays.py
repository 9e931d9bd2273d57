from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from ..config import get_settings
from ._exceptions import ConfigurationError
from .dates import DateLike, to_date


class Holiday(BaseModel):
    """
    A designated holiday as delivered by the holiday source.

    ``holidayDate`` arrives as text such as ``"June 19, 2024"`` and is kept
    only as a canonical calendar date.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Union[str, int]
    name: str
    holiday_date: date = Field(alias="holidayDate")
    type: str = ""

    @field_validator("holiday_date", mode="before")
    @classmethod
    def parse_holiday_date(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            fmt = (info.context or {}).get("holiday_date_format")
            fmt = fmt or get_settings().holiday_date_format
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                raise ValueError(
                    f"holiday date {value!r} does not match format {fmt!r}"
                ) from None
        return value


class HolidayIndex:
    """Exact-match lookup set of holiday calendar dates."""

    def __init__(self, dates: Iterable[DateLike] = ()) -> None:
        self._dates: frozenset[date] = frozenset(to_date(d) for d in dates)

    @classmethod
    def build(
        cls,
        holidays: Iterable[Union[Holiday, Mapping[str, Any]]],
        date_format: Optional[str] = None,
    ) -> HolidayIndex:
        """
        Validate holiday records and index their dates.

        Raises ConfigurationError on the first record that cannot be parsed;
        malformed records are never skipped.  ``date_format`` overrides the
        configured ``holiday_date_format`` for textual dates.
        """
        context = {"holiday_date_format": date_format} if date_format else None
        parsed: list[Holiday] = []
        for position, record in enumerate(holidays):
            if isinstance(record, Holiday):
                parsed.append(record)
                continue
            try:
                parsed.append(Holiday.model_validate(record, context=context))
            except ValidationError as exc:
                logger.error(f"Invalid holiday record at position {position}: {record!r}")
                raise ConfigurationError(
                    f"Invalid holiday record at position {position}: {exc}"
                ) from exc

        index = cls(h.holiday_date for h in parsed)
        logger.debug(f"Indexed {len(index)} holiday dates from {len(parsed)} records")
        return index

    @classmethod
    def from_dates(cls, dates: Iterable[DateLike]) -> HolidayIndex:
        return cls(dates)

    def is_holiday(self, day: DateLike) -> bool:
        return to_date(day) in self._dates

    def __contains__(self, day: object) -> bool:
        return self.is_holiday(day)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._dates)

    @property
    def dates(self) -> tuple[date, ...]:
        return tuple(sorted(self._dates))

    def as_datetime64(self) -> np.ndarray:
        return np.array(self.dates, dtype="datetime64[D]")

    def __repr__(self) -> str:
        return f"HolidayIndex(holidays={len(self._dates)})"
