"""
tests/calendar/test_adjuster.py

Covers:
  - Roll forward past weekends and holidays
  - Business-day addition
  - NumPy array inputs (1-D, 2-D)
  - Defensive bound on pathological holiday data
  - Weekmask configuration
"""

from datetime import date, datetime, timedelta

import numpy as np
import pytest

from meterschedule.calendar import ConfigurationError, DateAdjuster, HolidayIndex


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def plain():
    """Mon–Fri, no holidays."""
    return DateAdjuster(HolidayIndex(), weekmask="1111100", max_days=366)


@pytest.fixture
def juneteenth():
    """Mon–Fri with Wed 2024-06-19 off."""
    return DateAdjuster(HolidayIndex.from_dates([date(2024, 6, 19)]), weekmask="1111100", max_days=366)


# ── Roll forward ──────────────────────────────────────────────────────────────

class TestRollForward:

    def test_business_day_unchanged(self, plain):
        assert plain.roll_forward(date(2024, 6, 17)) == date(2024, 6, 17)

    def test_saturday_to_monday(self, plain):
        assert plain.roll_forward(date(2024, 6, 15)) == date(2024, 6, 17)

    def test_sunday_to_monday(self, plain):
        assert plain.roll_forward(date(2024, 6, 16)) == date(2024, 6, 17)

    def test_holiday_to_next_day(self, juneteenth):
        assert juneteenth.roll_forward(date(2024, 6, 19)) == date(2024, 6, 20)

    def test_friday_holiday_rolls_over_weekend(self):
        adj = DateAdjuster(HolidayIndex.from_dates([date(2024, 6, 21)]))
        assert adj.roll_forward(date(2024, 6, 21)) == date(2024, 6, 24)

    def test_monday_holiday_after_weekend(self):
        # Saturday → Monday is a holiday → Tuesday
        adj = DateAdjuster(HolidayIndex.from_dates([date(2024, 6, 17)]))
        assert adj.roll_forward(date(2024, 6, 15)) == date(2024, 6, 18)

    def test_consecutive_holidays(self):
        adj = DateAdjuster(HolidayIndex.from_dates([date(2024, 6, 19), date(2024, 6, 20)]))
        assert adj.roll_forward(date(2024, 6, 19)) == date(2024, 6, 21)

    def test_returns_plain_date(self, plain):
        result = plain.roll_forward(datetime(2024, 6, 16, 23, 30))
        assert type(result) is date
        assert result == date(2024, 6, 17)

    def test_result_is_business_day(self, juneteenth):
        for offset in range(60):
            rolled = juneteenth.roll_forward(date(2024, 6, 1) + timedelta(days=offset))
            assert rolled.weekday() < 5
            assert rolled != date(2024, 6, 19)


# ── Business-day addition ─────────────────────────────────────────────────────

class TestAddBusinessDays:

    def test_three_days_midweek(self, plain):
        assert plain.add_business_days(date(2024, 6, 17), 3) == date(2024, 6, 20)

    def test_skips_holiday(self, juneteenth):
        assert juneteenth.add_business_days(date(2024, 6, 17), 3) == date(2024, 6, 21)

    def test_crosses_weekend(self, plain):
        assert plain.add_business_days(date(2024, 6, 14), 3) == date(2024, 6, 19)

    def test_from_saturday_counts_days_after(self, plain):
        assert plain.add_business_days(date(2024, 6, 15), 3) == date(2024, 6, 19)

    def test_from_sunday_counts_days_after(self, plain):
        assert plain.add_business_days(date(2024, 6, 16), 1) == date(2024, 6, 17)

    def test_from_holiday_counts_days_after(self, juneteenth):
        assert juneteenth.add_business_days(date(2024, 6, 19), 1) == date(2024, 6, 20)

    def test_zero_returns_date_unchanged(self, plain):
        assert plain.add_business_days(date(2024, 6, 15), 0) == date(2024, 6, 15)

    def test_negative_returns_date_unchanged(self, plain):
        assert plain.add_business_days(date(2024, 6, 15), -2) == date(2024, 6, 15)


# ── NumPy array inputs ────────────────────────────────────────────────────────

class TestNumPyInputs:

    def test_1d_roll_forward(self, juneteenth):
        days = np.array(["2024-06-15", "2024-06-19", "2024-06-18"], dtype="datetime64[D]")
        result = juneteenth.roll_forward(days)
        expected = np.array(["2024-06-17", "2024-06-20", "2024-06-18"], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_2d_shape_preserved(self, plain):
        days = np.array(
            [["2024-06-15", "2024-06-16"], ["2024-06-17", "2024-06-22"]], dtype="datetime64[D]"
        )
        result = plain.roll_forward(days)
        assert result.shape == (2, 2)
        np.testing.assert_array_equal(
            result,
            np.array([["2024-06-17", "2024-06-17"], ["2024-06-17", "2024-06-24"]], dtype="datetime64[D]"),
        )

    def test_1d_add_business_days(self, juneteenth):
        days = np.array(["2024-06-14", "2024-06-17"], dtype="datetime64[D]")
        result = juneteenth.add_business_days(days, 3)
        np.testing.assert_array_equal(
            result, np.array(["2024-06-20", "2024-06-21"], dtype="datetime64[D]")
        )

    def test_is_business_day_array(self, juneteenth):
        days = np.array(["2024-06-15", "2024-06-18", "2024-06-19"], dtype="datetime64[D]")
        np.testing.assert_array_equal(juneteenth.is_business_day(days), [False, True, False])

    def test_is_business_day_scalar(self, juneteenth):
        assert juneteenth.is_business_day(date(2024, 6, 18)) is True
        assert juneteenth.is_business_day(date(2024, 6, 19)) is False

    def test_array_consistency_with_scalar(self, juneteenth):
        """Array and scalar paths must agree on every element."""
        start = np.datetime64("2024-06-01")
        days = start + np.arange(45)
        array_result = juneteenth.roll_forward(days)
        scalar_results = [juneteenth.roll_forward(d.item()) for d in days]
        assert [d.item() for d in array_result] == scalar_results


# ── Defensive bound ───────────────────────────────────────────────────────────

class TestBound:

    @pytest.fixture
    def year_of_holidays(self):
        start = date(2024, 6, 1)
        return HolidayIndex.from_dates(start + timedelta(days=i) for i in range(400))

    def test_roll_forward_beyond_bound_raises(self, year_of_holidays):
        adj = DateAdjuster(year_of_holidays, max_days=366)
        with pytest.raises(ConfigurationError):
            adj.roll_forward(date(2024, 6, 1))

    def test_add_business_days_beyond_bound_raises(self, year_of_holidays):
        adj = DateAdjuster(year_of_holidays, max_days=366)
        with pytest.raises(ConfigurationError):
            adj.add_business_days(date(2024, 6, 1), 3)

    def test_tight_bound(self):
        adj = DateAdjuster(HolidayIndex(), max_days=1)
        assert adj.roll_forward(date(2024, 6, 16)) == date(2024, 6, 17)
        with pytest.raises(ConfigurationError):
            adj.roll_forward(date(2024, 6, 15))

    def test_non_positive_bound_raises(self):
        with pytest.raises(ConfigurationError):
            DateAdjuster(HolidayIndex(), max_days=0)


# ── Weekmask ──────────────────────────────────────────────────────────────────

class TestWeekmask:

    def test_all_zero_weekmask_raises(self):
        with pytest.raises(ConfigurationError):
            DateAdjuster(HolidayIndex(), weekmask="0000000")

    def test_malformed_weekmask_raises(self):
        with pytest.raises(ConfigurationError):
            DateAdjuster(HolidayIndex(), weekmask="weekday")

    def test_sunday_only_weekend(self):
        adj = DateAdjuster(HolidayIndex(), weekmask="1111110")
        assert adj.roll_forward(date(2024, 6, 15)) == date(2024, 6, 15)
        assert adj.roll_forward(date(2024, 6, 16)) == date(2024, 6, 17)

    def test_properties_and_repr(self, juneteenth):
        assert juneteenth.weekmask == "1111100"
        assert juneteenth.max_days == 366
        assert len(juneteenth.holidays) == 1
        assert "DateAdjuster(" in repr(juneteenth)
