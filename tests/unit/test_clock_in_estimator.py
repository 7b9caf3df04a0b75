"""Tests for the clock-in estimator."""

from datetime import date, datetime, timedelta, timezone

import pytest

from crabops.models.common import ScheduleStatus
from crabops.models.schedule import ScheduleConfig
from crabops.models.stock import StockTotals
from crabops.services.clock_in_estimator import (
    compute_workload_minutes,
    estimate_clock_in,
    estimate_from_workload,
)


def utc(year, month, day, hour, minute=0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


# January 2026 is EST (UTC-5): 15:00 UTC is 10:00 AM in the shop
WEDNESDAY_MORNING = utc(2026, 1, 7, 15)
SATURDAY_MORNING = utc(2026, 1, 10, 13)


class TestWorkload:
    """Tests for the workload formula."""

    def test_volume_and_ungraded_terms(self):
        assert compute_workload_minutes(280.5, 4) == 185.0

    def test_zero_stock_is_zero_minutes(self):
        assert compute_workload_minutes(0, 0) == 0.0

    def test_custom_rates(self):
        config = ScheduleConfig(volume_rate_minutes=10, volume_rate_units=10, ungraded_rate_minutes=1)
        assert compute_workload_minutes(50, 3, config) == 53.0


class TestOpenDays:
    """Tests for weekday and weekend estimates."""

    def test_zero_workload_weekday_is_latest_hour(self):
        estimate = estimate_from_workload(0, 0, WEDNESDAY_MORNING)

        assert estimate.recommended_time == "2:00 PM"
        assert estimate.target_day_name == "Wednesday"
        assert estimate.is_next_day is False
        assert estimate.workload_minutes == 0.0
        assert estimate.status == ScheduleStatus.SCHEDULED

    def test_zero_workload_weekend_is_latest_hour(self):
        estimate = estimate_from_workload(0, 0, SATURDAY_MORNING)

        assert estimate.recommended_time == "11:00 AM"
        assert estimate.target_day_name == "Saturday"

    def test_busy_weekday(self):
        """280.5 dozens and 4 ungraded boxes is 185 minutes before 2 PM."""
        estimate = estimate_from_workload(280.5, 4, WEDNESDAY_MORNING)

        assert estimate.workload_minutes == 185.0
        assert estimate.recommended_time == "10:55 AM"
        assert estimate.target_date == date(2026, 1, 7)

    def test_rounds_to_nearest_five_minutes(self):
        # 14:00 - 42.06 min = 13:17:56 -> 1:20 PM
        estimate = estimate_from_workload(54.5, 2, WEDNESDAY_MORNING)
        assert estimate.recommended_time == "1:20 PM"

    def test_rounding_carries_into_next_hour(self):
        # 14:00 - 62 min = 12:58 -> 1:00 PM, never 12:60
        config = ScheduleConfig(ungraded_rate_minutes=1)
        estimate = estimate_from_workload(0, 62, WEDNESDAY_MORNING, config)
        assert estimate.recommended_time == "1:00 PM"

    def test_large_workload_goes_before_midnight(self):
        config = ScheduleConfig(ungraded_rate_minutes=60)
        estimate = estimate_from_workload(0, 15, WEDNESDAY_MORNING, config)
        assert estimate.recommended_time == "11:00 PM"

    def test_custom_latest_hour(self):
        config = ScheduleConfig(weekday_latest_hour=12)
        estimate = estimate_from_workload(0, 0, WEDNESDAY_MORNING, config)
        assert estimate.recommended_time == "12:00 PM"


class TestClosedAndUnknownDays:
    """Tests for days with no clock-in time."""

    @pytest.mark.parametrize("day,name", [(5, "Monday"), (6, "Tuesday")])
    def test_closed_days_ignore_workload(self, day, name):
        estimate = estimate_from_workload(500, 20, utc(2026, 1, day, 15))

        assert estimate.recommended_time == "Closed"
        assert estimate.target_day_name == name
        assert estimate.workload_minutes == 0.0
        assert estimate.status == ScheduleStatus.CLOSED

    def test_day_in_no_group_is_unknown(self):
        config = ScheduleConfig(weekday_days=("Wednesday", "Thursday"))
        estimate = estimate_from_workload(100, 1, utc(2026, 1, 9, 15), config)

        assert estimate.recommended_time == "N/A"
        assert estimate.target_day_name == "Friday"
        assert estimate.status == ScheduleStatus.UNKNOWN

    def test_closed_wins_over_open_group(self):
        config = ScheduleConfig(closed_days=("Wednesday",))
        estimate = estimate_from_workload(0, 0, WEDNESDAY_MORNING, config)
        assert estimate.recommended_time == "Closed"


class TestRollover:
    """Tests for planning tomorrow after the rollover hour."""

    def test_after_five_pm_targets_tomorrow(self):
        # Tuesday 6 PM EST -> Wednesday
        estimate = estimate_from_workload(0, 0, utc(2026, 1, 6, 23))

        assert estimate.is_next_day is True
        assert estimate.target_day_name == "Wednesday"
        assert estimate.recommended_time == "2:00 PM"
        assert estimate.target_date == date(2026, 1, 7)

    def test_exactly_five_pm_rolls_over(self):
        estimate = estimate_from_workload(0, 0, utc(2026, 1, 7, 22))
        assert estimate.is_next_day is True
        assert estimate.target_day_name == "Thursday"

    def test_just_before_five_pm_stays_today(self):
        estimate = estimate_from_workload(0, 0, utc(2026, 1, 7, 21, 59))
        assert estimate.is_next_day is False
        assert estimate.target_day_name == "Wednesday"

    def test_sunday_evening_targets_closed_monday(self):
        estimate = estimate_from_workload(100, 5, utc(2026, 1, 11, 23))

        assert estimate.is_next_day is True
        assert estimate.target_day_name == "Monday"
        assert estimate.recommended_time == "Closed"

    def test_rollover_uses_daylight_time_in_summer(self):
        # 2026-07-01 is a Wednesday; EDT is UTC-4
        before = estimate_from_workload(0, 0, utc(2026, 7, 1, 20, 30))
        after = estimate_from_workload(0, 0, utc(2026, 7, 1, 21))

        assert before.target_day_name == "Wednesday"
        assert after.target_day_name == "Thursday"


class TestTimezones:
    """The shop's wall clock decides, not the caller's."""

    def test_caller_timezone_is_normalized(self):
        tokyo = timezone(timedelta(hours=9))
        # 00:30 Thursday in Tokyo is 10:30 AM Wednesday in the shop
        reference = datetime(2026, 1, 8, 0, 30, tzinfo=tokyo)

        estimate = estimate_from_workload(0, 0, reference)
        assert estimate.target_day_name == "Wednesday"
        assert estimate.is_next_day is False

    def test_naive_reference_is_utc(self):
        naive = datetime(2026, 1, 7, 15)
        assert estimate_from_workload(0, 0, naive) == estimate_from_workload(0, 0, WEDNESDAY_MORNING)


class TestEstimateFromTotals:
    """Tests for estimate_clock_in."""

    def test_missing_totals_mean_zero_workload(self):
        estimate = estimate_clock_in(None, WEDNESDAY_MORNING)

        assert estimate.recommended_time == "2:00 PM"
        assert estimate.workload_minutes == 0.0

    def test_uses_males_females_and_ungraded(self):
        totals = StockTotals(
            total_male_units=200.5,
            total_female_units=80,
            total_bulk_volume="12",
            ungraded_count=4,
        )
        estimate = estimate_clock_in(totals, WEDNESDAY_MORNING)

        assert estimate.workload_minutes == 185.0
        assert estimate.recommended_time == "10:55 AM"

    def test_bushels_do_not_add_work(self):
        light = StockTotals(total_bulk_volume="0")
        heavy = StockTotals(total_bulk_volume="40")

        assert estimate_clock_in(light, WEDNESDAY_MORNING) == estimate_clock_in(heavy, WEDNESDAY_MORNING)
