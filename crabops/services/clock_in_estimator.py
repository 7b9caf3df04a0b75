"""
Clock-In Estimator

Works backwards from the latest acceptable clock-in hour for the target day:
the more stock there is to prep, the earlier back-of-house has to start.

    workload = (dozens / 8.5) * 5 min + ungraded boxes * 5 min
    clock-in = latest hour - workload, rounded to the nearest 5 minutes
"""

import logging
from datetime import datetime, time, timedelta
from typing import Optional

from crabops.models.common import CLOSED_LABEL, UNKNOWN_LABEL, DayGroup, ScheduleStatus
from crabops.models.schedule import ScheduleConfig, ScheduleEstimate
from crabops.models.stock import StockTotals
from crabops.services.business_time import (
    day_name,
    format_12h,
    round_to_increment,
    to_business_time,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ScheduleConfig()


def compute_workload_minutes(
    total_volume: float,
    ungraded_count: float,
    config: ScheduleConfig = DEFAULT_CONFIG,
) -> float:
    """Minutes of prep work implied by the stock on hand."""
    volume_term = (max(total_volume, 0.0) / config.volume_rate_units) * config.volume_rate_minutes
    ungraded_term = max(ungraded_count, 0.0) * config.ungraded_rate_minutes
    # Trim float noise so 280.5 dozens gives exactly 165 minutes
    return round(volume_term + ungraded_term, 6)


def estimate_from_workload(
    total_volume: float,
    ungraded_count: float,
    reference: datetime,
    config: ScheduleConfig = DEFAULT_CONFIG,
) -> ScheduleEstimate:
    """
    Estimate the clock-in time from scalar workload inputs.

    Args:
        total_volume: Dozens-equivalent volume (males + females)
        ungraded_count: Boxes not yet graded
        reference: The instant being planned from (any timezone)
        config: Business constants

    Returns:
        ScheduleEstimate; "Closed" or "N/A" instead of a time when the
        target day is closed or not configured
    """
    local = to_business_time(reference, config.timezone)

    is_next_day = local.hour >= config.rollover_hour
    target_date = local.date() + timedelta(days=1) if is_next_day else local.date()
    target_day = day_name(target_date)

    group = config.day_groups().get(target_day)

    if group == DayGroup.CLOSED:
        return ScheduleEstimate(
            recommended_time=CLOSED_LABEL,
            target_day_name=target_day,
            is_next_day=is_next_day,
            status=ScheduleStatus.CLOSED,
            target_date=target_date,
        )

    latest_hour = config.latest_hour(group) if group else None
    if latest_hour is None:
        logger.warning(f"No day group configured for {target_day}")
        return ScheduleEstimate(
            recommended_time=UNKNOWN_LABEL,
            target_day_name=target_day,
            is_next_day=is_next_day,
            status=ScheduleStatus.UNKNOWN,
            target_date=target_date,
        )

    workload = compute_workload_minutes(total_volume, ungraded_count, config)

    anchor = datetime.combine(target_date, time(hour=latest_hour))
    start = round_to_increment(
        anchor - timedelta(minutes=workload),
        config.rounding_increment_minutes,
    )

    logger.debug(
        f"{target_day}: {workload:.1f} min of work before {latest_hour}:00 -> {format_12h(start)}"
    )

    return ScheduleEstimate(
        recommended_time=format_12h(start),
        target_day_name=target_day,
        is_next_day=is_next_day,
        workload_minutes=workload,
        status=ScheduleStatus.SCHEDULED,
        target_date=target_date,
    )


def estimate_clock_in(
    totals: Optional[StockTotals],
    reference: datetime,
    config: ScheduleConfig = DEFAULT_CONFIG,
) -> ScheduleEstimate:
    """Estimate the clock-in time from the latest stock totals (None = no data)."""
    if totals is None:
        return estimate_from_workload(0.0, 0.0, reference, config)

    return estimate_from_workload(
        totals.total_male_units + totals.total_female_units,
        totals.ungraded_count,
        reference,
        config,
    )
