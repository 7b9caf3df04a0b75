"""
Scheduling Models

Business constants for the clock-in estimate and the estimate itself.
"""

from datetime import date
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

from crabops.models.common import DayGroup, ScheduleStatus


class ScheduleConfig(BaseModel):
    """
    Operational policy for the clock-in estimate.

    The rates are business decisions, not measurements. Override them from
    settings rather than editing the defaults.
    """

    # Workload model
    volume_rate_minutes: float = Field(default=5.0, ge=0, description="Minutes per volume_rate_units of stock")
    volume_rate_units: float = Field(default=8.5, gt=0, description="Dozens processed per volume_rate_minutes")
    ungraded_rate_minutes: float = Field(default=5.0, ge=0, description="Minutes per ungraded box")

    # Latest acceptable clock-in hour (24h) per day group
    weekday_latest_hour: int = Field(default=14, ge=0, le=23)
    weekend_latest_hour: int = Field(default=11, ge=0, le=23)

    # Calendar
    timezone: str = "America/New_York"
    rollover_hour: int = Field(default=17, ge=0, le=24, description="From this local hour on, plan for tomorrow")
    rounding_increment_minutes: int = Field(default=5, ge=1, le=60)

    closed_days: Tuple[str, ...] = ("Monday", "Tuesday")
    weekday_days: Tuple[str, ...] = ("Wednesday", "Thursday", "Friday")
    weekend_days: Tuple[str, ...] = ("Saturday", "Sunday")

    def day_groups(self) -> Dict[str, DayGroup]:
        """Lookup table of day name -> group. Closed wins over an open group."""
        table: Dict[str, DayGroup] = {}
        for day in self.weekday_days:
            table[day] = DayGroup.WEEKDAY
        for day in self.weekend_days:
            table[day] = DayGroup.WEEKEND
        for day in self.closed_days:
            table[day] = DayGroup.CLOSED
        return table

    def latest_hour(self, group: DayGroup) -> Optional[int]:
        return {
            DayGroup.WEEKDAY: self.weekday_latest_hour,
            DayGroup.WEEKEND: self.weekend_latest_hour,
        }.get(group)


class ScheduleEstimate(BaseModel):
    """Recommended back-of-house clock-in time for the target day."""

    recommended_time: str = Field(..., description='"h:MM AM/PM", "Closed" or "N/A"')
    target_day_name: str
    is_next_day: bool = False
    workload_minutes: float = 0.0

    status: ScheduleStatus = ScheduleStatus.SCHEDULED
    target_date: Optional[date] = None
