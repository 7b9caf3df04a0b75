"""
Business Time

Every day-of-week and hour decision is made on the shop's wall clock,
whatever timezone the caller is in. Naive datetimes are treated as UTC.
"""

import math
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/New_York"

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def to_business_time(instant: datetime, tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Convert an instant to the business-local timezone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(ZoneInfo(tz))


def day_name(d: date) -> str:
    """Full English day name, e.g. "Wednesday"."""
    return DAY_NAMES[d.weekday()]


def round_to_increment(dt: datetime, increment: int = 5) -> datetime:
    """
    Round to the nearest `increment` minutes, half up.

    Seconds count as fractional minutes, so 13:57:30 rounds up to 14:00
    while 13:57:29 rounds down to 13:55. Rounding goes through timedelta
    so 10:58 becomes 11:00, never 10:60.
    """
    minutes = dt.minute + dt.second / 60 + dt.microsecond / 60_000_000
    rounded = math.floor(minutes / increment + 0.5) * increment
    base = dt.replace(minute=0, second=0, microsecond=0)
    return base + timedelta(minutes=rounded)


def format_12h(dt: datetime) -> str:
    """Format as "h:MM AM" / "h:MM PM" without a leading zero."""
    hour = dt.hour % 12 or 12
    suffix = "PM" if dt.hour >= 12 else "AM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def business_date_stamp(instant: datetime, tz: str = DEFAULT_TIMEZONE) -> str:
    """MM/DD/YYYY date in the business timezone, as written to column A."""
    return to_business_time(instant, tz).strftime("%m/%d/%Y")
