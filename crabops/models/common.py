"""Common types used across CrabOps."""

from enum import Enum

# ============================================================================
# Status Enums (these are system states, not business data)
# ============================================================================

class DayGroup(str, Enum):
    """How a day of the week is staffed."""
    CLOSED = "closed"
    WEEKDAY = "weekday"
    WEEKEND = "weekend"


class ScheduleStatus(str, Enum):
    """Outcome of a clock-in estimate."""
    SCHEDULED = "scheduled"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class InvoiceType(str, Enum):
    """Where an invoiced delivery came from."""
    DOCK = "Dock"
    WHOLESALER = "Wholesaler"


# Sentinels rendered in place of a clock-in time
CLOSED_LABEL = "Closed"
UNKNOWN_LABEL = "N/A"
