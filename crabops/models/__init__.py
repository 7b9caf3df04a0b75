"""Data models for CrabOps."""

from crabops.models.common import DayGroup, InvoiceType, ScheduleStatus
from crabops.models.reports import (
    AppendResult,
    EodReport,
    FemaleCounts,
    GradeCounts,
    InvoiceBatch,
    InvoiceEntry,
    WeeklyBreakdown,
)
from crabops.models.schedule import ScheduleConfig, ScheduleEstimate
from crabops.models.stock import LedgerRow, StockTotals

__all__ = [
    # Common
    "DayGroup",
    "ScheduleStatus",
    "InvoiceType",
    # Stock
    "LedgerRow",
    "StockTotals",
    # Schedule
    "ScheduleConfig",
    "ScheduleEstimate",
    # Reports
    "InvoiceEntry",
    "InvoiceBatch",
    "EodReport",
    "GradeCounts",
    "FemaleCounts",
    "WeeklyBreakdown",
    "AppendResult",
]
