"""
CrabOps Business Logic Services

Pure functions with no framework dependencies.
Nothing here holds state between calls.
"""

from crabops.services.clock_in_estimator import (
    compute_workload_minutes,
    estimate_clock_in,
    estimate_from_workload,
)
from crabops.services.report_writer import (
    submit_eod_report,
    submit_invoices,
    submit_weekly_breakdown,
)
from crabops.services.staff_auth import StaffDirectory, hash_pin, verify_pin
from crabops.services.stock_aggregator import aggregate_row, coerce_count, get_stock_totals

__all__ = [
    "get_stock_totals",
    "aggregate_row",
    "coerce_count",
    "estimate_clock_in",
    "estimate_from_workload",
    "compute_workload_minutes",
    "submit_invoices",
    "submit_eod_report",
    "submit_weekly_breakdown",
    "StaffDirectory",
    "hash_pin",
    "verify_pin",
]
