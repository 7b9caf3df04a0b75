"""
Report Writer

Append paths for the invoice, end-of-day and weekly breakdown forms.
Each row is stamped with today's business-local date in column A.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence

from crabops.models.reports import (
    AppendResult,
    EodReport,
    GradeCounts,
    InvoiceEntry,
    WeeklyBreakdown,
)
from crabops.services.business_time import DEFAULT_TIMEZONE, business_date_stamp, now_utc
from crabops.storage.base import LedgerBackend, LedgerError

logger = logging.getLogger(__name__)

INVOICES_RANGE = "Invoices!A1"
EOD_APPEND_RANGE = "EoD_Data!A1"
WEEKLY_RANGE = "Tues_Breakdown!A1"

INVOICE_HEADER = ["Date", "Type", "Distributor", "Ones", "Twos", "Females", "ID"]

EOD_HEADER = [
    "Date", "Time Closed", "Weather", "Condition", "Specials",
    "SM", "MD", "ML", "LG", "XL", "JUMBO", "SUPER",
    "REGF", "LGF", "XLF", "JUMBOF",
    "Bushels", "Ungraded Boxes",
    "Dozens Sold", "Bushels Sold", "Total Sales", "Card Sales", "Cash Sales",
    "Employees", "Late Employees", "Late Reason", "Cut", "Cut Reason",
]

_GRADE_COLUMNS = ["1s", "2s", "Smalls", "Mediums", "Larges", "XLs", "Jumbos", "Bushels of 1s"]

WEEKLY_HEADER = (
    ["Date", "Worker"]
    + [f"MD {g}" for g in _GRADE_COLUMNS]
    + [f"LA {g}" for g in _GRADE_COLUMNS]
    + ["Females", "Regular Females", "Large Females", "XL Females", "Jumbo Females"]
)


def _number_or_zero(value: Any) -> Any:
    """Blank numeric form fields are written as 0; anything else as entered."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    return value


def _text_or(value: Optional[str], default: str) -> str:
    return value if value else default


def _append(
    ledger: LedgerBackend,
    sheet_range: str,
    rows: Sequence[Sequence[Any]],
    label: str,
) -> AppendResult:
    try:
        written = ledger.append_values(sheet_range, rows)
    except LedgerError as e:
        logger.error(f"{label} append failed: {e.message}")
        return AppendResult(success=False, error=f"Failed to sync {label} with the ledger")

    logger.info(f"{label}: appended {written} rows to {sheet_range}")
    return AppendResult(success=True, rows_written=written)


# ============================================================================
# Row builders
# ============================================================================

def build_invoice_rows(entries: Sequence[InvoiceEntry], date_stamp: str) -> List[List[Any]]:
    """Column order: Date, Type, Distributor, Ones, Twos, Females, ID."""
    return [
        [
            date_stamp,
            entry.type.value,
            entry.distributor,
            entry.ones,
            entry.twos,
            entry.females,
            entry.id,
        ]
        for entry in entries
    ]


def build_eod_row(report: EodReport, date_stamp: str) -> List[Any]:
    """One row in EOD_HEADER order."""
    n = _number_or_zero
    return [
        date_stamp,
        _text_or(report.time_closed, "N/A"),
        n(report.weather_val),
        _text_or(report.weather_condition, "N/A"),
        _text_or(report.specials, "None"),
        # Male counts
        n(report.eod_sm),
        n(report.eod_md),
        n(report.eod_ml),
        n(report.eod_lg),
        n(report.eod_xl),
        n(report.eod_jumbo),
        n(report.eod_super),
        # Female counts
        n(report.eod_fem_regf),
        n(report.eod_fem_lgf),
        n(report.eod_fem_xlf),
        n(report.eod_fem_jumbof),
        n(report.eod_bushels),
        n(report.eod_ungraded_boxes),
        # Sales
        n(report.dozens_sold),
        n(report.bushels_sold),
        n(report.total_sales),
        n(report.card_sales),
        n(report.cash_sales),
        # Labor
        n(report.num_employees),
        n(report.num_late_employees),
        _text_or(report.late_reason, "N/A"),
        n(report.num_cut),
        _text_or(report.cut_reason, "N/A"),
    ]


def _grade_cells(counts: GradeCounts) -> List[Any]:
    return [
        _number_or_zero(v)
        for v in (
            counts.ones,
            counts.twos,
            counts.smalls,
            counts.mediums,
            counts.larges,
            counts.xls,
            counts.jumbos,
            counts.bushels_of_ones,
        )
    ]


def build_weekly_row(breakdown: WeeklyBreakdown, date_stamp: str) -> List[Any]:
    """One row in WEEKLY_HEADER order."""
    fem = breakdown.females
    return (
        [date_stamp, breakdown.worker_name]
        + _grade_cells(breakdown.maryland)
        + _grade_cells(breakdown.louisiana)
        + [_number_or_zero(v) for v in (fem.count, fem.regular, fem.large, fem.xl, fem.jumbo)]
    )


# ============================================================================
# Append operations
# ============================================================================

def submit_invoices(
    ledger: LedgerBackend,
    entries: Sequence[InvoiceEntry],
    now: Optional[datetime] = None,
    tz: str = DEFAULT_TIMEZONE,
) -> AppendResult:
    """Append one row per invoice entry to the Invoices tab."""
    if not entries:
        return AppendResult(success=False, error="No invoice entries to submit")

    stamp = business_date_stamp(now or now_utc(), tz)
    return _append(ledger, INVOICES_RANGE, build_invoice_rows(entries, stamp), "Invoices")


def submit_eod_report(
    ledger: LedgerBackend,
    report: EodReport,
    now: Optional[datetime] = None,
    tz: str = DEFAULT_TIMEZONE,
) -> AppendResult:
    """Append the end-of-day breakdown to the EoD_Data tab."""
    stamp = business_date_stamp(now or now_utc(), tz)
    return _append(ledger, EOD_APPEND_RANGE, [build_eod_row(report, stamp)], "EoD")


def submit_weekly_breakdown(
    ledger: LedgerBackend,
    breakdown: WeeklyBreakdown,
    now: Optional[datetime] = None,
    tz: str = DEFAULT_TIMEZONE,
) -> AppendResult:
    """Append the weekly breakdown to the Tues_Breakdown tab."""
    stamp = business_date_stamp(now or now_utc(), tz)
    return _append(ledger, WEEKLY_RANGE, [build_weekly_row(breakdown, stamp)], "Weekly breakdown")
