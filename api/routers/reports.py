"""Report submission endpoints (invoices, end of day, weekly breakdown).

Handlers are plain functions so the blocking ledger appends run in the threadpool.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.config import Settings, get_settings
from api.dependencies import get_ledger
from api.middleware.auth import require_session
from api.middleware.errors import LedgerWriteError
from crabops.models.reports import AppendResult, EodReport, InvoiceBatch, WeeklyBreakdown
from crabops.services.report_writer import (
    submit_eod_report,
    submit_invoices,
    submit_weekly_breakdown,
)
from crabops.storage import LedgerBackend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


def _raise_on_failure(result: AppendResult, staff_name: str) -> AppendResult:
    if not result.success:
        raise LedgerWriteError(result.error or "Ledger append failed", details={"staff": staff_name})
    return result


@router.post("/invoices", response_model=AppendResult, status_code=status.HTTP_201_CREATED)
def post_invoices(
    batch: InvoiceBatch,
    staff_name: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """Append crab invoice entries to the Invoices tab."""
    logger.info(f"{staff_name} submitting {len(batch.entries)} invoice entries")
    result = submit_invoices(ledger, batch.entries, tz=settings.business_timezone)
    return _raise_on_failure(result, staff_name)


@router.post("/eod", response_model=AppendResult, status_code=status.HTTP_201_CREATED)
def post_eod_report(
    report: EodReport,
    staff_name: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """Append the end-of-day breakdown to the EoD_Data tab."""
    logger.info(f"{staff_name} submitting end-of-day report")
    result = submit_eod_report(ledger, report, tz=settings.business_timezone)
    return _raise_on_failure(result, staff_name)


@router.post("/weekly-breakdown", response_model=AppendResult, status_code=status.HTTP_201_CREATED)
def post_weekly_breakdown(
    breakdown: WeeklyBreakdown,
    staff_name: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """Append the weekly breakdown to the Tues_Breakdown tab."""
    logger.info(f"{staff_name} submitting weekly breakdown for {breakdown.worker_name}")
    result = submit_weekly_breakdown(ledger, breakdown, tz=settings.business_timezone)
    return _raise_on_failure(result, staff_name)
