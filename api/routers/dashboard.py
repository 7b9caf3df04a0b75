"""Dashboard API endpoints: current stock and the clock-in estimate.

Handlers are plain functions so the blocking ledger reads run in the threadpool.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.config import Settings, get_settings
from api.dependencies import get_ledger, get_schedule_config
from api.middleware.auth import require_session
from crabops.models.schedule import ScheduleConfig, ScheduleEstimate
from crabops.models.stock import StockTotals
from crabops.services.business_time import now_utc
from crabops.services.clock_in_estimator import estimate_clock_in
from crabops.services.stock_aggregator import get_stock_totals
from crabops.storage import LedgerBackend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


class StockResponse(BaseModel):
    stock: Optional[StockTotals] = None


class ClockInResponse(BaseModel):
    estimate: ScheduleEstimate
    stock: Optional[StockTotals] = None


class DashboardResponse(BaseModel):
    """Everything the landing page renders."""
    staff_name: str
    generated_at: datetime
    stock: Optional[StockTotals] = None
    total_dozens: float = 0.0
    estimate: ScheduleEstimate


AT_QUERY = Query(
    None,
    description="Reference instant (ISO 8601). Defaults to now; naive values are read as UTC.",
)


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    at: Optional[datetime] = AT_QUERY,
    staff_name: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    config: ScheduleConfig = Depends(get_schedule_config),
    settings: Settings = Depends(get_settings),
):
    """Landing page payload: latest stock plus the clock-in estimate."""
    reference = at or now_utc()
    stock = get_stock_totals(ledger, settings.eod_range)
    estimate = estimate_clock_in(stock, reference, config)

    return DashboardResponse(
        staff_name=staff_name,
        generated_at=reference,
        stock=stock,
        total_dozens=stock.total_dozens if stock else 0.0,
        estimate=estimate,
    )


@router.get("/stock", response_model=StockResponse)
def get_stock(
    _: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """Stock totals from the latest EoD report; stock is null when there is no data."""
    return StockResponse(stock=get_stock_totals(ledger, settings.eod_range))


@router.get("/clock-in", response_model=ClockInResponse)
def get_clock_in(
    at: Optional[datetime] = AT_QUERY,
    _: str = Depends(require_session),
    ledger: LedgerBackend = Depends(get_ledger),
    config: ScheduleConfig = Depends(get_schedule_config),
    settings: Settings = Depends(get_settings),
):
    """Recommended back-of-house clock-in time for today (or tomorrow after 5 PM)."""
    stock = get_stock_totals(ledger, settings.eod_range)
    return ClockInResponse(
        estimate=estimate_clock_in(stock, at or now_utc(), config),
        stock=stock,
    )
