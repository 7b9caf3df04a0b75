"""
CrabOps Core Package

Pure business logic for the shop dashboard: stock totals from the
end-of-day ledger and the back-of-house clock-in estimate.
No framework dependencies (Streamlit, FastAPI) in this package.
"""

__version__ = "1.0.0"

from crabops.models.schedule import ScheduleConfig, ScheduleEstimate
from crabops.models.stock import LedgerRow, StockTotals
from crabops.services.clock_in_estimator import estimate_clock_in
from crabops.services.stock_aggregator import get_stock_totals

__all__ = [
    "LedgerRow",
    "StockTotals",
    "ScheduleConfig",
    "ScheduleEstimate",
    "get_stock_totals",
    "estimate_clock_in",
]
