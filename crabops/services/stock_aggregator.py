"""
Stock Aggregator

Reads the most recent end-of-day report from the ledger and reduces its
size-bucket counts to stock totals.
"""

import logging
from typing import Iterable, Optional

from crabops.models.stock import (
    BULK_VOLUME_COLUMN,
    FEMALE_COLUMNS,
    MALE_COLUMNS,
    UNGRADED_COLUMN,
    LedgerRow,
    StockTotals,
    coerce_count,
)
from crabops.storage.base import LedgerBackend

logger = logging.getLogger(__name__)

EOD_RANGE = "EoD_Data!A:R"


def _sum_cells(cells: Iterable[Optional[str]]) -> float:
    return sum(coerce_count(c) for c in cells)


def aggregate_row(row: LedgerRow) -> StockTotals:
    """Reduce one EoD row to stock totals."""
    bulk = row.cell(BULK_VOLUME_COLUMN)

    return StockTotals(
        total_male_units=_sum_cells(row.cell_range(MALE_COLUMNS)),
        total_female_units=_sum_cells(row.cell_range(FEMALE_COLUMNS)),
        total_bulk_volume=bulk if bulk else "0",
        ungraded_count=coerce_count(row.cell(UNGRADED_COLUMN)),
        report_date=row.report_date,
    )


def get_stock_totals(
    ledger: LedgerBackend,
    sheet_range: str = EOD_RANGE,
) -> Optional[StockTotals]:
    """
    Get stock totals from the last row of the EoD ledger.

    Args:
        ledger: Backend to read from
        sheet_range: Range covering the date column through the ungraded column

    Returns:
        StockTotals for the tail row, or None when there is no data
        (empty or header-only ledger, malformed response, or read failure)
    """
    try:
        rows = ledger.get_values(sheet_range)
    except Exception:
        logger.exception(f"Stock fetch failed for {sheet_range}")
        return None

    if not isinstance(rows, list) or len(rows) <= 1:
        logger.info(f"No EoD data in {sheet_range}")
        return None

    latest = rows[-1]
    if not isinstance(latest, (list, tuple)):
        logger.warning(f"Malformed tail row in {sheet_range}: {latest!r}")
        return None

    row = LedgerRow(cells=["" if c is None else str(c) for c in latest])
    totals = aggregate_row(row)

    logger.info(
        f"Stock as of {totals.report_date or 'unknown date'}: "
        f"{totals.total_male_units:g} males, {totals.total_female_units:g} females, "
        f"{totals.total_bulk_volume} bushels, {totals.ungraded_count:g} ungraded"
    )
    return totals
