"""
Stock Data Models

The end-of-day ledger row layout and the totals derived from it.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, computed_field

# ============================================================================
# EoD_Data column layout (0-indexed)
# ============================================================================

DATE_COLUMN = 0
MALE_COLUMNS = range(5, 12)      # F-L: SM, MD, ML, LG, XL, JUMBO, SUPER
FEMALE_COLUMNS = range(12, 16)   # M-P: REGF, LGF, XLF, JUMBOF
BULK_VOLUME_COLUMN = 16          # Q: #1 bushels
UNGRADED_COLUMN = 17             # R: ungraded boxes

MALE_SIZES = ["SM", "MD", "ML", "LG", "XL", "JUMBO", "SUPER"]
FEMALE_SIZES = ["REGF", "LGF", "XLF", "JUMBOF"]


def coerce_count(value: Any) -> float:
    """
    Coerce a ledger cell to a non-negative count.

    Empty, missing, non-numeric, non-finite and negative cells count as 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


class LedgerRow(BaseModel):
    """
    One row of the EoD_Data tab, exactly as returned by the ledger.

    Cells are strings (possibly empty); trailing empty cells may be missing
    entirely because the Sheets API trims them.
    """

    cells: List[str] = Field(default_factory=list)

    def cell(self, index: int) -> Optional[str]:
        """Return the cell at index, or None if the row is too short."""
        if index < len(self.cells):
            return self.cells[index]
        return None

    def cell_range(self, columns: range) -> List[Optional[str]]:
        return [self.cell(i) for i in columns]

    @property
    def report_date(self) -> str:
        return self.cell(DATE_COLUMN) or ""


class StockTotals(BaseModel):
    """
    Current stock reduced from the most recent EoD report.

    Computed fresh on every read; never persisted.
    """

    total_male_units: float = Field(default=0.0, ge=0, description="Sum of the 7 male size buckets")
    total_female_units: float = Field(default=0.0, ge=0, description="Sum of the 4 female size buckets")
    total_bulk_volume: str = Field(default="0", description="Bushel cell, kept as entered for display")
    ungraded_count: float = Field(default=0.0, ge=0, description="Boxes not yet graded")
    report_date: str = Field(default="", description="Date stamped on the EoD report")

    @computed_field
    @property
    def total_dozens(self) -> float:
        """Dozens-equivalent volume used by the workload model."""
        return self.total_male_units + self.total_female_units

    @computed_field
    @property
    def bulk_volume_value(self) -> float:
        """Bushel cell coerced to a number."""
        return coerce_count(self.total_bulk_volume)
