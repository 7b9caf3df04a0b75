"""
Report Entry Models

Payloads for the three ledger append paths: crab invoices, the end-of-day
breakdown and the weekly (Tuesday) breakdown.
"""

from typing import List, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field

from crabops.models.common import InvoiceType

# Form inputs arrive as numbers or as the raw string typed into the field
Numeric = Optional[Union[float, int, str]]


class InvoiceEntry(BaseModel):
    """One delivery line on the crab invoice form."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    type: InvoiceType
    distributor: str = Field(..., min_length=1)
    ones: float = Field(default=0, ge=0, description="Bushels of #1 males")
    twos: float = Field(default=0, ge=0, description="Bushels of #2 males")
    females: float = Field(default=0, ge=0, description="Bushels of females")


class InvoiceBatch(BaseModel):
    entries: List[InvoiceEntry] = Field(..., min_length=1)


class EodReport(BaseModel):
    """
    End-of-day breakdown.

    Numeric fields left blank are written to the ledger as 0; text fields
    fall back to "N/A" (or "None" for specials).
    """

    # Time & conditions
    time_closed: Optional[str] = None
    weather_val: Numeric = None
    weather_condition: Optional[str] = None
    specials: Optional[str] = None

    # Male counts (dozens)
    eod_sm: Numeric = None
    eod_md: Numeric = None
    eod_ml: Numeric = None
    eod_lg: Numeric = None
    eod_xl: Numeric = None
    eod_jumbo: Numeric = None
    eod_super: Numeric = None

    # Female counts (dozens)
    eod_fem_regf: Numeric = None
    eod_fem_lgf: Numeric = None
    eod_fem_xlf: Numeric = None
    eod_fem_jumbof: Numeric = None

    eod_bushels: Numeric = None
    eod_ungraded_boxes: Numeric = None

    # Sales
    dozens_sold: Numeric = None
    bushels_sold: Numeric = None
    total_sales: Numeric = None
    card_sales: Numeric = None
    cash_sales: Numeric = None

    # Labor
    num_employees: Numeric = None
    num_late_employees: Numeric = None
    late_reason: Optional[str] = None
    num_cut: Numeric = None
    cut_reason: Optional[str] = None


class GradeCounts(BaseModel):
    """Counts for one origin on the weekly breakdown."""

    ones: Numeric = None
    twos: Numeric = None
    smalls: Numeric = None
    mediums: Numeric = None
    larges: Numeric = None
    xls: Numeric = None
    jumbos: Numeric = None
    bushels_of_ones: Numeric = None


class FemaleCounts(BaseModel):
    count: Numeric = None
    regular: Numeric = None
    large: Numeric = None
    xl: Numeric = None
    jumbo: Numeric = None


class WeeklyBreakdown(BaseModel):
    """Tuesday breakdown of a delivery by origin and grade."""

    worker_name: str = Field(..., min_length=1)
    maryland: GradeCounts = Field(default_factory=GradeCounts)
    louisiana: GradeCounts = Field(default_factory=GradeCounts)
    females: FemaleCounts = Field(default_factory=FemaleCounts)


class AppendResult(BaseModel):
    """Outcome of an append to the ledger."""

    success: bool
    rows_written: int = 0
    error: Optional[str] = None
