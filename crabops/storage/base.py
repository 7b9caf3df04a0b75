"""
Ledger Backend Interface

The ledger is an append-only, tabular store addressed by A1 ranges
("EoD_Data!A:R", "Invoices!A1"). Cells travel as strings, header row first.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, runtime_checkable

Rows = List[List[str]]


class LedgerError(Exception):
    """A ledger read or write failed (network, auth, permissions, bad range)."""

    def __init__(self, message: str, sheet_range: Optional[str] = None):
        self.message = message
        self.sheet_range = sheet_range
        super().__init__(message)


@runtime_checkable
class LedgerBackend(Protocol):
    """Read/append access to the shared spreadsheet."""

    def get_values(self, sheet_range: str) -> Rows:
        """Return every row in the range, header first. Raises LedgerError."""
        ...

    def append_values(self, sheet_range: str, rows: Sequence[Sequence[object]]) -> int:
        """Append rows after the last row of the tab. Returns rows written."""
        ...


@dataclass(frozen=True)
class A1Range:
    """A parsed A1 range. Column bounds are 0-indexed and inclusive."""

    tab: str
    first_column: int = 0
    last_column: Optional[int] = None


_A1_RE = re.compile(
    r"^(?:(?P<tab>'[^']+'|[^!]+)!)?"
    r"(?P<c1>[A-Za-z]+)?(?P<r1>\d+)?"
    r"(?::(?P<c2>[A-Za-z]+)?(?P<r2>\d+)?)?$"
)


def column_index(letters: str) -> int:
    """Convert column letters to a 0-based index: A -> 0, Z -> 25, AA -> 26."""
    index = 0
    for ch in letters.upper():
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def parse_a1_range(sheet_range: str, default_tab: str = "Sheet1") -> A1Range:
    """
    Split an A1 range into tab name and column bounds.

    Row numbers are accepted but ignored: the ledger is always read whole
    and appended at the end.
    """
    match = _A1_RE.match(sheet_range.strip())
    if not match:
        raise LedgerError(f"Invalid A1 range: {sheet_range}", sheet_range)

    tab = match.group("tab") or default_tab
    tab = tab.strip("'")

    c1 = match.group("c1")
    c2 = match.group("c2")
    first = column_index(c1) if c1 else 0
    last = column_index(c2) if c2 else None

    # "Invoices!A1" names a single anchor cell, not a one-column slice
    if c2 is None and match.group("r2") is None:
        last = None

    if last is not None and last < first:
        raise LedgerError(f"Range columns are reversed: {sheet_range}", sheet_range)

    return A1Range(tab=tab, first_column=first, last_column=last)
