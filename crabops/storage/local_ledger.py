"""
Local Ledger

A directory of CSV files, one per tab, standing in for the shared sheet
during local development. Cells are kept as strings.
"""

import csv
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd
from pandas.errors import EmptyDataError, ParserError

from crabops.storage.base import LedgerError, Rows, parse_a1_range

logger = logging.getLogger(__name__)


def _max_row_width(path: Path) -> int:
    with open(path, newline="") as f:
        return max((len(row) for row in csv.reader(f)), default=0)


class LocalLedger:
    """
    CSV-backed ledger.

    Files are organized as:
    - {base_dir}/{tab}.csv
    """

    def __init__(self, base_dir: str = "./data/ledger"):
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _tab_path(self, tab: str) -> Path:
        return self.base_dir / f"{tab}.csv"

    def get_values(self, sheet_range: str) -> Rows:
        a1 = parse_a1_range(sheet_range)
        path = self._tab_path(a1.tab)

        if not path.exists():
            raise LedgerError(f"Tab not found: {a1.tab}", sheet_range)

        try:
            width = _max_row_width(path)
            if width == 0:
                return []
            # Appended rows can be wider than the first row
            df = pd.read_csv(
                path, header=None, names=list(range(width)), dtype=str, keep_default_na=False
            )
        except EmptyDataError:
            return []
        except (ParserError, OSError, csv.Error) as e:
            raise LedgerError(f"Failed to read {path}: {e}", sheet_range)

        # Rows shorter than the widest row come back as NaN
        df = df.fillna("")

        last = a1.last_column + 1 if a1.last_column is not None else None
        df = df.iloc[:, a1.first_column:last]

        rows = []
        for values in df.values.tolist():
            # Mimic the Sheets API: trailing empty cells are dropped
            while values and values[-1] == "":
                values.pop()
            rows.append(values)

        logger.info(f"Read {len(rows)} rows from {path}")
        return rows

    def append_values(self, sheet_range: str, rows: Sequence[Sequence[object]]) -> int:
        a1 = parse_a1_range(sheet_range)
        path = self._tab_path(a1.tab)

        df = pd.DataFrame([["" if v is None else str(v) for v in row] for row in rows])

        try:
            df.to_csv(path, mode="a", header=False, index=False)
        except OSError as e:
            raise LedgerError(f"Failed to write {path}: {e}", sheet_range)

        logger.info(f"Appended {len(df)} rows to {path}")
        return len(df)

    def write_header(self, tab: str, header: Sequence[str]) -> None:
        """Create a tab with its header row if it does not exist yet."""
        path = self._tab_path(tab)
        if path.exists():
            return
        pd.DataFrame([list(header)]).to_csv(path, header=False, index=False)
