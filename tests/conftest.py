"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ["STAFF_JSON"] = ""
os.environ["LEDGER_BACKEND"] = "local"
os.environ["LOCAL_LEDGER_DIR"] = tempfile.mkdtemp(prefix="crabops-ledger-")

from crabops.storage.base import LedgerError, parse_a1_range  # noqa: E402

EOD_HEADER_ROW = [
    "Date", "Time Closed", "Weather", "Condition", "Specials",
    "SM", "MD", "ML", "LG", "XL", "JUMBO", "SUPER",
    "REGF", "LGF", "XLF", "JUMBOF",
    "Bushels", "Ungraded Boxes", "Dozens Sold",
]


class FakeLedger:
    """In-memory ledger keyed by tab name."""

    def __init__(self, tabs: Optional[Dict[str, List[List[str]]]] = None, fail: bool = False):
        self.tabs: Dict[str, List[List[str]]] = tabs or {}
        self.fail = fail
        self.reads: List[str] = []
        self.appends: List[str] = []

    def get_values(self, sheet_range: str) -> List[List[str]]:
        self.reads.append(sheet_range)
        if self.fail:
            raise LedgerError("backend unavailable", sheet_range)
        a1 = parse_a1_range(sheet_range)
        last = a1.last_column + 1 if a1.last_column is not None else None
        return [list(row[a1.first_column:last]) for row in self.tabs.get(a1.tab, [])]

    def append_values(self, sheet_range: str, rows: Sequence[Sequence[object]]) -> int:
        self.appends.append(sheet_range)
        if self.fail:
            raise LedgerError("backend unavailable", sheet_range)
        tab = parse_a1_range(sheet_range).tab
        self.tabs.setdefault(tab, []).extend([str(v) for v in row] for row in rows)
        return len(rows)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def eod_header() -> List[str]:
    return list(EOD_HEADER_ROW)


@pytest.fixture
def eod_rows() -> List[List[str]]:
    """Header plus two EoD reports; the second one is the latest."""
    return [
        list(EOD_HEADER_ROW),
        [
            "01/05/2026", "18:00", "40", "Cloudy", "None",
            "1", "1", "1", "1", "1", "1", "1",
            "1", "1", "1", "1",
            "9", "9", "100",
        ],
        [
            "01/06/2026", "18:30", "38", "Sunny", "None",
            "10", "20", "", "5", "abc", "3.5", "",
            "12", "", "4", "0",
            "6", "2", "55",
        ],
    ]


@pytest.fixture
def make_ledger():
    """Factory for in-memory ledgers: make_ledger({"Tab": rows}, fail=False)."""
    return FakeLedger


@pytest.fixture
def fake_ledger(eod_rows) -> FakeLedger:
    return FakeLedger({"EoD_Data": eod_rows})


@pytest.fixture
def api_client(fake_ledger) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by the fake ledger."""
    from api.dependencies import get_ledger
    from api.main import app

    app.dependency_overrides[get_ledger] = lambda: fake_ledger
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
