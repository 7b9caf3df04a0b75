"""Ledger storage layer."""

from crabops.storage.base import A1Range, LedgerBackend, LedgerError, parse_a1_range
from crabops.storage.local_ledger import LocalLedger
from crabops.storage.sheets_client import GoogleSheetsLedger

__all__ = [
    "LedgerBackend",
    "LedgerError",
    "A1Range",
    "parse_a1_range",
    "GoogleSheetsLedger",
    "LocalLedger",
]
