"""
Google Sheets Ledger

Talks to the Sheets v4 REST API with a service account. Credentials come from
google-auth; the authorized session fetches and refreshes the access token
on its own.
"""

import logging
from typing import Optional, Sequence
from urllib.parse import quote

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account
from requests.exceptions import RequestException

from crabops.storage.base import LedgerError, Rows

logger = logging.getLogger(__name__)

SHEETS_API = "https://sheets.googleapis.com/v4/spreadsheets"
TOKEN_URL = "https://oauth2.googleapis.com/token"
SCOPE = "https://www.googleapis.com/auth/spreadsheets"


def build_credentials(client_email: str, private_key: str) -> service_account.Credentials:
    """Service account credentials scoped to the Sheets API."""
    info = {
        "type": "service_account",
        "client_email": client_email,
        # Keys pasted into env vars usually carry literal "\n" sequences
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URL,
    }
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=[SCOPE])
    except (ValueError, KeyError) as e:
        raise LedgerError(f"Invalid service account credentials: {e}")


class GoogleSheetsLedger:
    """
    Ledger backed by one Google spreadsheet.

    Usage:
        ledger = GoogleSheetsLedger(sheet_id, client_email, private_key)
        rows = ledger.get_values("EoD_Data!A:R")
        ledger.append_values("Invoices!A1", [["01/02/2026", "Dock", ...]])
    """

    def __init__(
        self,
        spreadsheet_id: str,
        client_email: str,
        private_key: str,
        timeout: int = 15,
        session: Optional[requests.Session] = None,
    ):
        if not spreadsheet_id:
            raise LedgerError("Spreadsheet ID is not configured")
        if not client_email or not private_key:
            raise LedgerError("Service account credentials are not configured")

        self.spreadsheet_id = spreadsheet_id
        self.client_email = client_email
        self.timeout = timeout
        self.credentials = build_credentials(client_email, private_key)
        self.session = session or AuthorizedSession(self.credentials)

    def _values_url(self, sheet_range: str, suffix: str = "") -> str:
        return f"{SHEETS_API}/{self.spreadsheet_id}/values/{quote(sheet_range, safe='')}{suffix}"

    def _request(self, method: str, url: str, sheet_range: str, **kwargs) -> dict:
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except GoogleAuthError as e:
            raise LedgerError(f"Service account authorization failed: {e}", sheet_range)
        except RequestException as e:
            raise LedgerError(f"Sheets request failed: {e}", sheet_range)

        if response.status_code >= 400:
            try:
                message = response.json().get("error", {}).get("message", response.text)
            except ValueError:
                message = response.text
            raise LedgerError(
                f"Sheets API error {response.status_code} for {sheet_range}: {message}",
                sheet_range,
            )

        try:
            return response.json() if response.content else {}
        except ValueError:
            raise LedgerError(f"Sheets API returned invalid JSON for {sheet_range}", sheet_range)

    def get_values(self, sheet_range: str) -> Rows:
        data = self._request("GET", self._values_url(sheet_range), sheet_range)
        values = data.get("values", [])
        logger.info(f"Read {len(values)} rows from {sheet_range}")
        return [[str(cell) for cell in row] for row in values]

    def append_values(self, sheet_range: str, rows: Sequence[Sequence[object]]) -> int:
        body = {"values": [list(row) for row in rows]}
        data = self._request(
            "POST",
            self._values_url(sheet_range, ":append"),
            sheet_range,
            params={"valueInputOption": "USER_ENTERED"},
            json=body,
        )
        written = data.get("updates", {}).get("updatedRows", len(body["values"]))
        logger.info(f"Appended {written} rows to {sheet_range}")
        return written
