"""Tests for the Google Sheets ledger, against a fake HTTP session."""

import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import AuthorizedSession
from requests.exceptions import ConnectionError as RequestsConnectionError

from crabops.services.stock_aggregator import get_stock_totals
from crabops.storage.base import LedgerError
from crabops.storage.sheets_client import SCOPE, GoogleSheetsLedger, build_credentials

CLIENT_EMAIL = "bot@example.iam.gserviceaccount.com"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)
        self.content = self.text.encode("utf-8")

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records calls; replies from a queue of responses."""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture(scope="module")
def private_key() -> str:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture
def make_sheets(private_key):
    def _make(session=None) -> GoogleSheetsLedger:
        return GoogleSheetsLedger("sheet-123", CLIENT_EMAIL, private_key, session=session)
    return _make


class TestConfiguration:

    def test_requires_spreadsheet_id(self):
        with pytest.raises(LedgerError):
            GoogleSheetsLedger("", "bot@example.com", "key")

    def test_requires_credentials(self):
        with pytest.raises(LedgerError):
            GoogleSheetsLedger("sheet-123", "bot@example.com", "")

    def test_bad_key_is_ledger_error(self):
        with pytest.raises(LedgerError):
            GoogleSheetsLedger("sheet-123", "bot@example.com", "not a key", session=FakeSession())


class TestCredentials:

    def test_scoped_service_account(self, private_key):
        credentials = build_credentials(CLIENT_EMAIL, private_key)

        assert credentials.service_account_email == CLIENT_EMAIL
        assert credentials.scopes == [SCOPE]

    def test_unescapes_private_key_newlines(self, private_key):
        escaped = private_key.replace("\n", "\\n")

        credentials = build_credentials(CLIENT_EMAIL, escaped)

        assert credentials.service_account_email == CLIENT_EMAIL

    def test_default_session_is_authorized(self, make_sheets):
        ledger = make_sheets()

        assert isinstance(ledger.session, AuthorizedSession)
        assert ledger.session.credentials is ledger.credentials


class TestValues:

    def test_get_values(self, make_sheets):
        session = FakeSession([FakeResponse(payload={"values": [["Date", "SM"], ["01/06/2026", 5]]})])

        rows = make_sheets(session).get_values("EoD_Data!A:R")

        assert rows == [["Date", "SM"], ["01/06/2026", "5"]]
        method, url, kwargs = session.calls[0]
        assert method == "GET"
        assert url.endswith("/sheet-123/values/EoD_Data%21A%3AR")
        assert kwargs["timeout"] == 15

    def test_empty_range_has_no_values_key(self, make_sheets):
        session = FakeSession([FakeResponse(payload={"range": "EoD_Data!A1:R1"})])
        assert make_sheets(session).get_values("EoD_Data!A:R") == []

    def test_append_values(self, make_sheets):
        session = FakeSession([FakeResponse(payload={"updates": {"updatedRows": 2}})])

        written = make_sheets(session).append_values("Invoices!A1", [["01/07/2026", "Dock"], ["01/07/2026", "Wholesaler"]])

        assert written == 2
        method, url, kwargs = session.calls[0]
        assert method == "POST"
        assert url.endswith("/values/Invoices%21A1:append")
        assert kwargs["params"] == {"valueInputOption": "USER_ENTERED"}
        assert kwargs["json"] == {"values": [["01/07/2026", "Dock"], ["01/07/2026", "Wholesaler"]]}

    def test_api_error(self, make_sheets):
        session = FakeSession([FakeResponse(403, payload={"error": {"message": "The caller does not have permission"}})])

        with pytest.raises(LedgerError) as exc:
            make_sheets(session).get_values("EoD_Data!A:R")

        assert "403" in exc.value.message
        assert "permission" in exc.value.message

    def test_network_error(self, make_sheets):
        session = FakeSession(error=RequestsConnectionError("connection refused"))

        with pytest.raises(LedgerError):
            make_sheets(session).get_values("EoD_Data!A:R")

    def test_token_refresh_failure(self, make_sheets):
        session = FakeSession(error=RefreshError("invalid_grant: Invalid JWT Signature."))

        with pytest.raises(LedgerError) as exc:
            make_sheets(session).get_values("EoD_Data!A:R")

        assert exc.value.sheet_range == "EoD_Data!A:R"
        assert "authorization" in exc.value.message

    def test_invalid_json(self, make_sheets):
        session = FakeSession([FakeResponse(200, payload=None, text="<html>")])

        with pytest.raises(LedgerError):
            make_sheets(session).get_values("EoD_Data!A:R")

    def test_failed_read_means_no_stock(self, make_sheets):
        session = FakeSession([FakeResponse(500, payload=None, text="backend error")])
        assert get_stock_totals(make_sheets(session)) is None
