"""
API Dependencies

Dependency injection for the ledger, staff directory and clock-in policy.
Tests swap these out through app.dependency_overrides.
"""

import logging
from functools import lru_cache

from api.config import get_settings
from api.middleware.errors import ConfigurationError
from crabops.models.schedule import ScheduleConfig
from crabops.services.staff_auth import StaffDirectory
from crabops.storage import GoogleSheetsLedger, LedgerBackend, LedgerError, LocalLedger

logger = logging.getLogger(__name__)


@lru_cache()
def _build_ledger() -> LedgerBackend:
    settings = get_settings()

    if settings.ledger_backend == "local":
        logger.info(f"Using local ledger at {settings.local_ledger_dir}")
        return LocalLedger(base_dir=settings.local_ledger_dir)

    if settings.ledger_backend != "sheets":
        raise ConfigurationError(f"Unknown ledger backend: {settings.ledger_backend}")

    try:
        return GoogleSheetsLedger(
            spreadsheet_id=settings.google_sheet_id or "",
            client_email=settings.google_service_account_email or "",
            private_key=settings.google_private_key or "",
            timeout=settings.sheets_timeout_seconds,
        )
    except LedgerError as e:
        raise ConfigurationError(
            e.message,
            details={"hint": "Set GOOGLE_SHEET_ID, GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY"},
        )


def get_ledger() -> LedgerBackend:
    """Get the singleton ledger backend."""
    return _build_ledger()


@lru_cache()
def get_staff_directory() -> StaffDirectory:
    """Get the staff directory parsed from STAFF_JSON."""
    return StaffDirectory.from_json(get_settings().staff_json)


def get_schedule_config() -> ScheduleConfig:
    """Get the clock-in policy with env overrides applied."""
    return get_settings().schedule_config()
