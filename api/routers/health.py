"""Health check endpoints."""

import os
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings
from api.dependencies import get_staff_directory
from crabops.services.staff_auth import StaffDirectoryError

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic liveness check.

    Returns 200 if the service is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }


@router.get("/health/ready")
async def readiness_check(
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """
    Readiness check - verifies dependencies are configured.

    Checks:
    - Ledger backend (Sheets credentials or local directory)
    - Session signing secret (required outside debug)
    - Staff directory (STAFF_JSON parses)
    """
    checks: Dict[str, Dict[str, Any]] = {}

    # Ledger
    if settings.ledger_backend == "local":
        if os.path.isdir(settings.local_ledger_dir):
            checks["ledger"] = {"status": "ok", "backend": "local"}
        else:
            checks["ledger"] = {
                "status": "error",
                "backend": "local",
                "message": f"Missing directory: {settings.local_ledger_dir}",
            }
    elif settings.sheets_configured:
        checks["ledger"] = {"status": "configured", "backend": "sheets"}
    else:
        checks["ledger"] = {"status": "not_configured", "backend": settings.ledger_backend}

    # Session signing
    if settings.session_secret_configured:
        checks["sessions"] = {"status": "configured"}
    elif settings.debug:
        checks["sessions"] = {"status": "ok", "message": "Using a per-process debug secret"}
    else:
        checks["sessions"] = {"status": "not_configured", "message": "SESSION_SECRET is not set"}

    # Staff directory
    try:
        staff = get_staff_directory()
        checks["staff"] = {"status": "configured" if staff.is_configured else "not_configured"}
    except StaffDirectoryError as e:
        checks["staff"] = {"status": "error", "message": str(e)}

    all_ok = all(c.get("status") in ("ok", "configured") for c in checks.values())

    return {
        "status": "ready" if all_ok else "degraded",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "version": settings.app_version,
        "checks": checks
    }


@router.get("/health/info")
async def service_info(
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """Return service information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": "development" if settings.debug else "production",
        "timezone": settings.business_timezone,
    }
