"""
Authentication Middleware

Staff session cookies for protected endpoints. A session is an HS256 token
carrying the staff name, issued after a successful PIN login.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, Request

from api.config import Settings, get_settings
from api.dependencies import get_staff_directory
from api.middleware.errors import AuthenticationError, ConfigurationError
from crabops.services.staff_auth import StaffDirectory

logger = logging.getLogger(__name__)

SESSION_ALGORITHM = "HS256"
DEBUG_STAFF_NAME = "debug"

# Debug servers without SESSION_SECRET sign with a throwaway per-process key
_DEBUG_SESSION_SECRET = secrets.token_urlsafe(32)


def session_signing_secret(settings: Settings) -> str:
    """
    Secret used to sign and verify session tokens.

    Raises ConfigurationError outside debug mode when SESSION_SECRET is unset.
    """
    if settings.session_secret:
        return settings.session_secret
    if settings.debug:
        return _DEBUG_SESSION_SECRET
    logger.error("SESSION_SECRET is not set; refusing to issue or accept sessions")
    raise ConfigurationError(
        "Staff sessions are not configured",
        details={"hint": "Set SESSION_SECRET"},
    )


def create_session_token(staff_name: str, settings: Settings) -> str:
    """Issue a session token for a staff member."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": staff_name,
        "iat": now,
        "exp": now + timedelta(hours=settings.session_max_age_hours),
    }
    return jwt.encode(payload, session_signing_secret(settings), algorithm=SESSION_ALGORITHM)


def decode_session_token(token: str, settings: Settings) -> str:
    """
    Return the staff name in a session token.

    Raises AuthenticationError if the token is expired or invalid.
    """
    try:
        payload = jwt.decode(token, session_signing_secret(settings), algorithms=[SESSION_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("SESSION_EXPIRED", "Session expired. Log in again.")
    except jwt.InvalidTokenError:
        raise AuthenticationError("INVALID_SESSION", "Invalid session. Log in again.")

    staff_name = payload.get("sub")
    if not staff_name:
        raise AuthenticationError("INVALID_SESSION", "Invalid session. Log in again.")
    return staff_name


async def require_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    staff: StaffDirectory = Depends(get_staff_directory),
) -> str:
    """
    Dependency returning the logged-in staff name.

    Raises AuthenticationError if there is no valid session cookie.
    """
    # Skip auth in debug mode if no staff configured
    if settings.debug and not staff.is_configured:
        return DEBUG_STAFF_NAME

    token: Optional[str] = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise AuthenticationError("AUTH_REQUIRED", "Login required. Enter your PIN.")

    staff_name = decode_session_token(token, settings)

    # Someone removed from STAFF_JSON loses access immediately
    if staff.is_configured and staff_name not in staff.names:
        logger.warning(f"Session for unknown staff member {staff_name!r}")
        raise AuthenticationError("INVALID_SESSION", "Invalid session. Log in again.")

    return staff_name
