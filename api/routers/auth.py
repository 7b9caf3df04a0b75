"""
Authentication API Endpoints

PIN login for shop staff.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from api.config import Settings, get_settings
from api.dependencies import get_staff_directory
from api.middleware.auth import create_session_token, require_session
from api.middleware.errors import AuthenticationError
from crabops.services.staff_auth import StaffDirectory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class PinLoginRequest(BaseModel):
    pin: str = Field(..., min_length=1, max_length=32)


class SessionInfo(BaseModel):
    staff_name: str


@router.post("/login", response_model=SessionInfo)
def login(
    request: PinLoginRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    staff: StaffDirectory = Depends(get_staff_directory),
):
    """Log in with a staff PIN and receive a session cookie."""
    staff_name = staff.authenticate(request.pin)
    if not staff_name:
        raise AuthenticationError("INVALID_PIN", "Incorrect PIN.")

    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(staff_name, settings),
        max_age=settings.session_max_age_hours * 3600,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )
    return SessionInfo(staff_name=staff_name)


@router.post("/logout")
def logout(
    response: Response,
    settings: Settings = Depends(get_settings),
):
    """Clear the session cookie."""
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=SessionInfo)
def me(staff_name: str = Depends(require_session)):
    """Who is logged in."""
    return SessionInfo(staff_name=staff_name)
