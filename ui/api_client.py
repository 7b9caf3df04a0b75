"""
API Client for the CrabOps Streamlit UI

Provides a clean interface to the FastAPI backend. Each browser session gets
its own client so the staff session cookie is never shared.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException, Timeout

from ui.config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    """Wrapper for API responses."""
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    status_code: int = 0


class CrabOpsClient:
    """
    Client for the CrabOps API.

    Usage:
        client = CrabOpsClient()

        # Log in
        result = client.login("1234")

        # Landing page data
        result = client.get_dashboard()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> APIResponse:
        """Make an API request."""
        url = f"{self.base_url}{endpoint}"

        # Set default timeout
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)

            if response.status_code >= 400:
                try:
                    error_data = response.json() if response.content else {}
                except ValueError:
                    error_data = {}
                error_msg = error_data.get("error", {}).get("message", response.text)
                return APIResponse(
                    success=False,
                    error=error_msg,
                    status_code=response.status_code,
                )

            data = response.json() if response.content else {}
            return APIResponse(
                success=True,
                data=data,
                status_code=response.status_code,
            )

        except Timeout:
            return APIResponse(
                success=False,
                error="Request timed out",
                status_code=0,
            )
        except RequestException as e:
            return APIResponse(
                success=False,
                error=f"Request failed: {str(e)}",
                status_code=0,
            )

    # Health endpoints

    def health_check(self) -> APIResponse:
        """Check if the API is healthy."""
        return self._request("GET", "/health")

    def ready_check(self) -> APIResponse:
        """Check if the API is ready (ledger and staff configured)."""
        return self._request("GET", "/health/ready")

    # Auth endpoints

    def login(self, pin: str) -> APIResponse:
        """Log in with a staff PIN; the session cookie is kept on this client."""
        return self._request("POST", "/api/v1/auth/login", json={"pin": pin})

    def logout(self) -> APIResponse:
        result = self._request("POST", "/api/v1/auth/logout")
        self.session.cookies.clear()
        return result

    def whoami(self) -> APIResponse:
        return self._request("GET", "/api/v1/auth/me")

    # Dashboard endpoints

    def get_dashboard(self, at: Optional[datetime] = None) -> APIResponse:
        """Latest stock and the clock-in estimate."""
        params = {"at": at.isoformat()} if at else None
        return self._request("GET", "/api/v1/dashboard", params=params)
