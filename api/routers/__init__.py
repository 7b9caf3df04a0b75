"""API Routers"""

from api.routers import auth, dashboard, health, reports

__all__ = ["auth", "dashboard", "health", "reports"]
