"""
API Configuration

All secrets loaded from environment variables.
NEVER hardcode service account keys, PIN hashes, or session secrets.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from crabops.models.schedule import ScheduleConfig


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "CrabOps API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: str = "http://localhost:8501,http://localhost:3000"

    # Ledger
    ledger_backend: str = "sheets"  # "sheets" or "local"
    google_sheet_id: Optional[str] = None  # Loaded from GOOGLE_SHEET_ID env var
    google_service_account_email: Optional[str] = None
    google_private_key: Optional[str] = None  # Escaped "\n" sequences are fine
    sheets_timeout_seconds: int = 15
    local_ledger_dir: str = "./data/ledger"
    eod_range: str = "EoD_Data!A:R"

    # Staff sessions
    staff_json: str = ""  # {"Name": "<bcrypt hash>", ...}
    session_secret: str = ""  # Required outside debug; sessions are refused without it
    session_cookie_name: str = "session"
    session_max_age_hours: int = 24
    session_cookie_secure: Optional[bool] = None  # Defaults to "not debug"

    # Clock-in policy
    business_timezone: str = "America/New_York"
    volume_rate_minutes: float = 5.0
    volume_rate_units: float = 8.5
    ungraded_rate_minutes: float = 5.0
    weekday_latest_hour: int = 14
    weekend_latest_hour: int = 11
    rollover_hour: int = 17

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def sheets_configured(self) -> bool:
        return bool(
            self.google_sheet_id
            and self.google_service_account_email
            and self.google_private_key
        )

    @property
    def session_secret_configured(self) -> bool:
        return bool(self.session_secret)

    @property
    def cookie_secure(self) -> bool:
        if self.session_cookie_secure is None:
            return not self.debug
        return self.session_cookie_secure

    def schedule_config(self) -> ScheduleConfig:
        """Clock-in policy with any env overrides applied."""
        return ScheduleConfig(
            timezone=self.business_timezone,
            volume_rate_minutes=self.volume_rate_minutes,
            volume_rate_units=self.volume_rate_units,
            ungraded_rate_minutes=self.ungraded_rate_minutes,
            weekday_latest_hour=self.weekday_latest_hour,
            weekend_latest_hour=self.weekend_latest_hour,
            rollover_hour=self.rollover_hour,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
