"""UI Configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class UISettings(BaseSettings):
    """Dashboard settings loaded from UI_* environment variables."""

    # CrabOps API
    api_base_url: str = "http://localhost:8000"
    request_timeout: int = 30

    # Shown as the browser title and sidebar heading
    shop_name: str = "CrabOps"

    # Report times are shown in shop time, not the server's
    business_timezone: str = "America/New_York"

    # Staff on small tablets can turn the breakdown chart off
    show_stock_chart: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "UI_"


@lru_cache()
def get_settings() -> UISettings:
    """Get cached settings instance."""
    return UISettings()
