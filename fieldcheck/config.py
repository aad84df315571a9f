"""
FieldCheck application settings.

Extends the base settings with check-in client configuration.
"""

import logging
from typing import List, Optional

from common.config import BaseAppSettings
from config.checkin_config import CHECKIN_TIMEZONE, GEOCODE_URL


class Settings(BaseAppSettings):
    """FieldCheck-specific settings."""

    # ==========================================================================
    # Backend
    # ==========================================================================
    API_BASE_URL: str = "https://dot.mhubmw.tech"

    # ==========================================================================
    # Reverse Geocoding
    # ==========================================================================
    GEOCODE_URL: str = GEOCODE_URL
    GOOGLE_MAPS_API_KEY: Optional[str] = None

    # "degrade" falls back to Unknown Place/Code, "abort" fails the submission
    GEOCODE_FAILURE_POLICY: str = "degrade"

    # ==========================================================================
    # Check-in Settings
    # ==========================================================================
    CHECKIN_TIMEZONE: str = CHECKIN_TIMEZONE

    # ==========================================================================
    # Location Settings
    # ==========================================================================
    LOCATION_TIMEOUT_SECONDS: float = 15.0

    # Fixed position for the static provider (unset = no GPS)
    STATIC_LATITUDE: Optional[float] = None
    STATIC_LONGITUDE: Optional[float] = None
    STATIC_ACCURACY: Optional[float] = None

    def required_settings(self) -> List[str]:
        return ["API_BASE_URL", "GEOCODE_URL"]

    def validate_required(self) -> None:
        super().validate_required()
        if self.GEOCODE_FAILURE_POLICY not in ("degrade", "abort"):
            raise ValueError("GEOCODE_FAILURE_POLICY must be 'degrade' or 'abort'")


settings = Settings()


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """Apply the root logging configuration from settings."""
    app_settings = app_settings or settings
    logging.basicConfig(
        level=getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO),
        format=app_settings.LOG_FORMAT,
    )
