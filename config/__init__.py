"""
Configuration module - App-specific constants.
"""

from config.checkin_config import (
    CHECKIN_TIMEZONE,
    GEOCODE_URL,
    MESSAGES,
    UNKNOWN_CODE,
    UNKNOWN_PLACE,
)

__all__ = ["CHECKIN_TIMEZONE", "GEOCODE_URL", "MESSAGES", "UNKNOWN_CODE", "UNKNOWN_PLACE"]
