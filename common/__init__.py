"""
Common library for reusable client infrastructure components.

This package provides generic modules that can be used across
multiple projects:

- location: Pluggable device location providers
- utils: Exceptions and credential validation
- config: Base settings class
"""

from common.location import LocationProvider, Position, StaticLocationProvider
from common.utils import (
    AppException,
    InvalidInputException,
    AuthFailedException,
    NetworkException,
    UnsupportedEnvironmentException,
    PermissionDeniedException,
    LocationFetchException,
    GeocodeException,
    is_valid_email,
)
from common.config import BaseAppSettings

__all__ = [
    # Location
    "LocationProvider",
    "Position",
    "StaticLocationProvider",
    # Utils
    "AppException",
    "InvalidInputException",
    "AuthFailedException",
    "NetworkException",
    "UnsupportedEnvironmentException",
    "PermissionDeniedException",
    "LocationFetchException",
    "GeocodeException",
    "is_valid_email",
    # Config
    "BaseAppSettings",
]
