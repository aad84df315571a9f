"""
Utilities module - Common helpers for exceptions and input validation.
"""

from common.utils.exceptions import (
    AppException,
    InvalidInputException,
    AuthFailedException,
    NetworkException,
    UnsupportedEnvironmentException,
    PermissionDeniedException,
    LocationFetchException,
    GeocodeException,
)
from common.utils.validators import is_valid_email

__all__ = [
    "AppException",
    "InvalidInputException",
    "AuthFailedException",
    "NetworkException",
    "UnsupportedEnvironmentException",
    "PermissionDeniedException",
    "LocationFetchException",
    "GeocodeException",
    "is_valid_email",
]
