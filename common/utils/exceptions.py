"""
Client exceptions with error codes.

Every failure raised by a service carries a human-readable message and a
machine-readable code, so the session layer can turn it into a single
user-facing notification.

Example:
    from common.utils import PermissionDeniedException

    async def acquire(provider):
        if not await provider.request_permission():
            raise PermissionDeniedException()
"""

from typing import Optional, Any


class AppException(Exception):
    """
    Base exception with error code support.

    Provides a consistent error shape across the services.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        """
        Create an application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class InvalidInputException(AppException):
    """Input rejected locally before any network call."""

    def __init__(
        self,
        message: str = "Invalid input",
        code: str = "INVALID_INPUT",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class AuthFailedException(AppException):
    """Credentials rejected by the login server."""

    def __init__(
        self,
        message: str = "Login failed",
        code: str = "AUTH_FAILED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class NetworkException(AppException):
    """Transport failure or unreadable response from a remote service."""

    def __init__(
        self,
        message: str = "Network error",
        code: str = "NETWORK_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class UnsupportedEnvironmentException(AppException):
    """The device cannot provide a real GPS position."""

    def __init__(
        self,
        message: str = "Location is not supported in this environment",
        code: str = "UNSUPPORTED_ENVIRONMENT",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class PermissionDeniedException(AppException):
    """The user did not grant location permission."""

    def __init__(
        self,
        message: str = "Permission to access location was denied",
        code: str = "PERMISSION_DENIED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class LocationFetchException(AppException):
    """Position fetch timed out or the sensor failed."""

    def __init__(
        self,
        message: str = "Failed to fetch location",
        code: str = "LOCATION_FETCH_FAILED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class GeocodeException(AppException):
    """Reverse geocoding lookup failed."""

    def __init__(
        self,
        message: str = "Reverse geocoding failed",
        code: str = "GEOCODE_FAILED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)
