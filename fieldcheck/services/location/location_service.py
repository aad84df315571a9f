"""
Location acquisition service.

Runs the environment check, permission request and single position fetch
against a LocationProvider.
"""

import asyncio
import logging

from common.location import LocationProvider, Position
from common.utils.exceptions import (
    LocationFetchException,
    PermissionDeniedException,
    UnsupportedEnvironmentException,
)
from config.checkin_config import MESSAGES

logger = logging.getLogger(__name__)


class LocationService:
    """
    Acquires one position fix per call.
    Holds no position itself; the session layer owns the result.
    """

    DEFAULT_TIMEOUT_SECONDS = 15.0

    def __init__(
        self,
        provider: LocationProvider,
        timeout: float = DEFAULT_TIMEOUT_SECONDS
    ):
        """
        Initialize LocationService.

        Args:
            provider: Device location source
            timeout: Seconds to wait for a position fix
        """
        self._provider = provider
        self._timeout = timeout

    async def acquire(self) -> Position:
        """
        Acquire the current position.

        Returns:
            A valid Position

        Raises:
            UnsupportedEnvironmentException: No real GPS in this environment
            PermissionDeniedException: Location permission not granted
            LocationFetchException: Timeout, sensor error or invalid coordinates
        """
        if not self._provider.supports_gps():
            logger.warning("Location requested in an environment without GPS")
            raise UnsupportedEnvironmentException(
                message=MESSAGES["unsupported_environment"][1]
            )

        granted = await self._provider.request_permission()
        if not granted:
            logger.warning("Location permission denied")
            raise PermissionDeniedException(message=MESSAGES["permission_denied"][1])

        try:
            position = await asyncio.wait_for(
                self._provider.get_current_position(),
                timeout=self._timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Position fetch timed out after {self._timeout}s")
            raise LocationFetchException(details={"timeout": self._timeout})
        except Exception as e:
            logger.error(f"Position fetch failed: {e}")
            raise LocationFetchException(details=str(e))

        if position is None or not position.is_valid():
            logger.error(f"Provider returned an invalid position: {position}")
            raise LocationFetchException(details="invalid coordinates")

        logger.info(f"Position acquired: {position.latitude},{position.longitude}")
        return position
