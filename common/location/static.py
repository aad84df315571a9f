"""
Fixed-position location provider.

Returns a configured coordinate pair. Used by the console driver and
for local development where no device sensor is available.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from common.location.base import LocationProvider, Position

logger = logging.getLogger(__name__)


class StaticLocationProvider(LocationProvider):
    """
    Location provider backed by a fixed coordinate pair.
    """

    def __init__(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        accuracy: Optional[float] = None,
        permission_granted: bool = True,
    ):
        """
        Initialize StaticLocationProvider.

        Args:
            latitude: Fixed latitude (None = no GPS available)
            longitude: Fixed longitude (None = no GPS available)
            accuracy: Reported accuracy in meters
            permission_granted: Answer returned by request_permission()
        """
        self._latitude = latitude
        self._longitude = longitude
        self._accuracy = accuracy
        self._permission_granted = permission_granted

    def supports_gps(self) -> bool:
        return self._latitude is not None and self._longitude is not None

    async def request_permission(self) -> bool:
        return self._permission_granted

    async def get_current_position(self) -> Position:
        if not self.supports_gps():
            raise RuntimeError("No fixed position configured")

        logger.debug(f"Static position {self._latitude},{self._longitude}")
        return Position(
            latitude=self._latitude,
            longitude=self._longitude,
            accuracy=self._accuracy,
            timestamp=datetime.now(timezone.utc),
        )
