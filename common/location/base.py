"""
Abstract location provider interface.

Defines the contract that all device location sources must implement.
This allows swapping between a real device sensor, a fixed position
for development, or a fake in tests without changing application code.

Example:
    from common.location import LocationProvider, StaticLocationProvider

    def get_location_provider(settings) -> LocationProvider:
        return StaticLocationProvider(
            latitude=settings.STATIC_LATITUDE,
            longitude=settings.STATIC_LONGITUDE,
        )
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A single position fix."""
    latitude: float
    longitude: float
    accuracy: Optional[float] = None  # meters
    altitude: Optional[float] = None
    timestamp: Optional[datetime] = None

    def is_valid(self) -> bool:
        """Check that both coordinates are within their ranges."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class LocationProvider(ABC):
    """
    Abstract location provider.

    Implement this interface for each location source.
    Permission and fetch are async since they may suspend on the device.
    """

    @abstractmethod
    def supports_gps(self) -> bool:
        """
        Report whether this environment can produce a real position.

        Returns:
            False on emulators and other environments without GPS
        """
        pass

    @abstractmethod
    async def request_permission(self) -> bool:
        """
        Ask the user for foreground location permission.

        Returns:
            True if permission was granted
        """
        pass

    @abstractmethod
    async def get_current_position(self) -> Position:
        """
        Fetch a single position fix.

        Returns:
            The current Position

        Raises:
            Exception: Any sensor failure; callers wrap it
        """
        pass
