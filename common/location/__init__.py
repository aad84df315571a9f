"""
Location module - Pluggable device location providers.
"""

from common.location.base import LocationProvider, Position
from common.location.static import StaticLocationProvider

__all__ = ["LocationProvider", "Position", "StaticLocationProvider"]
