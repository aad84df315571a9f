"""
FieldCheck Services.

All service classes organized by feature.
"""

# Auth services
from fieldcheck.services.auth.login_service import LoginService

# Location services
from fieldcheck.services.location.location_service import LocationService

# Geocode services
from fieldcheck.services.geocode.geocode_service import GeocodeService, PlaceEnricher

# Check-in services
from fieldcheck.services.checkin.checkin_service import CheckInService

__all__ = [
    "LoginService",
    "LocationService",
    "GeocodeService",
    "PlaceEnricher",
    "CheckInService",
]
