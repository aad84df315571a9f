"""
Service wiring for FieldCheck.

Builds every service and the session controller once per process.
"""

from typing import Optional

import httpx

from common.location import LocationProvider, StaticLocationProvider
from fieldcheck.config import Settings, settings as default_settings
from fieldcheck.services.auth.login_service import LoginService
from fieldcheck.services.checkin.checkin_service import CheckInService
from fieldcheck.services.geocode.geocode_service import GeocodeService, PlaceEnricher
from fieldcheck.services.location.location_service import LocationService
from fieldcheck.session.controller import SessionController


# ─────────────────────────────────────────────────────────────────
# Service instances
# ─────────────────────────────────────────────────────────────────

_login_service: Optional[LoginService] = None
_location_service: Optional[LocationService] = None
_geocode_service: Optional[GeocodeService] = None
_place_enricher: Optional[PlaceEnricher] = None
_checkin_service: Optional[CheckInService] = None
_session_controller: Optional[SessionController] = None


def init_all_services(
    app_settings: Optional[Settings] = None,
    location_provider: Optional[LocationProvider] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> SessionController:
    """
    Initialize all services at application startup.

    Args:
        app_settings: Settings to use (default: module settings)
        location_provider: Device location source (default: static provider from settings)
        transport: Optional httpx transport shared by all HTTP clients

    Returns:
        The session controller
    """
    global _login_service, _location_service, _geocode_service
    global _place_enricher, _checkin_service, _session_controller

    app_settings = app_settings or default_settings
    app_settings.validate_required()

    if location_provider is None:
        location_provider = StaticLocationProvider(
            latitude=app_settings.STATIC_LATITUDE,
            longitude=app_settings.STATIC_LONGITUDE,
            accuracy=app_settings.STATIC_ACCURACY,
        )

    _login_service = LoginService(
        base_url=app_settings.API_BASE_URL,
        timeout=app_settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
    _location_service = LocationService(
        provider=location_provider,
        timeout=app_settings.LOCATION_TIMEOUT_SECONDS,
    )
    _geocode_service = GeocodeService(
        api_key=app_settings.GOOGLE_MAPS_API_KEY,
        url=app_settings.GEOCODE_URL,
        timeout=app_settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
    _place_enricher = PlaceEnricher(
        geocode_service=_geocode_service,
        failure_policy=app_settings.GEOCODE_FAILURE_POLICY,
    )
    _checkin_service = CheckInService(
        base_url=app_settings.API_BASE_URL,
        timezone_name=app_settings.CHECKIN_TIMEZONE,
        timeout=app_settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
    _session_controller = SessionController(
        login_service=_login_service,
        location_service=_location_service,
        place_enricher=_place_enricher,
        checkin_service=_checkin_service,
    )
    return _session_controller


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_session_controller() -> SessionController:
    """Get the session controller instance."""
    if _session_controller is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _session_controller
