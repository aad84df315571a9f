"""
Reverse geocoding client and place enrichment.

Turns a coordinate pair into a place name and a plus-code compound code
using the Google Geocoding API.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from common.location import Position
from common.utils.exceptions import GeocodeException
from config.checkin_config import GEOCODE_OK_STATUSES, GEOCODE_URL, UNKNOWN_CODE, UNKNOWN_PLACE
from fieldcheck.schemas.geocode import GeocodeResponse
from fieldcheck.types import PlaceInfo

logger = logging.getLogger(__name__)


class GeocodeService:
    """
    Google reverse geocoding client.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: str = GEOCODE_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize GeocodeService.

        Args:
            api_key: Google Maps API key
            url: Reverse geocoding endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests, mock backend)
        """
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._transport = transport

        if not api_key:
            logger.warning("GOOGLE_MAPS_API_KEY not set; reverse geocoding may be denied")

    async def reverse_geocode(self, latitude: float, longitude: float) -> PlaceInfo:
        """
        Look up the place for a coordinate pair.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            PlaceInfo from the first result, Unknown defaults when there is none

        Raises:
            GeocodeException: Transport failure, non-2xx or API error status
        """
        params = {"latlng": f"{latitude},{longitude}"}
        if self._api_key:
            params["key"] = self._api_key

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout
            ) as client:
                response = await client.get(self._url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Geocode request failed: {e}")
            raise GeocodeException(details=str(e))

        if not response.is_success:
            logger.error(f"Geocode lookup failed: {response.status_code} {response.text[:200]}")
            raise GeocodeException(details={"statusCode": response.status_code})

        try:
            data = GeocodeResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise GeocodeException(message="Unreadable geocode response", details=str(e))

        if data.status is not None and data.status not in GEOCODE_OK_STATUSES:
            logger.error(f"Geocode API error {data.status}: {data.error_message}")
            raise GeocodeException(
                message=data.error_message or f"Geocode API returned {data.status}",
                details={"status": data.status}
            )

        if not data.results:
            return PlaceInfo()

        first = data.results[0]
        compound_code = first.plus_code.compound_code if first.plus_code else None

        return PlaceInfo(
            place_name=first.formatted_address or UNKNOWN_PLACE,
            compound_code=compound_code or UNKNOWN_CODE,
        )


class PlaceEnricher:
    """
    Best-effort place lookup for a submission.

    With the "degrade" policy a failed lookup yields the Unknown defaults;
    with "abort" the GeocodeException propagates.
    """

    POLICIES = ("degrade", "abort")

    def __init__(self, geocode_service: GeocodeService, failure_policy: str = "degrade"):
        if failure_policy not in self.POLICIES:
            raise ValueError(f"Unknown geocode failure policy: {failure_policy}")
        self._geocode_service = geocode_service
        self._failure_policy = failure_policy

    async def enrich(self, position: Position) -> PlaceInfo:
        try:
            return await self._geocode_service.reverse_geocode(
                position.latitude,
                position.longitude
            )
        except GeocodeException as e:
            if self._failure_policy == "abort":
                raise
            logger.warning(f"Geocoding unavailable, using defaults: {e.message}")
            return PlaceInfo()
