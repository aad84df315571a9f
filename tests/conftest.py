"""Shared test fixtures for FieldCheck tests."""

import asyncio
import json
from datetime import datetime, timezone
from typing import Callable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from common.location import LocationProvider, Position
from fieldcheck.types import Outcome, OutcomeStatus, PlaceInfo, User


BASE_URL = "http://testserver"
GEOCODE_URL = f"{BASE_URL}/maps/api/geocode/json"


class FakeLocationProvider(LocationProvider):
    """Scriptable location provider."""

    def __init__(
        self,
        position: Optional[Position] = None,
        supports: bool = True,
        granted: bool = True,
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.position = position
        self.supports = supports
        self.granted = granted
        self.error = error
        self.gate = gate
        self.permission_requests = 0
        self.fetches = 0

    def supports_gps(self) -> bool:
        return self.supports

    async def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.granted

    async def get_current_position(self) -> Position:
        self.fetches += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.position


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response, error: Optional[Exception] = None):
        self.responses: List[httpx.Response] = list(responses)
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def sample_user():
    return User(name="Jo", email="a@b.com")


@pytest.fixture
def sample_position():
    return Position(
        latitude=-15.78,
        longitude=35.00,
        accuracy=12.0,
        timestamp=datetime(2024, 5, 1, 8, 29, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_place():
    return PlaceInfo(place_name="Blantyre CBD", compound_code="6XC2+2X Blantyre, Malawi")


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """2024-05-01 08:30:00 UTC, 10:30:00 in Blantyre."""
    return lambda: datetime(2024, 5, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def success_outcome():
    return Outcome(
        status=OutcomeStatus.SUCCESS,
        title="Success",
        message="Checked in successfully at Blantyre CBD",
        place_name="Blantyre CBD",
    )


@pytest.fixture
def mock_services(sample_user, sample_position, sample_place, success_outcome):
    """Controller collaborators as mocks, all succeeding."""
    login_service = MagicMock()
    login_service.login = AsyncMock(return_value=sample_user)

    location_service = MagicMock()
    location_service.acquire = AsyncMock(return_value=sample_position)

    place_enricher = MagicMock()
    place_enricher.enrich = AsyncMock(return_value=sample_place)

    checkin_service = MagicMock()
    checkin_service.build_event = MagicMock(return_value=MagicMock(name="event"))
    checkin_service.submit = AsyncMock(return_value=success_outcome)

    return {
        "login_service": login_service,
        "location_service": location_service,
        "place_enricher": place_enricher,
        "checkin_service": checkin_service,
    }
