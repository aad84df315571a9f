"""Unit tests for LocationService and the static provider."""

import asyncio

import pytest

from common.location import Position, StaticLocationProvider
from common.utils.exceptions import (
    LocationFetchException,
    PermissionDeniedException,
    UnsupportedEnvironmentException,
)
from fieldcheck.services.location.location_service import LocationService
from tests.conftest import FakeLocationProvider


class TestAcquire:
    @pytest.mark.asyncio
    async def test_returns_position(self, sample_position):
        provider = FakeLocationProvider(position=sample_position)

        position = await LocationService(provider).acquire()

        assert position == sample_position
        assert provider.permission_requests == 1
        assert provider.fetches == 1

    @pytest.mark.asyncio
    async def test_unsupported_environment_stops_before_permission(self, sample_position):
        provider = FakeLocationProvider(position=sample_position, supports=False)

        with pytest.raises(UnsupportedEnvironmentException):
            await LocationService(provider).acquire()

        assert provider.permission_requests == 0
        assert provider.fetches == 0

    @pytest.mark.asyncio
    async def test_permission_denied_stops_before_fetch(self, sample_position):
        provider = FakeLocationProvider(position=sample_position, granted=False)

        with pytest.raises(PermissionDeniedException) as exc_info:
            await LocationService(provider).acquire()

        assert exc_info.value.message == "Permission to access location was denied"
        assert provider.fetches == 0

    @pytest.mark.asyncio
    async def test_sensor_error_becomes_fetch_failure(self):
        provider = FakeLocationProvider(error=RuntimeError("sensor offline"))

        with pytest.raises(LocationFetchException) as exc_info:
            await LocationService(provider).acquire()

        assert exc_info.value.details == "sensor offline"

    @pytest.mark.asyncio
    async def test_timeout_becomes_fetch_failure(self, sample_position):
        provider = FakeLocationProvider(position=sample_position, gate=asyncio.Event())

        with pytest.raises(LocationFetchException) as exc_info:
            await LocationService(provider, timeout=0.01).acquire()

        assert exc_info.value.details == {"timeout": 0.01}

    @pytest.mark.asyncio
    async def test_out_of_range_coordinates_rejected(self):
        provider = FakeLocationProvider(position=Position(latitude=95.0, longitude=35.0))

        with pytest.raises(LocationFetchException):
            await LocationService(provider).acquire()


class TestStaticLocationProvider:
    @pytest.mark.asyncio
    async def test_reports_configured_position(self):
        provider = StaticLocationProvider(latitude=-15.78, longitude=35.0, accuracy=5.0)

        position = await provider.get_current_position()

        assert provider.supports_gps() is True
        assert (position.latitude, position.longitude, position.accuracy) == (-15.78, 35.0, 5.0)
        assert position.timestamp is not None

    @pytest.mark.asyncio
    async def test_without_coordinates_is_unsupported(self):
        provider = StaticLocationProvider(latitude=None, longitude=None)

        with pytest.raises(UnsupportedEnvironmentException):
            await LocationService(provider).acquire()

    @pytest.mark.asyncio
    async def test_permission_answer_is_configurable(self):
        provider = StaticLocationProvider(latitude=-15.78, longitude=35.0, permission_granted=False)

        with pytest.raises(PermissionDeniedException):
            await LocationService(provider).acquire()
