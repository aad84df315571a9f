"""Tests for the check-in submission pipeline."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from common.utils.exceptions import GeocodeException, InvalidInputException
from fieldcheck.pipelines.checkin import submit_checkin_pipeline
from fieldcheck.types import CheckInType, OutcomeStatus, PlaceInfo


class TestSubmitCheckinPipeline:
    @pytest.mark.asyncio
    async def test_enriches_builds_and_submits(self, mock_services, sample_user, sample_position, sample_place):
        enricher = mock_services["place_enricher"]
        checkin_service = mock_services["checkin_service"]

        outcome = await submit_checkin_pipeline(
            enricher, checkin_service, sample_user, sample_position, CheckInType.IN
        )

        assert outcome.status == OutcomeStatus.SUCCESS
        enricher.enrich.assert_awaited_once_with(sample_position)
        checkin_service.build_event.assert_called_once_with(
            CheckInType.IN, sample_user, sample_position, sample_place
        )
        checkin_service.submit.assert_awaited_once_with(checkin_service.build_event.return_value)

    @pytest.mark.asyncio
    async def test_unknown_place_still_submits(self, mock_services, sample_user, sample_position):
        mock_services["place_enricher"].enrich = AsyncMock(return_value=PlaceInfo())

        outcome = await submit_checkin_pipeline(
            mock_services["place_enricher"], mock_services["checkin_service"],
            sample_user, sample_position, CheckInType.OUT,
        )

        assert outcome.status == OutcomeStatus.SUCCESS
        place = mock_services["checkin_service"].build_event.call_args[0][3]
        assert place == PlaceInfo(place_name="Unknown Place", compound_code="Unknown Code")

    @pytest.mark.asyncio
    async def test_geocode_abort_fails_without_submitting(self, mock_services, sample_user, sample_position):
        mock_services["place_enricher"].enrich = AsyncMock(side_effect=GeocodeException())

        outcome = await submit_checkin_pipeline(
            mock_services["place_enricher"], mock_services["checkin_service"],
            sample_user, sample_position, CheckInType.IN,
        )

        assert outcome.status == OutcomeStatus.SUBMISSION_FAILED
        mock_services["checkin_service"].submit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_position_is_location_unavailable(self, mock_services, sample_user):
        outcome = await submit_checkin_pipeline(
            mock_services["place_enricher"], mock_services["checkin_service"],
            sample_user, None, CheckInType.IN,
        )

        assert outcome.status == OutcomeStatus.LOCATION_UNAVAILABLE
        mock_services["place_enricher"].enrich.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unbuildable_event_is_location_unavailable(self, mock_services, sample_user, sample_position):
        checkin_service = MagicMock()
        checkin_service.build_event = MagicMock(side_effect=InvalidInputException())
        checkin_service.submit = AsyncMock()

        outcome = await submit_checkin_pipeline(
            mock_services["place_enricher"], checkin_service,
            sample_user, sample_position, CheckInType.IN,
        )

        assert outcome.status == OutcomeStatus.LOCATION_UNAVAILABLE
        checkin_service.submit.assert_not_awaited()
