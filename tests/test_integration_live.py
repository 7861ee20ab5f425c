"""Integration tests against the live Leaderbird API."""

import os

import pytest

from leaderbird import ApiFailure, Success, parse_error_response
from leaderbird.client.rest import LeaderbirdClient

# Leaderboard used for score round trips
LEADERBOARD_ID = os.getenv("LEADERBIRD_TEST_LEADERBOARD_ID")


@pytest.mark.integration
@pytest.mark.live
@pytest.mark.credentials
@pytest.mark.asyncio
class TestLiveApi:
    """Integration tests with real credentials."""

    async def test_ping(self, live_client: LeaderbirdClient):
        result = await live_client.ping()

        assert isinstance(result, Success)

    async def test_platforms(self, live_client: LeaderbirdClient):
        result = await live_client.get_platforms()

        assert isinstance(result, Success)

    async def test_register_and_fetch_player(self, live_client: LeaderbirdClient):
        registered = await live_client.register_anonymous_player()
        assert isinstance(registered, Success)

        player_id = registered.value.get("id")
        assert player_id is not None

        fetched = await live_client.get_player(player_id)
        assert isinstance(fetched, Success)

    async def test_submit_and_list_scores(self, live_client: LeaderbirdClient):
        if not LEADERBOARD_ID:
            pytest.skip("LEADERBIRD_TEST_LEADERBOARD_ID not set")

        player = (await live_client.register_anonymous_player()).unwrap()
        platforms = (await live_client.get_platforms()).unwrap()
        platform_id = platforms[0]["id"] if platforms else None

        submitted = await live_client.submit_score(
            LEADERBOARD_ID, player["id"], platform_id, 1000
        )
        assert isinstance(submitted, Success)

        scores = await live_client.get_scores(LEADERBOARD_ID, 10, "alltime")
        assert isinstance(scores, Success)

    async def test_bad_signature_is_api_failure(self, skip_if_no_credentials):
        async with LeaderbirdClient.from_env(private_key="wrong-key") as client:
            result = await client.ping()

        assert isinstance(result, ApiFailure)
        assert result.status >= 400
        assert parse_error_response(result.response) is not None
