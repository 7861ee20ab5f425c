"""Walk through the Leaderbird API with credentials from the environment."""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from leaderbird import ApiFailure, ApiResponse, Config, LeaderbirdClient, add_commas, parse_error_response
from leaderbird.utils.logger import logger


def show_error(response: ApiResponse) -> None:
    """Per-call error callback."""
    try:
        detail = parse_error_response(response)
    except ValueError:
        detail = response.body
    logger.warning(f"✗ {response.status}: {detail}")


async def main(leaderboard_id: str) -> None:
    if not Config.validate():
        logger.error("Set LEADERBIRD_PUBLIC_KEY and LEADERBIRD_PRIVATE_KEY first")
        return

    async with LeaderbirdClient.from_env() as client:
        logger.info("Pinging API...")
        (await client.ping()).unwrap()
        logger.info("✓ API reachable")

        player = (await client.register_player("example-player")).unwrap()
        logger.info(f"✓ Registered player {player}")

        platforms = (await client.get_platforms()).unwrap()
        platform_id = platforms[0]["id"] if platforms else None

        result = await client.submit_score(leaderboard_id, player["id"], platform_id, 1234567)
        if isinstance(result, ApiFailure):
            show_error(result.response)
        elif not result.ok:
            logger.error(f"✗ Score not submitted: {result.error!r}")

        scores = await client.get_scores(leaderboard_id, 10, "alltime")
        for rank, entry in enumerate(scores.unwrap(), start=1):
            logger.info(f"{rank:>3}. {entry.get('username', '?'):<20} {add_commas(entry.get('score', 0))}")

        # Callback style: fire and collect later
        task = client.dispatch(
            f"player/{player['id']}",
            "GET",
            on_success=lambda data: logger.info(f"✓ Player lookup: {data}"),
            on_error=show_error,
        )
        await task


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "1"))
