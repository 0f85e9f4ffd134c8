"""
Advent of Code API client.

Fetches private leaderboards from adventofcode.com. The API is only
available to authenticated users, so every request carries the session
cookie of the leaderboard owner.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from aoc_bot.config import Config
from aoc_bot.data_models.advent_of_code import LeaderboardResponse
from aoc_bot.services.base import BaseService
from aoc_bot.utils.advent_exceptions import LeaderboardFetchError
from aoc_bot.utils.embeds import leaderboard_url

logger = logging.getLogger(__name__)

class AdventOfCodeService(BaseService):
    """Client for the private leaderboard JSON endpoint."""

    _instance: Optional["AdventOfCodeService"] = None

    def __init__(self, session_token: Optional[str] = None, timeout_seconds: Optional[float] = None):
        super().__init__(timeout_seconds or Config.ADVENT_OF_CODE_TIMEOUT)
        self.session_token = session_token if session_token is not None else Config.ADVENT_OF_CODE_TOKEN

    @classmethod
    def get_instance(cls) -> "AdventOfCodeService":
        """Return the process-wide service instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def get_api_url(leaderboard_id: str, year: int) -> str:
        """JSON endpoint of a private leaderboard."""
        return f"{leaderboard_url(year, leaderboard_id)}.json"

    async def get_leaderboard(self, leaderboard_id: str, year: int) -> LeaderboardResponse:
        """
        Fetch a private leaderboard.

        Args:
            leaderboard_id: Id of the private leaderboard (the owner's member id)
            year: Advent of Code edition

        Returns:
            Parsed leaderboard

        Raises:
            LeaderboardFetchError: On any HTTP, transport or payload error
        """
        url = self.get_api_url(leaderboard_id, year)
        logger.debug(f"Fetching Advent of Code leaderboard {leaderboard_id} for {year}")

        try:
            async with self.get_session().get(
                url,
                cookies={"session": self.session_token or ""},
                allow_redirects=False
            ) as response:
                # An expired session cookie redirects to the login page
                if response.status != 200:
                    raise LeaderboardFetchError(year, f"HTTP {response.status}")
                payload = await response.json(content_type=None)
        except LeaderboardFetchError as e:
            logger.warning(str(e))
            raise
        except asyncio.TimeoutError:
            logger.warning(f"Timed out fetching Advent of Code leaderboard for {year}")
            raise LeaderboardFetchError(year, "request timed out")
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Error fetching Advent of Code leaderboard for {year}: {e}")
            raise LeaderboardFetchError(year, str(e)) from e

        try:
            return LeaderboardResponse.from_json(payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Unexpected Advent of Code leaderboard payload for {year}: {e}")
            raise LeaderboardFetchError(year, str(e)) from e
