"""
Base service class for the Advent Of Code leaderboard bot.

Provides lazy creation and cleanup of the shared aiohttp client session
used by HTTP-backed services.
"""

import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)

class BaseService:
    """Base class for services talking to an external HTTP API."""

    def __init__(self, timeout_seconds: float):
        """
        Initialize base service.

        Args:
            timeout_seconds: Total timeout applied to every request
        """
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: Optional[aiohttp.ClientSession] = None

    def get_session(self) -> aiohttp.ClientSession:
        """Return the shared client session, creating it on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the client session if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug(f"{type(self).__name__}: HTTP session closed")
        self._session = None
