"""
Centralized error embeds for consistent error handling across the bot.

Every error reply shares the same title and colour so users can recognise
a failed command at a glance.
"""

import discord

from aoc_bot.constants import UIConstants
from aoc_bot.utils.advent_exceptions import AdventOfCodeException


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def error(description: str) -> discord.Embed:
        """Create a generic error embed."""
        return discord.Embed(
            title=UIConstants.ERROR_TITLE,
            description=description,
            color=UIConstants.ERROR_COLOR
        )

    @staticmethod
    def from_exception(error: AdventOfCodeException) -> discord.Embed:
        """Create embed showing the user-facing message of an Advent of Code error."""
        return ErrorEmbeds.error(error.user_message)

    @staticmethod
    def command_error() -> discord.Embed:
        """Create embed for unexpected command errors."""
        return ErrorEmbeds.error(
            "An unexpected error occurred while processing your command. Please try again later."
        )
