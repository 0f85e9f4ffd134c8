"""
Advent of Code Cog - private leaderboard command

Shows the configured Advent of Code private leaderboard for the current
edition, or for an earlier one when a year is given.
"""

import discord
from discord.ext import commands
from typing import Optional

from aoc_bot.config import Config
from aoc_bot.services.advent_of_code import AdventOfCodeService
from aoc_bot.utils.advent_exceptions import InvalidYearError, LeaderboardFetchError
from aoc_bot.utils.advent_year import current_advent_year, parse_year
from aoc_bot.utils.embeds import build_leaderboard_embed
from aoc_bot.utils.error_embeds import ErrorEmbeds
from aoc_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


class AdventOfCodeCog(commands.Cog):
    """Advent of Code leaderboard commands"""

    def __init__(self, bot, service: Optional[AdventOfCodeService] = None):
        self.bot = bot
        self.service = service or AdventOfCodeService.get_instance()

    def get_year(self) -> int:
        """Latest Advent of Code edition."""
        return current_advent_year()

    @commands.command(
        name="adventofcode",
        aliases=["aoc"],
        description="Shows the current leaderboard for adventofcode.",
        usage="[year]"
    )
    async def adventofcode(self, ctx: commands.Context, year: Optional[str] = None):
        """Shows the current leaderboard for adventofcode."""
        embed = await self.build_reply(year)
        await ctx.send(embed=embed)

    async def build_reply(self, requested_year: Optional[str] = None) -> discord.Embed:
        """
        Build the reply for one invocation of the leaderboard command.

        Args:
            requested_year: Raw year argument, None for the latest edition

        Returns:
            Leaderboard embed, or an error embed if the year is not available
            or the leaderboard could not be fetched
        """
        current_year = self.get_year()

        try:
            year = parse_year(requested_year, current_year)
        except InvalidYearError as e:
            return ErrorEmbeds.from_exception(e)

        try:
            leaderboard = await self.service.get_leaderboard(Config.ADVENT_OF_CODE_LEADERBOARD, year)
            entries = leaderboard.top(Config.ADVENT_OF_CODE_RESULTS_PER_PAGE)
        except Exception as e:
            if not isinstance(e, LeaderboardFetchError):
                logger.warning(f"Error getting Advent of Code leaderboard for {year}: {e}")
                e = LeaderboardFetchError(year, str(e))
            return ErrorEmbeds.from_exception(e)

        return build_leaderboard_embed(
            entries,
            year=year,
            invite_code=Config.ADVENT_OF_CODE_INVITE,
            leaderboard_id=Config.ADVENT_OF_CODE_LEADERBOARD,
            page_size=Config.ADVENT_OF_CODE_RESULTS_PER_PAGE
        )

async def setup(bot):
    await bot.add_cog(AdventOfCodeCog(bot))
