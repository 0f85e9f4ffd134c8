import asyncio
import logging
import traceback
from typing import Optional

import discord
from discord.ext import commands

from aoc_bot.config import Config
from aoc_bot.services.advent_of_code import AdventOfCodeService
from aoc_bot.utils.error_embeds import ErrorEmbeds
from aoc_bot.utils.logger import setup_logger

class AdventBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )

        self.advent_service: Optional[AdventOfCodeService] = None
        self.logger = setup_logger(__name__)

    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up Advent Of Code bot...")

        self.advent_service = AdventOfCodeService.get_instance()

        await self.load_cogs()

        self.logger.info("Advent Of Code bot setup complete!")

    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'aoc_bot.cogs.advent_of_code',
            'aoc_bot.cogs.help_commands'
        ]

        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)

    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        self.logger.info(f'Bot is in {len(self.guilds)} guilds')

        await self.change_presence(
            activity=discord.Game(name=f"Advent of Code | {Config.COMMAND_PREFIX}aoc")
        )

    async def on_command_error(self, ctx: commands.Context, error: Exception):
        """Global error handler for commands"""
        if isinstance(error, commands.CommandNotFound):
            return

        self.logger.error(f"Unexpected error in command {ctx.command}: {error}")
        self.logger.error(''.join(traceback.format_exception(type(error), error, error.__traceback__)))

        await ctx.send(embed=ErrorEmbeds.command_error())

    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down Advent Of Code bot...")

        if self.advent_service:
            await self.advent_service.close()

        await super().close()

async def main():
    """Main entry point"""
    Config.validate()

    bot = AdventBot()

    try:
        await bot.start(Config.DISCORD_TOKEN)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        await bot.close()

def run():
    """Console script entry point"""
    asyncio.run(main())

if __name__ == "__main__":
    run()
