"""
Help Commands Cog

Replaces discord.py's default help command with an embed listing the
commands loaded on the bot.
"""

import discord
from discord.ext import commands

from aoc_bot.config import Config
from aoc_bot.constants import UIConstants


class HelpCommandsCog(commands.Cog):
    """Command overview"""

    def __init__(self, bot):
        self.bot = bot

    def build_help_embed(self) -> discord.Embed:
        """Build an embed with one field per visible command."""
        embed = discord.Embed(
            title="Available Commands",
            color=UIConstants.SUCCESS_COLOR
        )

        for command in sorted(self.bot.commands, key=lambda c: c.name):
            if command.hidden or command.name == "help":
                continue

            usage = f"{Config.COMMAND_PREFIX}{command.name}"
            if command.usage:
                usage += f" {command.usage}"

            description = command.description or command.help or "No description"
            if command.aliases:
                description += "\nAliases: " + ", ".join(f"`{alias}`" for alias in command.aliases)

            embed.add_field(name=usage, value=description, inline=False)

        return embed

    @commands.command(name="help")
    async def help(self, ctx: commands.Context):
        """Show the available commands"""
        await ctx.send(embed=self.build_help_embed())

async def setup(bot):
    """Add the HelpCommandsCog to the bot"""
    await bot.add_cog(HelpCommandsCog(bot))
