"""
Shared embed utilities for the Advent Of Code leaderboard bot.

Provides the leaderboard table rendering and the success embed built
around it.
"""

import discord
from typing import List

from aoc_bot.constants import AdventOfCodeConstants, UIConstants
from aoc_bot.data_models.advent_of_code import LeaderboardEntry


def leaderboard_url(year: int, leaderboard_id: str) -> str:
    """Link to the private leaderboard page on adventofcode.com."""
    path = AdventOfCodeConstants.LEADERBOARD_PATH.format(year=year, leaderboard_id=leaderboard_id)
    return f"{AdventOfCodeConstants.BASE_URL}{path}"


def _display_name(name: str) -> str:
    if len(name) <= UIConstants.MAX_NAME_LENGTH:
        return name
    return name[:UIConstants.MAX_NAME_LENGTH - 3] + "..."


def _render_table(entries: List[LeaderboardEntry]) -> str:
    names = [_display_name(entry.name) for entry in entries]
    name_width = max((len(name) for name in names), default=0)
    stars_width = max((len(str(entry.stars)) for entry in entries), default=0)

    lines = [f"```{UIConstants.TABLE_LANGUAGE}", UIConstants.TABLE_HEADER]
    for rank, (name, entry) in enumerate(zip(names, entries), start=1):
        lines.append(
            f"{rank:>2}) {name:<{name_width}} | "
            f"{str(entry.stars):<{stars_width}} | {entry.local_score}"
        )

    return "\n".join(lines) + "\n```"


def format_leaderboard_table(entries: List[LeaderboardEntry]) -> str:
    """
    Render ranked entries as a code block table.

    Names and star counts are padded to the widest value on the page so the
    score column lines up. Long names are shortened, and the lowest ranked
    rows are dropped until the table fits in one embed field.

    Args:
        entries: Entries already ordered by rank

    Returns:
        Code block ready to use as an embed field value
    """
    count = len(entries)
    table = _render_table(entries)
    while len(table) > UIConstants.FIELD_VALUE_LIMIT and count > 0:
        count -= 1
        table = _render_table(entries[:count])
    return table


def build_leaderboard_embed(
    entries: List[LeaderboardEntry],
    year: int,
    invite_code: str,
    leaderboard_id: str,
    page_size: int
) -> discord.Embed:
    """Build the success embed for a leaderboard page."""
    embed = discord.Embed(
        title=UIConstants.SUCCESS_TITLE,
        description=(
            f"Leaderboard ID: `{invite_code}`\n\n"
            f"[View Leaderboard]({leaderboard_url(year, leaderboard_id)})"
        ),
        color=UIConstants.SUCCESS_COLOR
    )
    embed.add_field(
        name=f"Top {page_size}",
        value=format_leaderboard_table(entries),
        inline=False
    )
    return embed
