"""
Year helpers for Advent of Code editions.

An edition is named after the year it starts in and starts on December 1st,
so until then the latest playable edition is last year's.
"""

from datetime import date
from typing import Optional

from aoc_bot.constants import AdventOfCodeConstants
from aoc_bot.utils.advent_exceptions import InvalidYearError


def current_advent_year(today: Optional[date] = None) -> int:
    """Return the most recent Advent of Code edition as of ``today``."""
    today = today or date.today()
    if today.month < AdventOfCodeConstants.EVENT_MONTH:
        return today.year - 1
    return today.year


def parse_year(requested: Optional[str], current_year: int) -> int:
    """
    Resolve the year argument of the leaderboard command.

    Args:
        requested: Raw argument typed by the user, or None when omitted
        current_year: Latest available edition

    Returns:
        The edition to query

    Raises:
        InvalidYearError: If the argument is not a year between the first
            edition and ``current_year``
    """
    if requested is None:
        return current_year

    # int() would also take signs, underscores and non-ASCII digits
    digits = requested.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidYearError(requested, current_year)

    year = int(digits)
    if not AdventOfCodeConstants.FIRST_YEAR <= year <= current_year:
        raise InvalidYearError(requested, current_year)

    return year
