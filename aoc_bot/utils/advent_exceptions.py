"""
Custom exceptions for the Advent of Code command with user-friendly error messages.
"""

from aoc_bot.constants import AdventOfCodeConstants

class AdventOfCodeException(Exception):
    """Base exception for Advent of Code errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class InvalidYearError(AdventOfCodeException):
    """Raised when the requested year has no Advent of Code event."""
    def __init__(self, requested: str, current_year: int):
        self.requested = requested
        self.current_year = current_year
        super().__init__(
            f"Year '{requested}' outside {AdventOfCodeConstants.FIRST_YEAR}-{current_year}",
            "Year requested not available.\n"
            f"Please query a year between {AdventOfCodeConstants.FIRST_YEAR} and {current_year}"
        )

class LeaderboardFetchError(AdventOfCodeException):
    """Raised when the leaderboard could not be retrieved or understood."""
    def __init__(self, year: int, details: str = None):
        self.year = year
        super().__init__(
            f"Failed to fetch leaderboard for {year}: {details}",
            "Could not get the leaderboard for Advent Of Code."
        )
