import os
from dotenv import load_dotenv

from aoc_bot.constants import UIConstants

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Advent of Code settings
    ADVENT_OF_CODE_TOKEN = os.getenv('ADVENT_OF_CODE_TOKEN')  # adventofcode.com session cookie
    ADVENT_OF_CODE_INVITE = os.getenv('ADVENT_OF_CODE_INVITE', '')
    ADVENT_OF_CODE_LEADERBOARD = os.getenv('ADVENT_OF_CODE_LEADERBOARD', '')
    ADVENT_OF_CODE_RESULTS_PER_PAGE = int(os.getenv('ADVENT_OF_CODE_RESULTS_PER_PAGE', 15))
    ADVENT_OF_CODE_TIMEOUT = float(os.getenv('ADVENT_OF_CODE_TIMEOUT', 10))

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.ADVENT_OF_CODE_TOKEN:
            raise ValueError("ADVENT_OF_CODE_TOKEN is required")
        if not cls.ADVENT_OF_CODE_LEADERBOARD:
            raise ValueError("ADVENT_OF_CODE_LEADERBOARD is required")
        if not 0 < cls.ADVENT_OF_CODE_RESULTS_PER_PAGE <= UIConstants.MAX_RESULTS_PER_PAGE:
            raise ValueError(
                f"ADVENT_OF_CODE_RESULTS_PER_PAGE must be between 1 and {UIConstants.MAX_RESULTS_PER_PAGE}"
            )
