"""
Services package for the Advent Of Code leaderboard bot.
"""

from .base import BaseService
from .advent_of_code import AdventOfCodeService

__all__ = ['BaseService', 'AdventOfCodeService']
