"""
Bot-wide constants for the Advent Of Code leaderboard bot.

Values here are fixed by adventofcode.com or by the bot's look and feel,
so unlike Config they are not read from the environment.
"""

class AdventOfCodeConstants:
    """Constants describing the Advent of Code event and its website."""

    # First edition of the event
    FIRST_YEAR = 2015

    # A new edition starts on December 1st
    EVENT_MONTH = 12

    BASE_URL = "https://adventofcode.com"
    LEADERBOARD_PATH = "/{year}/leaderboard/private/view/{leaderboard_id}"

    # Members without a public name are shown like this on the website
    ANONYMOUS_NAME = "anonymous user #{member_id}"

class UIConstants:
    """Constants for Discord UI elements."""

    # Embed colors
    SUCCESS_COLOR = 0x1C8B41  # Green for leaderboards
    ERROR_COLOR = 0xFF3333    # Red for errors

    # Embed titles
    SUCCESS_TITLE = "Advent Of Code"
    ERROR_TITLE = "Error"

    # Code block language used to colour the leaderboard table
    TABLE_LANGUAGE = "java"
    TABLE_HEADER = "(Name, Stars, Points)"

    # Discord rejects embed field values longer than this
    FIELD_VALUE_LIMIT = 1024
    MAX_NAME_LENGTH = 30

    # Largest configurable leaderboard page
    MAX_RESULTS_PER_PAGE = 25
