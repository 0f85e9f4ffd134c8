"""
Pytest configuration and fixtures for the Advent Of Code bot tests.

Discord and adventofcode.com are never contacted: the command context and
the leaderboard service are replaced with mocks.
"""

import pytest

from aoc_bot.cogs.advent_of_code import AdventOfCodeCog
from aoc_bot.config import Config
from aoc_bot.data_models.advent_of_code import LeaderboardResponse

TEST_INVITE = "490120-8c4e1d2a"
TEST_LEADERBOARD = "490120"
TEST_RESULTS_PER_PAGE = 15


@pytest.fixture(autouse=True)
def advent_config(monkeypatch):
    """Pin the Advent of Code settings for every test."""
    monkeypatch.setattr(Config, "ADVENT_OF_CODE_TOKEN", "test-session")
    monkeypatch.setattr(Config, "ADVENT_OF_CODE_INVITE", TEST_INVITE)
    monkeypatch.setattr(Config, "ADVENT_OF_CODE_LEADERBOARD", TEST_LEADERBOARD)
    monkeypatch.setattr(Config, "ADVENT_OF_CODE_RESULTS_PER_PAGE", TEST_RESULTS_PER_PAGE)
    return Config


@pytest.fixture
def leaderboard_payload():
    """Raw API payload with a single member."""
    return {
        "event": "2021",
        "owner_id": "490120",
        "members": {
            "490120": {
                "completion_day_level": {
                    "1": {"1": {"get_star_ts": "1606816563"}}
                },
                "local_score": 26,
                "global_score": 0,
                "name": "Lambo",
                "id": "490120",
                "stars": 3,
                "last_star_ts": "1606899444"
            }
        }
    }


@pytest.fixture
def leaderboard(leaderboard_payload):
    return LeaderboardResponse.from_json(leaderboard_payload)


@pytest.fixture
def advent_service(mocker, leaderboard):
    """Leaderboard service returning ``leaderboard``."""
    service = mocker.MagicMock()
    service.get_leaderboard = mocker.AsyncMock(return_value=leaderboard)
    return service


@pytest.fixture
def cog(mocker, advent_service):
    return AdventOfCodeCog(mocker.MagicMock(), service=advent_service)


@pytest.fixture
def ctx(mocker):
    """Command context whose ``send`` records replies."""
    context = mocker.MagicMock()
    context.send = mocker.AsyncMock()
    return context
