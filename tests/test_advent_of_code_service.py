"""
Unit tests for AdventOfCodeService.

The aiohttp session is replaced with a small fake so no request leaves
the test process.
"""

import asyncio
import json

import aiohttp
import pytest

from aoc_bot.cogs.advent_of_code import AdventOfCodeCog
from aoc_bot.data_models.advent_of_code import LeaderboardResponse
from aoc_bot.services.advent_of_code import AdventOfCodeService
from aoc_bot.utils.advent_exceptions import LeaderboardFetchError


class FakeResponse:
    def __init__(self, status=200, payload=None, error=None):
        self.status = status
        self.payload = payload
        self.error = error

    async def json(self, content_type="application/json"):
        if self.error:
            raise self.error
        return self.payload


class FakeRequest:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error

    async def __aenter__(self):
        if self.error:
            raise self.error
        return self.response

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records GET calls and replays a canned request."""

    def __init__(self, request):
        self.request = request
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.request

    async def close(self):
        self.closed = True


@pytest.fixture
def service():
    return AdventOfCodeService(session_token="secret-cookie", timeout_seconds=5)


def use_session(service, monkeypatch, request):
    session = FakeSession(request)
    monkeypatch.setattr(service, "get_session", lambda: session)
    return session


class TestGetLeaderboard:
    """Test fetching and parsing the private leaderboard."""

    def test_api_url(self):
        assert AdventOfCodeService.get_api_url("490120", 2021) == (
            "https://adventofcode.com/2021/leaderboard/private/view/490120.json"
        )

    @pytest.mark.asyncio
    async def test_success(self, service, monkeypatch, leaderboard_payload):
        session = use_session(service, monkeypatch, FakeRequest(FakeResponse(payload=leaderboard_payload)))

        result = await service.get_leaderboard("490120", 2021)

        assert isinstance(result, LeaderboardResponse)
        assert result.event == "2021"
        assert result.owner_id == "490120"
        assert [entry.name for entry in result.get_entries()] == ["Lambo"]

        url, kwargs = session.calls[0]
        assert url == "https://adventofcode.com/2021/leaderboard/private/view/490120.json"
        assert kwargs["cookies"] == {"session": "secret-cookie"}
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [302, 400, 404, 500])
    async def test_http_error(self, service, monkeypatch, status):
        use_session(service, monkeypatch, FakeRequest(FakeResponse(status=status)))

        with pytest.raises(LeaderboardFetchError) as exc_info:
            await service.get_leaderboard("490120", 2021)

        assert exc_info.value.year == 2021
        assert exc_info.value.user_message == "Could not get the leaderboard for Advent Of Code."

    @pytest.mark.asyncio
    async def test_invalid_json(self, service, monkeypatch):
        error = json.JSONDecodeError("Expecting value", "<html>", 0)
        use_session(service, monkeypatch, FakeRequest(FakeResponse(error=error)))

        with pytest.raises(LeaderboardFetchError):
            await service.get_leaderboard("490120", 2021)

    @pytest.mark.asyncio
    async def test_payload_without_members(self, service, monkeypatch):
        use_session(service, monkeypatch, FakeRequest(FakeResponse(payload={"event": "2021"})))

        with pytest.raises(LeaderboardFetchError):
            await service.get_leaderboard("490120", 2021)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("member", [None, [1, 2], "Lambo", {"name": 12345}, {"stars": [3]}])
    async def test_malformed_member_record(self, service, monkeypatch, member):
        payload = {"event": "2021", "owner_id": "1", "members": {"1": member}}
        use_session(service, monkeypatch, FakeRequest(FakeResponse(payload=payload)))

        with pytest.raises(LeaderboardFetchError) as exc_info:
            await service.get_leaderboard("490120", 2021)

        assert exc_info.value.user_message == "Could not get the leaderboard for Advent Of Code."

    @pytest.mark.asyncio
    async def test_connection_error(self, service, monkeypatch):
        use_session(service, monkeypatch, FakeRequest(error=aiohttp.ClientConnectionError("refused")))

        with pytest.raises(LeaderboardFetchError):
            await service.get_leaderboard("490120", 2021)

    @pytest.mark.asyncio
    async def test_timeout(self, service, monkeypatch):
        use_session(service, monkeypatch, FakeRequest(error=asyncio.TimeoutError()))

        with pytest.raises(LeaderboardFetchError):
            await service.get_leaderboard("490120", 2021)


class TestLifecycle:
    """Test the singleton and session cleanup."""

    def test_get_instance_returns_singleton(self, monkeypatch):
        monkeypatch.setattr(AdventOfCodeService, "_instance", None)

        assert AdventOfCodeService.get_instance() is AdventOfCodeService.get_instance()

    def test_defaults_from_config(self, advent_config):
        service = AdventOfCodeService()

        assert service.session_token == advent_config.ADVENT_OF_CODE_TOKEN
        assert service.timeout.total == advent_config.ADVENT_OF_CODE_TIMEOUT

    @pytest.mark.asyncio
    async def test_close_releases_session(self, service):
        session = FakeSession(FakeRequest())
        service._session = session

        await service.close()

        assert session.closed
        assert service._session is None

    @pytest.mark.asyncio
    async def test_close_without_session(self, service):
        await service.close()

        assert service._session is None


@pytest.mark.asyncio
async def test_command_reports_malformed_leaderboard(mocker, service, monkeypatch):
    payload = {"event": "2021", "owner_id": "1", "members": {"1": {"name": 12345, "stars": 1, "local_score": 2}}}
    use_session(service, monkeypatch, FakeRequest(FakeResponse(payload=payload)))
    cog = AdventOfCodeCog(mocker.MagicMock(), service=service)

    embed = await cog.build_reply("2021")

    assert embed.title == "Error"
    assert embed.description == "Could not get the leaderboard for Advent Of Code."
