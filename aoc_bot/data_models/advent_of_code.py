"""
Advent of Code leaderboard data models.

Provides immutable data transfer objects for the private leaderboard JSON
returned by adventofcode.com.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple

from aoc_bot.constants import AdventOfCodeConstants


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""
    member_id: str
    name: str
    stars: int
    local_score: int

    @classmethod
    def from_member(cls, member_id: str, member: Mapping[str, Any]) -> "LeaderboardEntry":
        """
        Build an entry from one raw member record.

        Raises:
            ValueError: If the record is not a member object
        """
        if not isinstance(member, Mapping):
            raise ValueError(f"Member {member_id} is not an object")

        member_id = str(member.get("id", member_id))
        name = member.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError(f"Member {member_id} has a non-string name")

        try:
            stars = int(member.get("stars") or 0)
            local_score = int(member.get("local_score") or 0)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Member {member_id} has invalid scores: {e}") from e

        return cls(
            member_id=member_id,
            name=name or AdventOfCodeConstants.ANONYMOUS_NAME.format(member_id=member_id),
            stars=stars,
            local_score=local_score,
        )


@dataclass(frozen=True)
class LeaderboardResponse:
    """Private leaderboard as returned by the API."""
    event: str
    owner_id: str
    members: Dict[str, Dict[str, Any]]
    entries: Tuple[LeaderboardEntry, ...] = ()

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "LeaderboardResponse":
        """
        Build a response from decoded JSON.

        Every member record is checked here, so a response that was built
        can always be rendered.

        Raises:
            ValueError: If the payload does not look like a private leaderboard
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Leaderboard payload is not an object")

        members = payload.get("members")
        if not isinstance(members, Mapping):
            raise ValueError("Leaderboard payload has no members mapping")

        entries = tuple(
            LeaderboardEntry.from_member(str(member_id), member)
            for member_id, member in members.items()
        )

        return cls(
            event=str(payload.get("event", "")),
            owner_id=str(payload.get("owner_id", "")),
            members={str(member_id): dict(member) for member_id, member in members.items()},
            entries=entries,
        )

    def get_entries(self) -> List[LeaderboardEntry]:
        """Entries ordered by local score, highest first. Ties keep API order."""
        return sorted(self.entries, key=lambda entry: entry.local_score, reverse=True)

    def top(self, count: int) -> List[LeaderboardEntry]:
        """The ``count`` best ranked entries."""
        return self.get_entries()[:count]
