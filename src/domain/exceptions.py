from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from .value_objects.team import Team


class ScoreboardError(Exception):
    """Base class for every error raised by the scoreboard."""


class InvalidArgumentError(ScoreboardError, ValueError):
    """Raised when malformed input reaches a boundary of the scoreboard."""


class TeamAlreadyPlayingError(ScoreboardError):
    """Raised when a team is already taking part in an active match."""

    def __init__(self, team: "Team") -> None:
        super().__init__(f"Team '{team.name}' is already playing in another match")
        self.team = team


class MatchNotFoundError(ScoreboardError):
    """Raised when no active match exists for the given home/away pair."""

    def __init__(self, home_team: "Team", away_team: "Team") -> None:
        super().__init__(
            f"Match not found for teams: '{home_team.name}' vs '{away_team.name}'"
        )
        self.home_team = home_team
        self.away_team = away_team
