from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import InvalidArgumentError
from ..value_objects.score import Score
from ..value_objects.team import Team


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Match(BaseModel):
    """An in-progress football match.

    The two teams and the start time are fixed at creation; only the score is
    replaced as the match goes on. Two matches are the same match when they
    share the same ordered ``(home_team, away_team)`` pair.
    """

    home_team: Team = Field(..., frozen=True, description="Home side")
    away_team: Team = Field(..., frozen=True, description="Away side")
    score: Score = Field(default_factory=Score.initial, description="Current score")
    start_time: datetime = Field(
        default_factory=_utc_now, frozen=True, description="Start time in UTC"
    )

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("start_time")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("start_time must be timezone-aware")
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def _distinct_teams(self) -> "Match":
        if self.home_team == self.away_team:
            raise ValueError("Home team and away team cannot be the same")
        return self

    @property
    def key(self) -> tuple[Team, Team]:
        return (self.home_team, self.away_team)

    @property
    def home_score(self) -> int:
        return self.score.home

    @property
    def away_score(self) -> int:
        return self.score.away

    @property
    def total_score(self) -> int:
        return self.score.total

    def update_score(self, score: Score) -> None:
        """Replace the current score; the new score is absolute, not added."""
        if score is None:
            raise InvalidArgumentError("Score cannot be null")
        self.score = score

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_score} {self.away_team}"
