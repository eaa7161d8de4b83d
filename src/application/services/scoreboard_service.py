from __future__ import annotations

import logging
from datetime import datetime
from functools import cmp_to_key
from typing import Optional, Protocol

from pydantic import ValidationError

from src.domain.entities import Match
from src.domain.exceptions import (
    InvalidArgumentError,
    MatchNotFoundError,
    TeamAlreadyPlayingError,
)
from src.domain.interfaces.ordering import MatchComparator
from src.domain.repositories.matches_repo import MatchStore
from src.domain.value_objects import Score, Team
from src.infrastructure.clock import MonotonicClock
from src.logging_config import LOG_NAME

logger = logging.getLogger(LOG_NAME).getChild("service")


class _ClockProto(Protocol):
    def now(self) -> datetime: ...


class Scoreboard:
    """Live scoreboard of the football matches currently in progress.

    - Validates caller input and turns team names into :class:`Team` values.
    - Allows each team in at most one active match, on either side.
    - Delegates storage to the injected :class:`MatchStore`.
    - Sorts the summary with the injected comparator.
    """

    def __init__(
        self,
        store: MatchStore,
        comparator: MatchComparator,
        clock: Optional[_ClockProto] = None,
    ) -> None:
        if store is None:
            raise InvalidArgumentError("Repository cannot be null")
        if comparator is None:
            raise InvalidArgumentError("Match comparator cannot be null")
        self._store = store
        self._comparator = comparator
        self._clock = clock if clock is not None else MonotonicClock()

    def start_match(self, home_team_name: str, away_team_name: str) -> Match:
        home, away = _team(home_team_name), _team(away_team_name)
        if home == away:
            raise InvalidArgumentError("Home team and away team cannot be the same")
        self._check_available(home)
        self._check_available(away)

        match = Match(home_team=home, away_team=away, start_time=self._clock.now())
        self._store.save(match)
        logger.info("Match started", extra={"home": home.name, "away": away.name})
        return match

    def update_score(
        self, home_team_name: str, away_team_name: str, home_score: int, away_score: int
    ) -> Match:
        home, away = _team(home_team_name), _team(away_team_name)
        try:
            score = Score(home=home_score, away=away_score)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid score {home_score}-{away_score}: {exc}") from exc

        match = self._find_or_raise(home, away)
        match.update_score(score)
        self._store.save(match)
        logger.info(
            "Score updated",
            extra={"home": home.name, "away": away.name, "score": str(score)},
        )
        return match

    def finish_match(self, home_team_name: str, away_team_name: str) -> None:
        home, away = _team(home_team_name), _team(away_team_name)
        match = self._find_or_raise(home, away)
        self._store.delete(match)
        logger.info(
            "Match finished",
            extra={"home": home.name, "away": away.name, "score": str(match.score)},
        )

    def get_summary(self) -> list[Match]:
        """Return the active matches sorted by the configured comparator."""
        return sorted(self._store.find_all(), key=cmp_to_key(self._comparator))

    def _check_available(self, team: Team) -> None:
        if self._store.exists_by_team(team):
            raise TeamAlreadyPlayingError(team)

    def _find_or_raise(self, home: Team, away: Team) -> Match:
        match = self._store.find_by_teams(home, away)
        if match is None:
            raise MatchNotFoundError(home, away)
        return match


def _team(name: str) -> Team:
    try:
        return Team(name=name)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid team name {name!r}: {exc}") from exc
