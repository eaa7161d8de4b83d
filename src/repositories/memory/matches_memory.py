from __future__ import annotations

import logging
from collections import Counter
from threading import Lock
from typing import Dict, Optional, Tuple

from src.domain.entities import Match
from src.domain.exceptions import InvalidArgumentError
from src.domain.repositories.matches_repo import MatchStore
from src.domain.value_objects import Team
from src.logging_config import LOG_NAME

logger = logging.getLogger(LOG_NAME).getChild("store")

MatchKey = Tuple[Team, Team]


class InMemoryMatchStore(MatchStore):
    """Dictionary-backed :class:`MatchStore`.

    - Matches are keyed by the ordered ``(home, away)`` pair.
    - Busy teams are tracked as reference counts (team -> number of stored
      matches naming it), so delete never rescans the table.
    - Both structures change together under a single lock.
    """

    def __init__(self) -> None:
        self._matches: Dict[MatchKey, Match] = {}
        self._busy: Counter[Team] = Counter()
        self._lock = Lock()

    def save(self, match: Match) -> None:
        if match is None:
            raise InvalidArgumentError("Match cannot be null")
        key = match.key
        with self._lock:
            is_new = key not in self._matches
            self._matches[key] = match
            if is_new:
                self._busy[match.home_team] += 1
                self._busy[match.away_team] += 1
        logger.debug(
            "Match saved",
            extra={"home": match.home_team.name, "away": match.away_team.name, "new": is_new},
        )

    def delete(self, match: Match) -> None:
        if match is None:
            raise InvalidArgumentError("Match cannot be null")
        with self._lock:
            removed = self._matches.pop(match.key, None)
            if removed is None:
                return
            self._release(removed.home_team)
            self._release(removed.away_team)
        logger.debug(
            "Match deleted",
            extra={"home": match.home_team.name, "away": match.away_team.name},
        )

    def _release(self, team: Team) -> None:
        self._busy[team] -= 1
        if self._busy[team] <= 0:
            del self._busy[team]

    def find_by_teams(self, home_team: Team, away_team: Team) -> Optional[Match]:
        if home_team is None:
            raise InvalidArgumentError("Home team cannot be null")
        if away_team is None:
            raise InvalidArgumentError("Away team cannot be null")
        with self._lock:
            return self._matches.get((home_team, away_team))

    def find_all(self) -> list[Match]:
        with self._lock:
            return list(self._matches.values())

    def exists_by_team(self, team: Team) -> bool:
        if team is None:
            raise InvalidArgumentError("Team cannot be null")
        with self._lock:
            return team in self._busy

    def clear(self) -> None:
        """Drop every stored match."""
        with self._lock:
            self._matches.clear()
            self._busy.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)
