"""Orderings for the scoreboard summary.

Every ordering is a plain comparator ``(a, b) -> int`` matching
:class:`~src.domain.interfaces.ordering.MatchComparator`. Custom rules can be
assembled from :func:`by_key` and :func:`chain`.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from src.domain.entities import Match
from src.domain.exceptions import InvalidArgumentError
from src.domain.interfaces.ordering import MatchComparator

DEFAULT_ORDERING = "total_score_then_most_recent"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def by_key(key: Callable[[Match], Any], *, descending: bool = False) -> MatchComparator:
    """Compare matches by ``key(match)``, ascending unless ``descending``."""

    def compare(a: Match, b: Match) -> int:
        result = _cmp(key(a), key(b))
        return -result if descending else result

    return compare


def chain(*comparators: MatchComparator) -> MatchComparator:
    """Apply ``comparators`` in turn; later ones only break earlier ties."""
    if not comparators:
        raise InvalidArgumentError("At least one comparator is required")
    if any(c is None for c in comparators):
        raise InvalidArgumentError("Match comparator cannot be null")

    def compare(a: Match, b: Match) -> int:
        for comparator in comparators:
            result = comparator(a, b)
            if result:
                return result
        return 0

    return compare


total_score_then_most_recent: MatchComparator = chain(
    by_key(lambda m: m.total_score, descending=True),
    by_key(lambda m: m.start_time, descending=True),
)

home_team_alphabetical: MatchComparator = by_key(lambda m: m.home_team.name)

away_team_then_home_score: MatchComparator = chain(
    by_key(lambda m: m.away_team.name),
    by_key(lambda m: m.home_score, descending=True),
)

ORDERINGS: Mapping[str, MatchComparator] = {
    DEFAULT_ORDERING: total_score_then_most_recent,
    "home_team_alphabetical": home_team_alphabetical,
    "away_team_then_home_score": away_team_then_home_score,
}


def get_ordering(name: str) -> MatchComparator:
    try:
        return ORDERINGS[name]
    except KeyError:
        known = ", ".join(sorted(ORDERINGS))
        raise InvalidArgumentError(f"Unknown ordering '{name}' (known: {known})") from None
