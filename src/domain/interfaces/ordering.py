from __future__ import annotations

from typing import Protocol

from ..entities.match import Match


class MatchComparator(Protocol):
    """Total ordering over matches used to sort the scoreboard summary.

    Returns a negative number when ``a`` comes first, a positive number when
    ``b`` comes first and ``0`` when both rank equally.

    >>> def by_home(a: Match, b: Match) -> int:
    ...     return (a.home_team.name > b.home_team.name) - (a.home_team.name < b.home_team.name)
    """

    def __call__(self, a: Match, b: Match) -> int: ...
