from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Match
from src.domain.value_objects import Team


class MatchStore(ABC):
    """Authoritative storage of the matches currently in progress.

    Entries are keyed by the ordered ``(home_team, away_team)`` pair, so
    "Brazil vs Germany" and "Germany vs Brazil" are different entries. Only
    :meth:`exists_by_team` answers whether a team is busy on either side.
    """

    @abstractmethod
    def save(self, match: Match) -> None:
        """
        Insert or replace the match stored for its ordered team pair.

        Example:
            >>> store.save(match)

        :param match: Match to store; both of its teams become busy.
        :raises InvalidArgumentError: if ``match`` is None.
        """

    @abstractmethod
    def delete(self, match: Match) -> None:
        """
        Remove the match stored for the ordered team pair, if any.

        Deleting a match that is not stored is a no-op.

        :param match: Match whose entry should be removed.
        :raises InvalidArgumentError: if ``match`` is None.
        """

    @abstractmethod
    def find_by_teams(self, home_team: Team, away_team: Team) -> Optional[Match]:
        """
        Look a match up by its exact ordered team pair.

        Example:
            >>> store.find_by_teams(Team(name="Spain"), Team(name="Brazil"))
            Match(home_team=Team(name='Spain'), away_team=Team(name='Brazil'), ...)

        :return: The stored match, or None if there is none.
        """

    @abstractmethod
    def find_all(self) -> list[Match]:
        """
        Return every stored match.

        The returned list is a fresh copy; changing it leaves the store intact.
        """

    @abstractmethod
    def exists_by_team(self, team: Team) -> bool:
        """
        Tell whether ``team`` is the home or away side of any stored match.

        :raises InvalidArgumentError: if ``team`` is None.
        """
