from __future__ import annotations

import pytest

from src.application.services.scoreboard_factory import create
from src.application.services.summary_ordering import (
    away_team_then_home_score,
    total_score_then_most_recent,
)
from src.domain.exceptions import (
    InvalidArgumentError,
    MatchNotFoundError,
    TeamAlreadyPlayingError,
)


def _lines(board) -> list[str]:
    return [str(m) for m in board.get_summary()]


def test_world_cup_scenario() -> None:
    board = create(total_score_then_most_recent)
    board.start_match("Mexico", "Canada")
    board.start_match("Spain", "Brazil")
    board.start_match("Germany", "France")
    board.start_match("Uruguay", "Italy")
    board.start_match("Argentina", "Australia")

    board.update_score("Mexico", "Canada", 0, 5)
    board.update_score("Spain", "Brazil", 10, 2)
    board.update_score("Germany", "France", 2, 2)
    board.update_score("Uruguay", "Italy", 6, 6)
    board.update_score("Argentina", "Australia", 3, 1)

    assert _lines(board) == [
        "Uruguay 6 - 6 Italy",
        "Spain 10 - 2 Brazil",
        "Mexico 0 - 5 Canada",
        "Argentina 3 - 1 Australia",
        "Germany 2 - 2 France",
    ]

    board.finish_match("Mexico", "Canada")
    assert _lines(board) == [
        "Uruguay 6 - 6 Italy",
        "Spain 10 - 2 Brazil",
        "Argentina 3 - 1 Australia",
        "Germany 2 - 2 France",
    ]

    # Mexico and Canada are free again
    board.start_match("Canada", "Mexico")
    assert _lines(board)[-1] == "Canada 0 - 0 Mexico"


def test_error_paths_leave_board_untouched() -> None:
    board = create(away_team_then_home_score)
    board.start_match("Spain", "Portugal")
    board.start_match("Italy", "France")
    board.start_match("Germany", "England")
    board.update_score("Spain", "Portugal", 3, 2)
    board.update_score("Italy", "France", 1, 1)
    board.update_score("Germany", "England", 2, 0)
    before = _lines(board)
    assert before == [
        "Germany 2 - 0 England",
        "Italy 1 - 1 France",
        "Spain 3 - 2 Portugal",
    ]

    with pytest.raises(TeamAlreadyPlayingError):
        board.start_match("Spain", "Brazil")
    with pytest.raises(MatchNotFoundError):
        board.update_score("Spain", "Brazil", 2, 2)
    with pytest.raises(MatchNotFoundError):
        board.finish_match("Portugal", "Spain")
    with pytest.raises(InvalidArgumentError):
        board.update_score("Italy", "France", -1, 2)
    with pytest.raises(InvalidArgumentError):
        board.start_match("Brazil", "Brazil")

    assert _lines(board) == before
