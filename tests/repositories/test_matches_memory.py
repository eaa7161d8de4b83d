from __future__ import annotations

import pytest

from src.domain.entities.match import Match
from src.domain.exceptions import InvalidArgumentError
from src.domain.value_objects.score import Score
from src.domain.value_objects.team import Team
from src.repositories.memory.matches_memory import InMemoryMatchStore


def _team(name: str) -> Team:
    return Team(name=name)


def _match(home: str, away: str) -> Match:
    return Match(home_team=_team(home), away_team=_team(away))


@pytest.fixture
def store() -> InMemoryMatchStore:
    return InMemoryMatchStore()


def test_save_then_find_by_ordered_pair(store: InMemoryMatchStore) -> None:
    m = _match("Spain", "Brazil")
    store.save(m)
    assert store.find_by_teams(_team("Spain"), _team("Brazil")) is m
    assert store.find_by_teams(_team("Brazil"), _team("Spain")) is None
    assert store.exists_by_team(_team("Spain"))
    assert store.exists_by_team(_team("Brazil"))
    assert not store.exists_by_team(_team("Italy"))


def test_save_replaces_entry_for_same_pair(store: InMemoryMatchStore) -> None:
    first = _match("Spain", "Brazil")
    store.save(first)
    second = _match("Spain", "Brazil")
    second.update_score(Score(home=2, away=0))
    store.save(second)
    assert len(store) == 1
    found = store.find_by_teams(_team("Spain"), _team("Brazil"))
    assert found is second
    # one delete is enough to free both teams after a re-save
    store.delete(second)
    assert not store.exists_by_team(_team("Spain"))
    assert not store.exists_by_team(_team("Brazil"))


def test_save_find_save_keeps_state(store: InMemoryMatchStore) -> None:
    m = _match("Germany", "France")
    store.save(m)
    before = store.find_all()
    found = store.find_by_teams(_team("Germany"), _team("France"))
    assert found is not None
    store.save(found)
    assert store.find_all() == before
    assert len(store) == 1
    assert store.exists_by_team(_team("Germany"))


def test_delete_missing_is_noop(store: InMemoryMatchStore) -> None:
    store.save(_match("Spain", "Brazil"))
    store.delete(_match("Italy", "France"))
    store.delete(_match("Brazil", "Spain"))
    assert len(store) == 1
    assert store.exists_by_team(_team("Spain"))


def test_team_stays_busy_while_in_another_match(store: InMemoryMatchStore) -> None:
    ab = _match("Argentina", "Brazil")
    ca = _match("Chile", "Argentina")
    store.save(ab)
    store.save(ca)

    store.delete(ab)
    assert store.exists_by_team(_team("Argentina"))
    assert not store.exists_by_team(_team("Brazil"))

    store.delete(ca)
    assert not store.exists_by_team(_team("Argentina"))
    assert not store.exists_by_team(_team("Chile"))


def test_find_all_returns_defensive_copy(store: InMemoryMatchStore) -> None:
    store.save(_match("Spain", "Brazil"))
    store.save(_match("Italy", "France"))
    snapshot = store.find_all()
    snapshot.clear()
    snapshot.append(_match("Peru", "Chile"))
    assert len(store.find_all()) == 2
    assert store.find_all() is not store.find_all()


def test_clear_drops_matches_and_busy_teams(store: InMemoryMatchStore) -> None:
    store.save(_match("Spain", "Brazil"))
    store.clear()
    assert store.find_all() == []
    assert not store.exists_by_team(_team("Spain"))


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.save(None),
        lambda s: s.delete(None),
        lambda s: s.find_by_teams(None, Team(name="Spain")),
        lambda s: s.find_by_teams(Team(name="Spain"), None),
        lambda s: s.exists_by_team(None),
    ],
)
def test_none_arguments_are_rejected(store: InMemoryMatchStore, call) -> None:
    with pytest.raises(InvalidArgumentError):
        call(store)
