"""Construction helpers wiring a :class:`Scoreboard` to an in-memory store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from src.application.services.scoreboard_service import Scoreboard
from src.application.services.summary_ordering import get_ordering
from src.domain.exceptions import InvalidArgumentError
from src.domain.interfaces.ordering import MatchComparator
from src.repositories.memory.matches_memory import InMemoryMatchStore

if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from src.config.settings import Settings


def create_default(settings: Optional["Settings"] = None) -> Scoreboard:
    """Return a fresh scoreboard ordered by the configured summary ordering."""
    if settings is None:
        # Lazy import so environment overrides are read only when needed
        from src.config.settings import settings as _settings

        settings = _settings
    return Scoreboard(InMemoryMatchStore(), get_ordering(settings.ordering))


def create(comparator: MatchComparator) -> Scoreboard:
    """Return a fresh scoreboard sorting its summary with ``comparator``."""
    if comparator is None:
        raise InvalidArgumentError("Match comparator cannot be null")
    return Scoreboard(InMemoryMatchStore(), comparator)
