"""Interfaces the scoreboard service depends on."""

from .ordering import MatchComparator

__all__ = [
    "MatchComparator",
]
