from .score import Score
from .team import Team

__all__ = [
    "Score",
    "Team",
]
