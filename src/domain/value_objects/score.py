from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Score(BaseModel):
    home: int = Field(..., ge=0, description="Goals scored by the home team")
    away: int = Field(..., ge=0, description="Goals scored by the away team")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def initial(cls) -> "Score":
        """Return the 0-0 score every match starts with."""
        return cls(home=0, away=0)

    @property
    def total(self) -> int:
        return self.home + self.away

    def __str__(self) -> str:
        return f"{self.home} - {self.away}"
