from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Team(BaseModel):
    """A football team identified by its exact, case-sensitive name."""

    name: str = Field(..., description="Team name")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Team name cannot be null or empty")
        return v

    def __str__(self) -> str:
        return self.name
