"""Application settings for the scoreboard.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a Pydantic settings object.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from src.application.services.summary_ordering import DEFAULT_ORDERING, ORDERINGS

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_LOG_FILE = Path("logs/scoreboard.log")
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    ordering: str = DEFAULT_ORDERING
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True)


def build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    ordering = os.getenv("SCOREBOARD_ORDERING", DEFAULT_ORDERING).strip()
    if ordering not in ORDERINGS:
        raise RuntimeError(
            f"SCOREBOARD_ORDERING must be one of {', '.join(sorted(ORDERINGS))}; got '{ordering}'"
        )

    log_level = os.getenv("SCOREBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"SCOREBOARD_LOG_LEVEL must be a logging level name; got '{log_level}'")

    log_file = Path(os.getenv("SCOREBOARD_LOG_FILE", str(DEFAULT_LOG_FILE)))

    return Settings(ordering=ordering, log_file=log_file, log_level=log_level)


# Public settings instance
settings = build_settings()
