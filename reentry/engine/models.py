"""
Engine Data Models for Reentry.

Defines the core data structures for the game loop:
- Command: Parsed player input
- MoveResult: Outcome of relocating an object
- TurnResult: Response to the player
- EngineConfig: Runtime settings
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CommandType(str, Enum):
    """Verbs the engine understands."""

    ASK = "ask"
    DROP = "drop"
    GET = "get"
    GIVE = "give"
    GO = "go"
    INVENTORY = "inventory"
    LOOK = "look"
    QUIT = "quit"
    HELP = "help"
    UNKNOWN = "unknown"


class Command(BaseModel):
    """Parsed player command: a verb and the rest of the line."""

    type: CommandType
    noun: str = Field(default="", description="Lowercased noun phrase")
    original_input: str = Field(default="", description="The trimmed input line")


class MoveError(str, Enum):
    """Why a move was refused."""

    TOO_HEAVY = "too_heavy"
    NO_RECIPIENT = "no_recipient"


class MoveResult(BaseModel):
    """Result of moving an object to a new container."""

    success: bool
    narrative: str = ""
    error: MoveError | None = None


class TurnResult(BaseModel):
    """Result of processing one command."""

    command: CommandType
    narrative: str
    quit: bool = False


class EngineConfig(BaseModel):
    """Engine configuration."""

    world_file: Path | None = Field(
        default=None, description="World to load; None uses the bundled world"
    )
    log_level: LogLevel = "WARNING"
    prompt: str = "> "

    model_config = {"validate_assignment": True}

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from REENTRY_* environment variables."""
        config = cls()
        if os.getenv("REENTRY_WORLD_FILE"):
            config.world_file = Path(os.getenv("REENTRY_WORLD_FILE", ""))
        level = os.getenv("REENTRY_LOG_LEVEL", "").upper()
        if level in LOG_LEVELS:
            config.log_level = level
        elif level:
            logger.warning(
                "Ignoring REENTRY_LOG_LEVEL=%s; expected one of %s",
                level,
                ", ".join(LOG_LEVELS),
            )
        return config
