"""
Core Engine for Reentry.

The engine is built from:
- Reachability classification (how close is one entity to another)
- Reference resolution (which entity does a typed label mean)
- Command parsing (verb + noun phrase)
- Command handlers (look, go, get, drop, give, ask, inventory)
"""

from __future__ import annotations

from reentry.engine.game import GameEngine
from reentry.engine.intent import VERBS, parse_command
from reentry.engine.models import (
    Command,
    CommandType,
    EngineConfig,
    MoveError,
    MoveResult,
    TurnResult,
)
from reentry.engine.reachability import distance, passage_toward
from reentry.engine.resolver import resolve

__all__ = [
    # Game
    "GameEngine",
    # Parsing
    "VERBS",
    "parse_command",
    # Models
    "Command",
    "CommandType",
    "EngineConfig",
    "MoveError",
    "MoveResult",
    "TurnResult",
    # Classification
    "distance",
    "passage_toward",
    "resolve",
]
