"""Shared fixtures."""

from __future__ import annotations

import pytest

from reentry.db.memory import EntityStore
from reentry.engine import GameEngine
from tests.ship import build_ship


@pytest.fixture
def ship() -> EntityStore:
    return build_ship()


@pytest.fixture
def engine(ship: EntityStore) -> GameEngine:
    return GameEngine(ship)
