"""Tests for the reference resolver."""

from __future__ import annotations

from reentry.db.memory import EntityStore
from reentry.engine import resolve
from reentry.models import (
    DistanceClass,
    Entity,
    ResolutionKind,
    create_item,
    create_location,
    create_passage,
)
from tests.ship import BAG, COIN, COPILOT, PEN, PHOTO, PLAYER


class TestResolve:
    """Tests for resolve()."""

    def test_single_match(self, ship: EntityStore):
        result = resolve(ship, "photo", PLAYER, DistanceClass.REACHABLE)
        assert result.kind == ResolutionKind.ONE
        assert result.index == PHOTO

    def test_case_insensitive(self, ship: EntityStore):
        assert resolve(ship, "PHOTO", PLAYER, DistanceClass.REACHABLE).index == PHOTO

    def test_unknown_label(self, ship: EntityStore):
        assert resolve(ship, "xyzzy", PLAYER, DistanceClass.NOT_HERE).is_none

    def test_threshold_filters(self, ship: EntityStore):
        assert resolve(ship, "pen", PLAYER, DistanceClass.REACHABLE).is_none
        assert resolve(ship, "pen", PLAYER, DistanceClass.NOT_HERE).index == PEN

    def test_possession_threshold(self, ship: EntityStore):
        assert resolve(ship, "coin", PLAYER, DistanceClass.HELD_INDIRECT).index == COIN
        assert resolve(ship, "bag", PLAYER, DistanceClass.HELD_INDIRECT).index == BAG
        assert resolve(ship, "photo", PLAYER, DistanceClass.HELD_INDIRECT).is_none

    def test_other_origin(self, ship: EntityStore):
        assert resolve(ship, "pen", COPILOT, DistanceClass.HELD_INDIRECT).index == PEN

    def test_self_label(self, ship: EntityStore):
        assert resolve(ship, "me", PLAYER, DistanceClass.SELF).index == PLAYER


class TestAmbiguity:
    """Two reachable matches are never silently disambiguated."""

    def test_two_items_with_same_label(self):
        store = EntityStore(
            [
                Entity(labels=["Me"], description="me", location=1, capacity=10),
                create_location("Room", "a room"),
                create_item("Red Card", "a red card", 1, aliases=["Card"]),
                create_item("Blue Card", "a blue card", 0, aliases=["Card"]),
            ]
        )
        assert resolve(store, "card", 0, DistanceClass.REACHABLE).is_ambiguous
        # Only the held one is within possession range
        assert resolve(store, "card", 0, DistanceClass.HELD_INDIRECT).index == 3
        assert resolve(store, "red card", 0, DistanceClass.REACHABLE).index == 2

    def test_same_label_passages(self):
        store = EntityStore(
            [
                Entity(labels=["Me"], description="me", location=1),
                create_location("Hall", "a hall"),
                create_location("Left Room", "a room"),
                create_location("Right Room", "a room"),
                create_passage("Port Hatch", "a hatch", 1, 2, aliases=["Port"]),
                create_passage("Port Door", "a door", 1, 3, aliases=["Port"]),
            ]
        )
        assert resolve(store, "port", 0, DistanceClass.REACHABLE).is_ambiguous
