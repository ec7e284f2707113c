"""Tests for the in-memory entity store."""

from __future__ import annotations

import pytest

from reentry.db.memory import EntityStore
from reentry.models import Entity, create_item, create_location
from tests.ship import BAG, BRIDGE, COIN, CRATE, PHOTO, PLAYER, WRENCH


class TestEntityStore:
    """Tests for EntityStore."""

    def test_empty_store_rejected(self):
        with pytest.raises(ValueError):
            EntityStore([])

    def test_dangling_reference_rejected(self):
        with pytest.raises(ValueError, match="location 5"):
            EntityStore([Entity(labels=["Me"], description="me", location=5)])

    def test_get_out_of_range(self, ship: EntityStore):
        assert ship.get(None) is None
        assert ship.get(len(ship)) is None
        with pytest.raises(IndexError):
            ship[len(ship)]

    def test_is_holding(self, ship: EntityStore):
        assert ship.is_holding(PLAYER, BAG)
        assert ship.is_holding(BAG, COIN)
        assert not ship.is_holding(PLAYER, COIN)
        assert not ship.is_holding(None, BRIDGE)
        assert not ship.is_holding(PLAYER, None)

    def test_contents_in_index_order(self, ship: EntityStore):
        assert ship.contents(CRATE) == [WRENCH]
        assert ship.contents(BRIDGE)[:2] == [PLAYER, PHOTO]

    def test_weight_of_contents(self, ship: EntityStore):
        assert ship.weight_of_contents(PLAYER) == 2
        assert ship.weight_of_contents(PHOTO) == 0

    def test_relocate_replaces_entity(self, ship: EntityStore):
        before = ship[PHOTO]
        ship.relocate(PHOTO, PLAYER)
        assert ship[PHOTO].location == PLAYER
        assert before.location == BRIDGE
        assert ship[PHOTO].labels == before.labels

    def test_relocate_to_missing_entity(self, ship: EntityStore):
        with pytest.raises(IndexError):
            ship.relocate(PHOTO, 99)

    def test_snapshot_is_plain_data(self):
        store = EntityStore(
            [
                create_location("Room", "a room"),
                create_item("Rock", "a rock", 0),
            ]
        )
        snapshot = store.snapshot()
        assert snapshot[1]["labels"] == ["Rock"]
        assert snapshot[1]["location"] == 0
