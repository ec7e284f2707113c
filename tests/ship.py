"""A small ship world built with the entity factories, shared by the tests."""

from __future__ import annotations

from reentry.db.memory import EntityStore
from reentry.models import (
    Entity,
    create_actor,
    create_item,
    create_location,
    create_passage,
)

# Indices into the ship world
PLAYER = 0
BRIDGE = 1
GALLEY = 2
OUTSIDE = 3
PHOTO = 4
BAG = 5
COIN = 6
COPILOT = 7
PEN = 8
AFT = 9
FWD = 10
WALL = 11
CRATE = 12
WRENCH = 13


def build_ship() -> EntityStore:
    """
    Bridge: player (holding a bag with a coin), photo, crate with a wrench,
    a hatch aft to the galley and a wall looking outside.
    Galley: the copilot (holding a pen) and a hatch forward.
    """
    return EntityStore(
        [
            Entity(
                labels=["Yourself", "Me", "Self"],
                description="yourself",
                location=BRIDGE,
                capacity=20,
                health=100,
            ),
            create_location("Bridge", "the bridge"),
            create_location("Galley", "the galley"),
            create_location("Outside", "the vacuum of space"),
            create_item("Photo", "a photo", BRIDGE),
            create_item("Bag", "a canvas bag", PLAYER, weight=2, capacity=5, details="Canvas."),
            create_item("Coin", "a coin", BAG),
            create_actor("Copilot", "your copilot", GALLEY, health=5),
            create_item("Pen", "a pen", COPILOT),
            create_passage("Aft", "a hatch aft", BRIDGE, GALLEY),
            create_passage("Fwd", "a hatch forward", GALLEY, BRIDGE),
            create_passage(
                "Wall", "a wall", BRIDGE, None, prospect=OUTSIDE, go_blocked_text="Solid wall."
            ),
            create_item("Crate", "a crate", BRIDGE, weight=99, capacity=3),
            create_item("Wrench", "a wrench", CRATE, weight=2),
        ]
    )


