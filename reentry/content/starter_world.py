"""
Starter World for Reentry.

Loads the bundled spaceship world so players can start exploring
without writing a world file first.
"""

from __future__ import annotations

from importlib import resources

from reentry.db.codec import loads
from reentry.db.memory import EntityStore

STARTER_WORLD_FILE = "reentry.yaml"

INTRO_TEXT = (
    "Welcome to Reentry. A space adventure.\n"
    "\n"
    "You awake in darkness with a pounding headache.\n"
    "An alarm is flashing and beeping loudly. This doesn't help your headache.\n"
)


def starter_world_text() -> str:
    """Raw YAML of the bundled world."""
    return (
        resources.files("reentry.content")
        .joinpath(STARTER_WORLD_FILE)
        .read_text(encoding="utf-8")
    )


def load_starter_world() -> EntityStore:
    """
    Build a fresh copy of the bundled world.

    The starting room is the bridge, with the galley aft and the
    cryochamber to port of the galley.
    """
    return loads(starter_world_text())
