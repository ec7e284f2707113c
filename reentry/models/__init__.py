"""
Core Data Models for Reentry.

These models define the world graph:
- Entity: a node, related to others only by index
- DistanceClass / Resolution: classifier and resolver outcomes
- SavedEntity / SavedWorld: the label-addressed world file schema
"""

from reentry.models.entity import (
    DEFAULT_CAPACITY,
    DEFAULT_CONTENTS_LABEL,
    DEFAULT_DETAILS,
    DEFAULT_GO_BLOCKED_TEXT,
    DEFAULT_HEALTH,
    DEFAULT_WEIGHT,
    PLAYER,
    ROOM_CAPACITY,
    DistanceClass,
    Entity,
    Resolution,
    ResolutionKind,
    create_actor,
    create_item,
    create_location,
    create_passage,
)
from reentry.models.world_file import SavedEntity, SavedWorld

__all__ = [
    # Entity
    "Entity",
    "PLAYER",
    "DistanceClass",
    "Resolution",
    "ResolutionKind",
    "create_location",
    "create_item",
    "create_passage",
    "create_actor",
    # Defaults
    "DEFAULT_DETAILS",
    "DEFAULT_CONTENTS_LABEL",
    "DEFAULT_GO_BLOCKED_TEXT",
    "DEFAULT_WEIGHT",
    "DEFAULT_CAPACITY",
    "DEFAULT_HEALTH",
    "ROOM_CAPACITY",
    # World file
    "SavedEntity",
    "SavedWorld",
]
