"""
Entity Models for Reentry.

Defines the core data structures of the world graph:
entities, distance classes, and reference resolutions.

Entities never hold references to each other, only indices into
the owning EntityStore.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field, field_validator

# Index of the player entity in every world.
PLAYER = 0

DEFAULT_DETAILS = "You see nothing special."
DEFAULT_CONTENTS_LABEL = "You see"
DEFAULT_GO_BLOCKED_TEXT = "You can't get much closer than this."
DEFAULT_WEIGHT = 99
DEFAULT_CAPACITY = 0
DEFAULT_HEALTH = 0

# Rooms hold anything that can be carried into them.
ROOM_CAPACITY = 9999


def check_labels(labels: list[str]) -> list[str]:
    """Reject blank labels; an empty canonical label cannot be referenced."""
    for label in labels:
        if not label.strip():
            raise ValueError("Labels must not be blank")
    return labels


class DistanceClass(IntEnum):
    """
    How reachable one entity is from another.

    Ordered from most to least specific, so consumers can filter
    with a threshold (``distance <= DistanceClass.REACHABLE``).
    """

    SELF = 0
    HELD = 1
    HELD_INDIRECT = 2
    IS_LOCATION_OF = 3
    DIRECTLY_HERE = 4
    HERE_INDIRECT = 5
    REACHABLE = 6
    NOT_HERE = 7
    NO_SUCH_ENTITY = 8


class ResolutionKind(str, Enum):
    """Outcome of resolving a typed label."""

    NONE = "none"
    ONE = "one"
    AMBIGUOUS = "ambiguous"


class Resolution(BaseModel):
    """Result of resolving a label to an entity index."""

    kind: ResolutionKind
    index: int | None = Field(default=None, description="Set only for ONE")

    model_config = {"frozen": True}

    @classmethod
    def none(cls) -> Resolution:
        return cls(kind=ResolutionKind.NONE)

    @classmethod
    def one(cls, index: int) -> Resolution:
        return cls(kind=ResolutionKind.ONE, index=index)

    @classmethod
    def ambiguous(cls) -> Resolution:
        return cls(kind=ResolutionKind.AMBIGUOUS)

    @property
    def is_none(self) -> bool:
        return self.kind == ResolutionKind.NONE

    @property
    def is_one(self) -> bool:
        return self.kind == ResolutionKind.ONE

    @property
    def is_ambiguous(self) -> bool:
        return self.kind == ResolutionKind.AMBIGUOUS


class Entity(BaseModel):
    """
    A node in the containment graph: room, prop, passage, or actor.

    Immutable; the EntityStore replaces an entity when it moves.
    """

    labels: list[str] = Field(min_length=1, description="First label is canonical")
    description: str = Field(description="One-line prose shown in listings")
    details: str = Field(default=DEFAULT_DETAILS, description="Shown on inspection")

    # Relations, as indices into the owning store
    location: int | None = Field(default=None, ge=0, description="Containing entity")
    destination: int | None = Field(default=None, ge=0, description="Where a passage leads")
    prospect: int | None = Field(default=None, ge=0, description="What a passage leads toward")

    contents_label: str = DEFAULT_CONTENTS_LABEL
    go_blocked_text: str = DEFAULT_GO_BLOCKED_TEXT

    weight: int = DEFAULT_WEIGHT
    capacity: int = DEFAULT_CAPACITY
    health: int = DEFAULT_HEALTH

    model_config = {"frozen": True}

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str]) -> list[str]:
        return check_labels(v)

    @property
    def canonical_label(self) -> str:
        """The display name and persisted identity of this entity."""
        return self.labels[0]

    def has_label(self, noun: str) -> bool:
        """Check whether the noun names this entity, ignoring case."""
        wanted = noun.lower()
        return any(label.lower() == wanted for label in self.labels)

    def is_actor(self) -> bool:
        """Actors can receive gifts and refuse to hand things over."""
        return self.health > 0

    def is_passage(self) -> bool:
        """Check if this entity leads somewhere."""
        return self.destination is not None or self.prospect is not None


def create_location(
    name: str,
    description: str,
    aliases: list[str] | None = None,
    details: str = DEFAULT_DETAILS,
    contents_label: str = DEFAULT_CONTENTS_LABEL,
    capacity: int = ROOM_CAPACITY,
) -> Entity:
    """Factory function to create a room. Rooms are located nowhere."""
    return Entity(
        labels=[name, *(aliases or [])],
        description=description,
        details=details,
        contents_label=contents_label,
        capacity=capacity,
    )


def create_item(
    name: str,
    description: str,
    location: int,
    aliases: list[str] | None = None,
    details: str = DEFAULT_DETAILS,
    weight: int = 1,
    capacity: int = DEFAULT_CAPACITY,
) -> Entity:
    """Factory function to create a portable (or container) item."""
    return Entity(
        labels=[name, *(aliases or [])],
        description=description,
        details=details,
        location=location,
        weight=weight,
        capacity=capacity,
    )


def create_passage(
    name: str,
    description: str,
    location: int,
    destination: int | None,
    prospect: int | None = None,
    aliases: list[str] | None = None,
    go_blocked_text: str = DEFAULT_GO_BLOCKED_TEXT,
) -> Entity:
    """
    Factory function to create a passage out of a room.

    A passage without destination is a dead end that only shows
    its go_blocked_text; prospect defaults to the destination.
    """
    return Entity(
        labels=[name, *(aliases or [])],
        description=description,
        location=location,
        destination=destination,
        prospect=prospect if prospect is not None else destination,
        go_blocked_text=go_blocked_text,
    )


def create_actor(
    name: str,
    description: str,
    location: int,
    aliases: list[str] | None = None,
    details: str = DEFAULT_DETAILS,
    health: int = 100,
    capacity: int = 20,
) -> Entity:
    """Factory function to create an actor (health > 0)."""
    return Entity(
        labels=[name, *(aliases or [])],
        description=description,
        details=details,
        location=location,
        health=health,
        capacity=capacity,
    )
