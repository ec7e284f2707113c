"""
World File Models for Reentry.

The saved form of the world graph. References are canonical labels
instead of indices, so the file stays readable and hand-editable.
Unknown fields are rejected.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from reentry.models.entity import (
    DEFAULT_CAPACITY,
    DEFAULT_CONTENTS_LABEL,
    DEFAULT_DETAILS,
    DEFAULT_GO_BLOCKED_TEXT,
    DEFAULT_HEALTH,
    DEFAULT_WEIGHT,
    check_labels,
)


class SavedEntity(BaseModel):
    """One entity as it appears in a world file."""

    labels: list[str] = Field(min_length=1)
    description: str

    # Empty string means "no reference"
    location: str = ""
    destination: str = ""
    prospect: str = ""

    details: str = DEFAULT_DETAILS
    contents_label: str = DEFAULT_CONTENTS_LABEL
    go_blocked_text: str = DEFAULT_GO_BLOCKED_TEXT
    weight: int = DEFAULT_WEIGHT
    capacity: int = DEFAULT_CAPACITY
    health: int = DEFAULT_HEALTH

    model_config = {"extra": "forbid"}

    @field_validator("labels")
    @classmethod
    def validate_labels(cls, v: list[str]) -> list[str]:
        return check_labels(v)

    @field_validator("location", "destination", "prospect", mode="before")
    @classmethod
    def blank_reference(cls, v: str | None) -> str:
        """A key left blank in YAML reads as null."""
        return "" if v is None else v

    @property
    def canonical_label(self) -> str:
        return self.labels[0]


class SavedWorld(BaseModel):
    """A whole world file. The first entity is the player."""

    objects: list[SavedEntity] = Field(min_length=1)

    model_config = {"extra": "forbid"}
