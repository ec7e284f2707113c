"""
World file codec for Reentry.

Translates between the runtime graph (index-addressed EntityStore)
and the saved form (label-addressed SavedWorld), and between the
saved form and YAML text.

This is the only module that turns label text into indices.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from reentry.db.memory import EntityStore
from reentry.models import Entity, SavedEntity, SavedWorld

logger = logging.getLogger(__name__)


class WorldLoadError(ValueError):
    """Base error for a world that cannot be loaded."""


class WorldParseError(WorldLoadError):
    """The document is not valid YAML or does not match the schema."""


class UnresolvedReference(WorldLoadError):
    """A reference names no entity in the document."""

    def __init__(self, kind: str, text: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"Unknown {kind} '{text}'")


# =============================================================================
# Graph <-> SavedWorld
# =============================================================================


def _label_of(store: EntityStore, index: int | None) -> str:
    entity = store.get(index)
    return entity.canonical_label if entity else ""


def encode(store: EntityStore) -> SavedWorld:
    """
    Convert the runtime graph into its saved form.

    A prospect equal to the destination is left empty, since decode
    derives it again.
    """
    objects = []
    for entity in store:
        prospect = entity.prospect
        if prospect == entity.destination:
            prospect = None
        objects.append(
            SavedEntity(
                labels=list(entity.labels),
                description=entity.description,
                location=_label_of(store, entity.location),
                destination=_label_of(store, entity.destination),
                prospect=_label_of(store, prospect),
                details=entity.details,
                contents_label=entity.contents_label,
                go_blocked_text=entity.go_blocked_text,
                weight=entity.weight,
                capacity=entity.capacity,
                health=entity.health,
            )
        )
    return SavedWorld(objects=objects)


def _find_label(saved: SavedWorld, kind: str, text: str) -> int | None:
    """Linear search over canonical labels; empty text means no reference."""
    if not text:
        return None
    for index, item in enumerate(saved.objects):
        if item.canonical_label == text:
            return index
    raise UnresolvedReference(kind, text)


def decode(saved: SavedWorld) -> EntityStore:
    """
    Build the runtime graph from its saved form.

    Raises:
        UnresolvedReference: If any reference names no entity. Nothing
            is built in that case.
    """
    _warn_duplicate_labels(saved)

    entities = []
    for item in saved.objects:
        location = _find_label(saved, "location", item.location)
        destination = _find_label(saved, "destination", item.destination)
        prospect = _find_label(saved, "prospect", item.prospect)
        if prospect is None:
            prospect = destination

        entities.append(
            Entity(
                labels=list(item.labels),
                description=item.description,
                details=item.details,
                location=location,
                destination=destination,
                prospect=prospect,
                contents_label=item.contents_label,
                go_blocked_text=item.go_blocked_text,
                weight=item.weight,
                capacity=item.capacity,
                health=item.health,
            )
        )

    store = EntityStore(entities)
    _warn_containment_cycles(store)
    logger.info("Decoded world with %d entities", len(store))
    return store


def _warn_duplicate_labels(saved: SavedWorld) -> None:
    seen: set[str] = set()
    for item in saved.objects:
        label = item.canonical_label
        if label in seen:
            logger.warning(
                "Canonical label '%s' is used more than once; references resolve to the first",
                label,
            )
        seen.add(label)


def _warn_containment_cycles(store: EntityStore) -> None:
    """Containment cycles are allowed but almost always a mistake in the file."""
    for start in store.indices():
        visited = {start}
        current = store.location_of(start)
        while current is not None:
            if current == start:
                logger.warning(
                    "Entity '%s' is (indirectly) contained by itself",
                    store[start].canonical_label,
                )
                break
            if current in visited:
                break
            visited.add(current)
            current = store.location_of(current)


# =============================================================================
# SavedWorld <-> YAML text
# =============================================================================


def parse(text: str) -> SavedWorld:
    """
    Parse YAML text into the saved form.

    Raises:
        WorldParseError: On YAML syntax errors or schema violations
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WorldParseError(f"Invalid world file syntax: {e}") from e

    try:
        return SavedWorld.model_validate(data)
    except ValidationError as e:
        raise WorldParseError(f"Invalid world file: {e}") from e


def render(saved: SavedWorld) -> str:
    """Render the saved form as YAML, leaving out default values."""
    data = saved.model_dump(exclude_defaults=True)
    # labels and description have no defaults, so every entry keeps them
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=100)


def loads(text: str) -> EntityStore:
    """Build the runtime graph from YAML text."""
    return decode(parse(text))


def dumps(store: EntityStore) -> str:
    """Render the runtime graph as YAML text."""
    return render(encode(store))


def load_world(path: str | Path) -> EntityStore:
    """
    Load a world file from disk.

    Raises:
        OSError: If the file cannot be read
        WorldLoadError: If the content is invalid
    """
    path = Path(path)
    logger.info("Loading world file %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise WorldParseError(f"World file is not valid UTF-8: {e}") from e
    return loads(text)


def save_world(store: EntityStore, path: str | Path) -> None:
    """Write the runtime graph to a world file."""
    Path(path).write_text(dumps(store), encoding="utf-8")
