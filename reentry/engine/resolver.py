"""Reference Resolver: maps a typed label to an entity index."""

from __future__ import annotations

from reentry.db.memory import EntityStore
from reentry.engine.reachability import distance
from reentry.models import DistanceClass, Resolution


def resolve(
    store: EntityStore,
    label: str,
    origin: int | None,
    max_distance: DistanceClass,
) -> Resolution:
    """
    Resolve a label among entities no further than max_distance from origin.

    Two or more matches are always ambiguous; there is no tie-breaking.
    """
    found: int | None = None
    for index, entity in enumerate(store):
        if not entity.has_label(label):
            continue
        if distance(store, origin, index) > max_distance:
            continue
        if found is not None:
            return Resolution.ambiguous()
        found = index

    if found is None:
        return Resolution.none()
    return Resolution.one(found)
