"""
Reachability Classifier for Reentry.

Classifies how close one entity is to another by looking at most
two containment hops in either direction, plus the passages leading
out of the origin's room.
"""

from __future__ import annotations

from reentry.db.memory import EntityStore
from reentry.models import DistanceClass


def passage_toward(store: EntityStore, room: int | None, target: int | None) -> int | None:
    """
    Find the first passage in a room whose prospect is the target.

    Returns:
        Index of the passage, or None if the room has none leading there
    """
    if room is None or target is None:
        return None
    for index in store.contents(room):
        if store[index].prospect == target:
            return index
    return None


def distance(store: EntityStore, from_index: int | None, to_index: int | None) -> DistanceClass:
    """
    Classify the distance from one entity to another.

    Args:
        store: The world graph
        from_index: Origin entity (usually the player)
        to_index: Entity being classified

    Returns:
        The most specific DistanceClass that applies
    """
    if not store.contains_index(to_index):
        return DistanceClass.NO_SUCH_ENTITY
    if to_index == from_index:
        return DistanceClass.SELF

    from_loc = store.location_of(from_index)
    to_loc = store.location_of(to_index)

    if store.is_holding(from_index, to_index):
        return DistanceClass.HELD
    if store.is_holding(to_index, from_index):
        return DistanceClass.IS_LOCATION_OF
    if store.is_holding(from_loc, to_index):
        return DistanceClass.DIRECTLY_HERE
    if store.is_holding(from_index, to_loc):
        return DistanceClass.HELD_INDIRECT
    if store.is_holding(from_loc, to_loc):
        return DistanceClass.HERE_INDIRECT
    if passage_toward(store, from_loc, to_index) is not None:
        return DistanceClass.REACHABLE
    return DistanceClass.NOT_HERE
