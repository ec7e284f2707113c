"""
In-memory Entity Store for Reentry.

The store is an arena: it owns every entity in an ordered list and
entities refer to each other by position. It is the only place where
an entity's location changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from reentry.models import Entity

# Entity fields that hold indices of other entities
REFERENCE_KINDS = ("location", "destination", "prospect")


class EntityStore:
    """
    Ordered collection of entities addressed by index.

    Entities are added once at construction and never removed;
    moves are edge rewrites through relocate().
    """

    def __init__(self, entities: Iterable[Entity]) -> None:
        self._entities: list[Entity] = list(entities)
        if not self._entities:
            raise ValueError("A world needs at least one entity (the player)")
        for index, entity in enumerate(self._entities):
            for kind in REFERENCE_KINDS:
                ref = getattr(entity, kind)
                if ref is not None and not self.contains_index(ref):
                    raise ValueError(
                        f"Entity {index} ({entity.canonical_label}) has {kind} {ref} "
                        f"outside the store"
                    )

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> Entity:
        if not self.contains_index(index):
            raise IndexError(f"No entity at index {index}")
        return self._entities[index]

    def contains_index(self, index: int | None) -> bool:
        """Check if an index addresses an entity in this store."""
        return index is not None and 0 <= index < len(self._entities)

    def get(self, index: int | None) -> Entity | None:
        """Get an entity by index, or None if there is none."""
        if not self.contains_index(index):
            return None
        return self._entities[index]

    def indices(self) -> range:
        """All valid indices, in order."""
        return range(len(self._entities))

    def location_of(self, index: int | None) -> int | None:
        """Get the index of the entity containing this one."""
        entity = self.get(index)
        return entity.location if entity else None

    def is_holding(self, container: int | None, obj: int | None) -> bool:
        """
        Check if obj is directly contained by container.

        A missing object is never held; a missing container
        holds nothing.
        """
        if container is None or not self.contains_index(obj):
            return False
        return self._entities[obj].location == container

    def contents(self, container: int | None) -> list[int]:
        """Indices of everything directly inside container, in order."""
        return [index for index in self.indices() if self.is_holding(container, index)]

    def weight_of_contents(self, container: int) -> int:
        """Sum of the weights of everything directly inside container."""
        return sum(self._entities[index].weight for index in self.contents(container))

    def relocate(self, index: int, destination: int | None) -> None:
        """Rewrite the location edge of one entity."""
        if destination is not None and not self.contains_index(destination):
            raise IndexError(f"No entity at index {destination}")
        entity = self[index]
        self._entities[index] = entity.model_copy(update={"location": destination})

    def snapshot(self) -> list[dict]:
        """Plain-data copy of the whole graph, for comparisons and debugging."""
        return [entity.model_dump() for entity in self._entities]
