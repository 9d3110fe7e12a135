"""A world: the set of entities in a scene, with deferred removal."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from ecsworld.entity import Entity

__all__ = ["World"]


class World:
    """Owns a set of entities.

    Entities marked for removal stay in the world until
    :meth:`delete_marked_entities` is called. ``assets`` is the asset library
    that components of this world's entities resolve names from.
    """

    def __init__(self, assets: Any = None) -> None:
        self.assets = assets
        # Dicts keep insertion order, which makes iteration deterministic.
        self._entities: dict[Entity, None] = {}
        self._marked_for_removal: dict[Entity, None] = {}

    def __iter__(self) -> Iterator[Entity]:
        return iter(tuple(self._entities))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    @property
    def entities(self) -> tuple[Entity, ...]:
        """All entities currently in the world."""
        return tuple(self._entities)

    @property
    def marked_for_removal(self) -> tuple[Entity, ...]:
        """Entities waiting to be deleted."""
        return tuple(self._marked_for_removal)

    def add(self) -> Entity:
        """Create a new entity owned by this world and return it."""
        entity = Entity(world=self)
        self._entities[entity] = None
        return entity

    def deserialize(self, data: Any, parent: Optional[Entity] = None) -> None:
        """Add the entities described by a list, recursing into their ``children``.

        The new entities get ``parent`` as their parent. Anything but a list
        is ignored.
        """
        if not isinstance(data, list):
            return
        for entity_data in data:
            entity = self.add()
            entity.parent = parent
            entity.deserialize(entity_data)
            if isinstance(entity_data, Mapping) and "children" in entity_data:
                self.deserialize(entity_data["children"], entity)

    def entity_by_name(self, name: str) -> Optional[Entity]:
        """Return an entity with the given name, or ``None``."""
        return next((e for e in self._entities if e.name == name), None)

    def mark_for_removal_by_name(self, name: str) -> None:
        """Mark every entity with the given name for removal."""
        for entity in self._entities:
            if entity.name == name:
                self.mark_for_removal(entity)

    def unmark_removal(self, name: str) -> None:
        """Take every entity with the given name off the removal list."""
        for entity in self._entities:
            if entity.name == name:
                self._marked_for_removal.pop(entity, None)

    def mark_for_removal(self, entity: Entity) -> None:
        """Mark an entity of this world for removal; others are ignored."""
        if entity in self._entities:
            self._marked_for_removal[entity] = None

    def is_marked_for_removal(self, entity: Entity) -> bool:
        """Return whether the entity is waiting to be deleted."""
        return entity in self._marked_for_removal

    def delete_marked_entities(self) -> None:
        """Remove every marked entity from the world."""
        for entity in self._marked_for_removal:
            self._entities.pop(entity, None)
            entity.world = None
        self._marked_for_removal.clear()

    def clear(self) -> None:
        """Remove every entity."""
        for entity in self._entities:
            entity.world = None
        self._entities.clear()
        self._marked_for_removal.clear()