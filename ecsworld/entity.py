"""Entities: named, transformable holders of components arranged in a hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

import numpy as np

from ecsworld.component import Component
from ecsworld.components import deserialize_component
from ecsworld.transform import Transform

__all__ = ["Entity"]

C = TypeVar("C", bound=Component)


class Entity:
    """An object in a world whose role is given by the components it owns.

    ``parent`` is the entity its transform is relative to, or ``None`` for a
    root entity.
    """

    def __init__(
        self,
        world: Any = None,
        name: str = "",
        parent: Optional[Entity] = None,
        assets: Any = None,
    ) -> None:
        self.world = world
        self.name = name
        self.parent = parent
        self.assets = assets
        self.local_transform = Transform()
        self.components: list[Component] = []

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, components={len(self.components)})"

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of the given type, owned by this entity, and return it."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError("component_type must be a Component subclass")
        component = component_type()
        component.owner = self
        self.components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        """Return the first component of the given type, or ``None``."""
        return next((c for c in self.components if isinstance(c, component_type)), None)

    def get_component_at(self, index: int, component_type: type[C]) -> Optional[C]:
        """Return the component at ``index`` if it has the given type, else ``None``."""
        if not 0 <= index < len(self.components):
            return None
        component = self.components[index]
        return component if isinstance(component, component_type) else None

    def _detach(self, component: Component) -> None:
        component.owner = None

    def delete_component(self, component_type: type[Component]) -> None:
        """Remove every component of the given type."""
        kept = []
        for component in self.components:
            if isinstance(component, component_type):
                self._detach(component)
            else:
                kept.append(component)
        self.components = kept

    def delete_component_at(self, index: int) -> None:
        """Remove the component at ``index``; an index out of range does nothing."""
        if 0 <= index < len(self.components):
            self._detach(self.components.pop(index))

    def remove_component(self, component: Component) -> None:
        """Remove the given component if this entity holds it."""
        for position, held in enumerate(self.components):
            if held is component:
                del self.components[position]
                self._detach(held)
                return

    def _lineage(self):
        entity: Optional[Entity] = self
        while entity is not None:
            yield entity
            entity = entity.parent

    def local_to_world_matrix(self) -> np.ndarray:
        """Return the matrix from this entity's space to world space."""
        matrix = np.identity(4)
        for entity in self._lineage():
            matrix = entity.local_transform.to_mat4() @ matrix
        return matrix

    def world_translation(self) -> np.ndarray:
        """Return the sum of the positions of this entity and all its ancestors."""
        return sum(
            (entity.local_transform.position for entity in self._lineage()), start=np.zeros(3)
        )

    def deserialize(self, data: Any) -> None:
        """Read the name, transform and components; anything but a mapping is ignored."""
        if not isinstance(data, Mapping):
            return
        name = data.get("name", self.name)
        if not isinstance(name, str):
            raise TypeError("'name' must be a string")
        self.name = name
        self.local_transform.deserialize(data)
        components = data.get("components")
        if isinstance(components, list):
            for component_data in components:
                deserialize_component(component_data, self)