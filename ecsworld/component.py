"""The base class of every component an entity can hold."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

__all__ = ["Component"]


class Component(ABC):
    """A data container attached to an entity.

    ``ID`` names the component type as it appears in scene descriptions.
    ``owner`` is the entity holding the component, set by that entity.
    """

    ID: ClassVar[str] = "Component"
    owner: Any = None

    @abstractmethod
    def deserialize(self, data: Any) -> None:
        """Read the component's data from a parsed description."""