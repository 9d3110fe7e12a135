"""Translation, rotation and scale of an object relative to its parent."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ecsworld.matrices import scale as scale_matrix
from ecsworld.matrices import translate, yaw_pitch_roll

__all__ = ["Transform"]


def _vec3(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must hold exactly 3 numbers, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation in radians (x pitch, y yaw, z roll) and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position, "position")
        self.rotation = _vec3(self.rotation, "rotation")
        self.scale = _vec3(self.scale, "scale")

    def to_mat4(self) -> np.ndarray:
        """Return the matrix applying scale, then rotation, then translation."""
        pitch, yaw, roll = self.rotation
        return translate(self.position) @ yaw_pitch_roll(yaw, pitch, roll) @ scale_matrix(self.scale)

    def deserialize(self, data: Mapping[str, Any]) -> None:
        """Read position, rotation (in degrees) and scale, keeping absent values."""
        if not isinstance(data, Mapping):
            raise TypeError("transform data must be a mapping")
        if "position" in data:
            self.position = _vec3(data["position"], "position")
        if "rotation" in data:
            self.rotation = np.radians(_vec3(data["rotation"], "rotation"))
        if "scale" in data:
            self.scale = _vec3(data["scale"], "scale")