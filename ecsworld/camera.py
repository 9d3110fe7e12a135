"""A component marking its entity as the camera the scene is drawn from."""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from ecsworld.component import Component
from ecsworld.matrices import look_at, ortho, perspective

__all__ = ["CameraType", "CameraComponent"]


class CameraType(enum.Enum):
    ORTHOGRAPHIC = "orthographic"
    PERSPECTIVE = "perspective"


def _number(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(eq=False)
class CameraComponent(Component):
    """Camera parameters; eye, center and up come from the owner's transform."""

    ID: ClassVar[str] = "Camera"

    camera_type: CameraType = CameraType.PERSPECTIVE
    near: float = 0.01
    far: float = 100.0
    fov_y: float = math.pi / 2
    ortho_height: float = 1.0

    def deserialize(self, data: Any) -> None:
        """Read the camera from a mapping; absent keys take their defaults."""
        if not isinstance(data, Mapping):
            return
        type_name = data.get("cameraType", "perspective")
        self.camera_type = (
            CameraType.ORTHOGRAPHIC if type_name == "orthographic" else CameraType.PERSPECTIVE
        )
        self.near = _number(data, "near", 0.01)
        self.far = _number(data, "far", 100.0)
        self.fov_y = math.radians(_number(data, "fovY", 90.0))
        self.ortho_height = _number(data, "orthoHeight", 1.0)

    def view_matrix(self) -> np.ndarray:
        """Return the matrix from world space to this camera's space."""
        if self.owner is None:
            raise RuntimeError("camera has no owning entity")
        m = np.asarray(self.owner.local_to_world_matrix(), dtype=float)
        eye = (m @ np.array([0.0, 0.0, 0.0, 1.0]))[:3]
        center = (m @ np.array([0.0, 0.0, -1.0, 1.0]))[:3]
        up = (m @ np.array([0.0, 1.0, 0.0, 0.0]))[:3]
        return look_at(eye, center, up)

    def projection_matrix(self, viewport_size: Sequence[int]) -> np.ndarray:
        """Return the projection for a viewport of ``(width, height)`` pixels."""
        width, height = viewport_size
        if height == 0:
            raise ValueError("viewport height must not be zero")
        aspect = width / height
        if self.camera_type is CameraType.ORTHOGRAPHIC:
            half = self.ortho_height / 2
            return ortho(-half * aspect, half * aspect, -half, half)
        return perspective(self.fov_y, aspect, self.near, self.far)