"""4x4 homogeneous transformation matrices using the column-vector convention.

Every function returns a ``numpy`` array of shape ``(4, 4)`` meant to be
applied as ``matrix @ point`` where ``point`` is ``(x, y, z, w)``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

__all__ = ["translate", "scale", "yaw_pitch_roll", "look_at", "perspective", "ortho"]


def _as_vec3(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must hold exactly 3 numbers, got shape {arr.shape}")
    return arr


def _normalized(vector: np.ndarray, name: str) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError(f"{name} is degenerate and cannot be normalized")
    return vector / length


def translate(offset: Sequence[float]) -> np.ndarray:
    """Return a matrix that moves points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _as_vec3(offset, "offset")
    return matrix


def scale(factors: Sequence[float]) -> np.ndarray:
    """Return a matrix that scales each axis by the matching factor."""
    matrix = np.identity(4)
    matrix[0, 0], matrix[1, 1], matrix[2, 2] = _as_vec3(factors, "factors")
    return matrix


def yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Return the rotation ``Ry(yaw) @ Rx(pitch) @ Rz(roll)`` (angles in radians)."""
    ch, sh = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cb, sb = math.cos(roll), math.sin(roll)
    return np.array(
        [
            [ch * cb + sh * sp * sb, -ch * sb + sh * sp * cb, sh * cp, 0.0],
            [sb * cp, cb * cp, -sp, 0.0],
            [-sh * cb + ch * sp * sb, sb * sh + ch * sp * cb, ch * cp, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _as_vec3(eye, "eye")
    forward = _normalized(_as_vec3(center, "center") - eye_v, "center - eye")
    side = _normalized(np.cross(forward, _as_vec3(up, "up")), "forward x up")
    true_up = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(side @ eye_v)
    matrix[1, 3] = -float(true_up @ eye_v)
    matrix[2, 3] = float(forward @ eye_v)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Return a 2D orthographic projection of the given box onto [-1, 1]."""
    if right == left or top == bottom:
        raise ValueError("orthographic box must have non-zero width and height")
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -1.0
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    return matrix