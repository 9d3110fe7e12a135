"""Fixed-function render pipeline options: face culling, depth testing, blending and masks.

Enumerated options are stored by their OpenGL constant names (for example
``"GL_BACK"`` or ``"GL_SRC_ALPHA"``). A name that is not recognised leaves the
current value unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["FaceCulling", "DepthTesting", "Blending", "PipelineState"]

_FACETS = frozenset({"GL_FRONT", "GL_BACK", "GL_FRONT_AND_BACK"})
_FACE_WINDINGS = frozenset({"GL_CW", "GL_CCW"})
_COMPARISON_FUNCTIONS = frozenset(
    {
        "GL_NEVER",
        "GL_LESS",
        "GL_EQUAL",
        "GL_LEQUAL",
        "GL_GREATER",
        "GL_NOTEQUAL",
        "GL_GEQUAL",
        "GL_ALWAYS",
    }
)
_BLEND_EQUATIONS = frozenset(
    {"GL_FUNC_ADD", "GL_FUNC_SUBTRACT", "GL_FUNC_REVERSE_SUBTRACT", "GL_MIN", "GL_MAX"}
)
_BLEND_FUNCTIONS = frozenset(
    {
        "GL_ZERO",
        "GL_ONE",
        "GL_SRC_COLOR",
        "GL_ONE_MINUS_SRC_COLOR",
        "GL_DST_COLOR",
        "GL_ONE_MINUS_DST_COLOR",
        "GL_SRC_ALPHA",
        "GL_ONE_MINUS_SRC_ALPHA",
        "GL_DST_ALPHA",
        "GL_ONE_MINUS_DST_ALPHA",
        "GL_CONSTANT_COLOR",
        "GL_ONE_MINUS_CONSTANT_COLOR",
        "GL_CONSTANT_ALPHA",
        "GL_ONE_MINUS_CONSTANT_ALPHA",
        "GL_SRC_ALPHA_SATURATE",
    }
)


def _bool(config: Mapping[str, Any], key: str, current: bool) -> bool:
    value = config.get(key, current)
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value


def _choice(config: Mapping[str, Any], key: str, allowed: frozenset[str], current: str) -> str:
    name = config.get(key, "")
    if not isinstance(name, str):
        raise TypeError(f"'{key}' must be a string, got {type(name).__name__}")
    return name if name in allowed else current


def _floats4(config: Mapping[str, Any], key: str, current: tuple[float, ...]) -> tuple[float, ...]:
    if key not in config:
        return current
    values = tuple(config[key])
    if len(values) != 4:
        raise ValueError(f"'{key}' must hold exactly 4 numbers")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"'{key}' must hold numbers")
    return tuple(float(v) for v in values)


def _bools4(config: Mapping[str, Any], key: str, current: tuple[bool, ...]) -> tuple[bool, ...]:
    if key not in config:
        return current
    values = tuple(config[key])
    if len(values) != 4:
        raise ValueError(f"'{key}' must hold exactly 4 booleans")
    if not all(isinstance(v, bool) for v in values):
        raise TypeError(f"'{key}' must hold booleans")
    return values


@dataclass
class FaceCulling:
    """Whether faces are culled, which ones, and which winding faces front."""

    enabled: bool = False
    culled_face: str = "GL_BACK"
    front_face: str = "GL_CCW"


@dataclass
class DepthTesting:
    """Whether depth testing is on and the comparison it uses."""

    enabled: bool = False
    function: str = "GL_LEQUAL"


@dataclass
class Blending:
    """Whether blending is on, with its equation, factors and constant color."""

    enabled: bool = False
    equation: str = "GL_FUNC_ADD"
    source_factor: str = "GL_SRC_ALPHA"
    destination_factor: str = "GL_ONE_MINUS_SRC_ALPHA"
    constant_color: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)


@dataclass
class PipelineState:
    """All pipeline options a material needs that shaders cannot control."""

    face_culling: FaceCulling = field(default_factory=FaceCulling)
    depth_testing: DepthTesting = field(default_factory=DepthTesting)
    blending: Blending = field(default_factory=Blending)
    color_mask: tuple[bool, ...] = (True, True, True, True)
    depth_mask: bool = True

    def deserialize(self, data: Any) -> None:
        """Update the options from a mapping; anything else is ignored."""
        if not isinstance(data, Mapping):
            return

        config = data.get("faceCulling")
        if isinstance(config, Mapping):
            culling = self.face_culling
            culling.enabled = _bool(config, "enabled", culling.enabled)
            culling.culled_face = _choice(config, "culledFace", _FACETS, culling.culled_face)
            culling.front_face = _choice(config, "frontFace", _FACE_WINDINGS, culling.front_face)

        config = data.get("depthTesting")
        if isinstance(config, Mapping):
            depth = self.depth_testing
            depth.enabled = _bool(config, "enabled", depth.enabled)
            depth.function = _choice(config, "function", _COMPARISON_FUNCTIONS, depth.function)

        config = data.get("blending")
        if isinstance(config, Mapping):
            blend = self.blending
            blend.enabled = _bool(config, "enabled", blend.enabled)
            blend.equation = _choice(config, "equation", _BLEND_EQUATIONS, blend.equation)
            blend.source_factor = _choice(
                config, "sourceFactor", _BLEND_FUNCTIONS, blend.source_factor
            )
            blend.destination_factor = _choice(
                config, "destinationFactor", _BLEND_FUNCTIONS, blend.destination_factor
            )
            blend.constant_color = _floats4(config, "constantColor", blend.constant_color)

        self.color_mask = _bools4(data, "colorMask", self.color_mask)
        self.depth_mask = _bool(data, "depthMask", self.depth_mask)