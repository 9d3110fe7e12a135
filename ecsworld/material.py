"""Materials: a pipeline state, a shader and the inputs that shader needs.

Assets referenced by name are looked up in an asset collection that exposes
``shaders``, ``textures`` and ``samplers``, each with a ``get(name)`` method
returning the asset or ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from ecsworld.pipeline import PipelineState

__all__ = [
    "Material",
    "TintedMaterial",
    "TexturedMaterial",
    "LightMaterial",
    "create_material_from_type",
]


class _Lookup(Protocol):
    def get(self, name: str) -> Any: ...


class _Assets(Protocol):
    shaders: _Lookup
    textures: _Lookup
    samplers: _Lookup


def _name(data: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    if key not in data:
        if default is None:
            raise KeyError(f"material is missing required key '{key}'")
        return default
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(eq=False)
class Material:
    """Base material: pipeline state, shader program and transparency flag."""

    pipeline_state: PipelineState = field(default_factory=PipelineState)
    shader: Any = None
    transparent: bool = False

    def deserialize(self, data: Any, assets: _Assets) -> None:
        """Read the material from a mapping; anything else is ignored."""
        if not isinstance(data, Mapping):
            return
        if "pipelineState" in data:
            self.pipeline_state.deserialize(data["pipelineState"])
        self.shader = assets.shaders.get(_name(data, "shader"))
        transparent = data.get("transparent", False)
        if not isinstance(transparent, bool):
            raise TypeError("'transparent' must be a boolean")
        self.transparent = transparent


@dataclass(eq=False)
class TintedMaterial(Material):
    """A material whose whole surface takes a single RGBA tint."""

    tint: tuple[float, ...] = (1.0, 1.0, 1.0, 1.0)

    def deserialize(self, data: Any, assets: _Assets) -> None:
        super().deserialize(data, assets)
        if not isinstance(data, Mapping):
            return
        tint = tuple(data.get("tint", (1.0, 1.0, 1.0, 1.0)))
        if len(tint) != 4:
            raise ValueError("'tint' must hold exactly 4 numbers")
        self.tint = tuple(float(c) for c in tint)


@dataclass(eq=False)
class TexturedMaterial(TintedMaterial):
    """A tinted material sampling a texture, discarding pixels below an alpha threshold."""

    texture: Any = None
    sampler: Any = None
    alpha_threshold: float = 0.0

    def deserialize(self, data: Any, assets: _Assets) -> None:
        super().deserialize(data, assets)
        if not isinstance(data, Mapping):
            return
        self.alpha_threshold = float(data.get("alphaThreshold", 0.0))
        self.texture = assets.textures.get(_name(data, "texture", ""))
        self.sampler = assets.samplers.get(_name(data, "sampler", ""))


@dataclass(eq=False)
class LightMaterial(TexturedMaterial):
    """A textured material with maps used for lighting."""

    albedo_map: Any = None
    specular_map: Any = None
    ambient_occlusion_map: Any = None
    roughness_map: Any = None
    emissive_map: Any = None

    def deserialize(self, data: Any, assets: _Assets) -> None:
        super().deserialize(data, assets)
        if not isinstance(data, Mapping):
            return
        textures = assets.textures
        self.albedo_map = textures.get(_name(data, "albedo", ""))
        self.specular_map = textures.get(_name(data, "specular", ""))
        self.emissive_map = textures.get(_name(data, "emissive", ""))
        self.roughness_map = textures.get(_name(data, "roughness", ""))
        self.ambient_occlusion_map = textures.get(_name(data, "ambient_occlusion", ""))


_MATERIAL_TYPES: dict[str, type[Material]] = {
    "tinted": TintedMaterial,
    "textured": TexturedMaterial,
    "lighted": LightMaterial,
}


def create_material_from_type(type_name: str) -> Material:
    """Return a new material for the type name; unknown names give a plain Material."""
    return _MATERIAL_TYPES.get(type_name, Material)()