"""Named asset stores and a library that fills them from a description.

The description has the form::

    {
        "shaders":   {name: {"vs": "path/to/vertex", "fs": "path/to/fragment"}, ...},
        "textures":  {name: "path/to/image", ...},
        "samplers":  {name: {parameter: value, ...}, ...},
        "meshes":    {name: "path/to/model.obj", ...},
        "materials": {name: {"type": ..., "shader": ..., ...}, ...},
    }

Materials refer to shaders, textures and samplers by name, so those are
loaded first.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, Generic, NamedTuple, Optional, TypeVar

from ecsworld.material import Material, create_material_from_type
from ecsworld.mesh import Mesh, load_obj

__all__ = ["AssetStore", "AssetLibrary"]

T = TypeVar("T")


class _ShaderSources(NamedTuple):
    vertex: str
    fragment: str


class AssetStore(Generic[T]):
    """A mapping from asset names to assets of one kind."""

    def __init__(self) -> None:
        self._assets: dict[str, T] = {}

    def get(self, name: str) -> Optional[T]:
        """Return the asset called ``name``, or ``None`` if there is none."""
        return self._assets.get(name)

    def register(self, name: str, asset: T) -> None:
        """Store ``asset`` under ``name``, replacing any asset of that name."""
        self._assets[name] = asset

    def clear(self) -> None:
        """Forget every asset."""
        self._assets.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


class AssetLibrary:
    """Stores for every asset kind: shaders, textures, samplers, meshes and materials."""

    def __init__(self) -> None:
        self.shaders: AssetStore[_ShaderSources] = AssetStore()
        self.textures: AssetStore[Path] = AssetStore()
        self.samplers: AssetStore[dict[str, Any]] = AssetStore()
        self.meshes: AssetStore[Mesh] = AssetStore()
        self.materials: AssetStore[Material] = AssetStore()

    def deserialize(self, data: Any) -> None:
        """Load every asset kind present in ``data``; anything but a mapping is ignored."""
        if not isinstance(data, Mapping):
            return
        if "shaders" in data:
            self._load_shaders(data["shaders"])
        if "textures" in data:
            self._load_textures(data["textures"])
        if "samplers" in data:
            self._load_samplers(data["samplers"])
        if "meshes" in data:
            self._load_meshes(data["meshes"])
        if "materials" in data:
            self._load_materials(data["materials"])

    def clear(self) -> None:
        """Empty every store."""
        for store in (self.shaders, self.textures, self.samplers, self.meshes, self.materials):
            store.clear()

    def _load_shaders(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for name, desc in data.items():
            desc = _mapping(desc, f"shader '{name}'")
            sources = _ShaderSources(
                vertex=_string(desc.get("vs", ""), f"shader '{name}' vs"),
                fragment=_string(desc.get("fs", ""), f"shader '{name}' fs"),
            )
            self.shaders.register(name, sources)

    def _load_textures(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for name, desc in data.items():
            self.textures.register(name, Path(_string(desc, f"texture '{name}'")))

    def _load_samplers(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for name, desc in data.items():
            self.samplers.register(name, dict(_mapping(desc, f"sampler '{name}'")))

    def _load_meshes(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for name, desc in data.items():
            self.meshes.register(name, load_obj(_string(desc, f"mesh '{name}'")))

    def _load_materials(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for name, desc in data.items():
            desc = _mapping(desc, f"material '{name}'")
            material = create_material_from_type(_string(desc.get("type", ""), "material type"))
            material.deserialize(desc, self)
            self.materials.register(name, material)