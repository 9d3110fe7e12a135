"""The component types an entity can hold, and creation of components from descriptions."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

import numpy as np

from ecsworld.camera import CameraComponent
from ecsworld.component import Component

__all__ = [
    "FreeCameraControllerComponent",
    "MovementComponent",
    "LightType",
    "Attenuation",
    "SpotAngle",
    "SkyLight",
    "LightComponent",
    "CollisionComponent",
    "MeshRendererComponent",
    "deserialize_component",
]


def _number(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _vector(data: Mapping[str, Any], key: str, default: Sequence[float], size: int) -> np.ndarray:
    if key not in data:
        return np.array(default, dtype=float)
    values = data[key]
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise TypeError(f"'{key}' must be a list of {size} numbers")
    if len(values) != size:
        raise ValueError(f"'{key}' must hold exactly {size} numbers")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"'{key}' must hold numbers")
    return np.array(values, dtype=float)


def _name(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise KeyError(f"missing required key '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(eq=False)
class FreeCameraControllerComponent(Component):
    """Lets user input move the owner and change the camera field of view."""

    ID: ClassVar[str] = "Free Camera Controller"

    rotation_sensitivity: float = 0.01
    fov_sensitivity: float = 0.3
    position_sensitivity: np.ndarray = field(default_factory=lambda: np.full(3, 3.0))
    speedup_factor: float = 4.0

    def deserialize(self, data: Any) -> None:
        """Read sensitivities and the speedup factor, keeping absent values."""
        if not isinstance(data, Mapping):
            return
        self.rotation_sensitivity = _number(data, "rotationSensitivity", self.rotation_sensitivity)
        self.fov_sensitivity = _number(data, "fovSensitivity", self.fov_sensitivity)
        self.position_sensitivity = _vector(
            data, "positionSensitivity", self.position_sensitivity, 3
        )
        self.speedup_factor = _number(data, "speedupFactor", self.speedup_factor)


@dataclass(eq=False)
class MovementComponent(Component):
    """Moves and rotates the owner at constant velocities."""

    ID: ClassVar[str] = "Movement"

    linear_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def deserialize(self, data: Any) -> None:
        """Read the linear velocity and the angular velocity (given in degrees)."""
        if not isinstance(data, Mapping):
            return
        self.linear_velocity = _vector(data, "linearVelocity", self.linear_velocity, 3)
        if "angularVelocity" in data:
            self.angular_velocity = np.radians(_vector(data, "angularVelocity", (), 3))


class LightType(enum.Enum):
    DIRECTIONAL = "directional"
    POINT = "point"
    SPOT = "spot"
    SKY = "sky"


@dataclass
class Attenuation:
    constant: float = 1.0
    linear: float = 0.0
    quadratic: float = 0.0


@dataclass
class SpotAngle:
    inner: float = 0.0
    outer: float = 0.0


@dataclass(eq=False)
class SkyLight:
    top_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    middle_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    bottom_color: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass(eq=False)
class LightComponent(Component):
    """A light source: directional, point, spot or sky."""

    ID: ClassVar[str] = "Light"

    light_type: LightType = LightType.DIRECTIONAL
    enabled: bool = False
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))
    color: np.ndarray = field(default_factory=lambda: np.ones(3))
    attenuation: Attenuation = field(default_factory=Attenuation)
    spot_angle: SpotAngle = field(default_factory=SpotAngle)
    sky_light: SkyLight = field(default_factory=SkyLight)

    def deserialize(self, data: Any) -> None:
        """Read the light; raises ValueError for a missing or unknown ``lightType``."""
        if not isinstance(data, Mapping):
            return
        type_name = data.get("lightType", "")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise TypeError("'enabled' must be a boolean")
        self.enabled = enabled
        self.color = _vector(data, "color", (1.0, 1.0, 1.0), 3)

        if not isinstance(type_name, str):
            raise TypeError("'lightType' must be a string")
        try:
            light_type = LightType(type_name)
        except ValueError:
            raise ValueError(f"Unknown light type {type_name}") from None
        self.light_type = light_type

        if light_type is LightType.DIRECTIONAL:
            self.direction = _vector(data, "direction", self.direction, 3)
            a = _vector(data, "attenuation", (1.0, 1.0, 1.0), 3)
            self.attenuation = Attenuation(constant=a[0], linear=a[1], quadratic=a[2])
        elif light_type is LightType.POINT:
            a = _vector(data, "attenuation", (1.0, 1.0, 1.0), 3)
            self.direction = _vector(data, "direction", self.direction, 3)
            self.attenuation = Attenuation(constant=a[2], linear=a[1], quadratic=a[0])
        elif light_type is LightType.SPOT:
            self.direction = _vector(data, "direction", (0.0, 0.0, 0.0), 3)
            a = _vector(data, "attenuation", (1.0, 1.0, 1.0), 3)
            self.attenuation = Attenuation(constant=a[0], linear=a[1], quadratic=a[2])
            inner, outer = _vector(data, "cone_angles", (0.0, 0.0), 2)
            self.spot_angle = SpotAngle(inner=float(inner), outer=float(outer))
        else:
            self.direction = _vector(data, "direction", (0.0, 0.0, 0.0), 3)
            self.sky_light = SkyLight(
                top_color=_vector(data, "sky_light_top", (0.0, 0.0, 0.0), 3),
                middle_color=_vector(data, "sky_light_middle", (0.0, 0.0, 0.0), 3),
                bottom_color=_vector(data, "sky_light_bottom", (0.0, 0.0, 0.0), 3),
            )


@dataclass(eq=False)
class CollisionComponent(Component):
    """Marks its owner as taking part in collisions; it carries no data."""

    ID: ClassVar[str] = "Collision"

    def deserialize(self, data: Any) -> None:
        """Nothing is read."""


@dataclass(eq=False)
class MeshRendererComponent(Component):
    """Draws a mesh with a material at the owner's transformation.

    Names are resolved in ``assets`` if set, otherwise in the owner's asset
    library or that of the owner's world.
    """

    ID: ClassVar[str] = "Mesh Renderer"

    mesh: Any = None
    material: Any = None
    assets: Any = None

    def _library(self) -> Any:
        if self.assets is not None:
            return self.assets
        owner = self.owner
        if owner is not None:
            library = getattr(owner, "assets", None)
            if library is None:
                library = getattr(getattr(owner, "world", None), "assets", None)
            if library is not None:
                return library
        raise RuntimeError("no asset library to resolve the mesh and material from")

    def deserialize(self, data: Any) -> None:
        """Look up the mesh and material named by ``mesh`` and ``material``."""
        if not isinstance(data, Mapping):
            return
        mesh_name = _name(data, "mesh")
        material_name = _name(data, "material")
        library = self._library()
        self.mesh = library.meshes.get(mesh_name)
        self.material = library.materials.get(material_name)


_DESERIALIZABLE: dict[str, type[Component]] = {
    cls.ID: cls
    for cls in (
        CameraComponent,
        FreeCameraControllerComponent,
        MovementComponent,
        MeshRendererComponent,
        LightComponent,
    )
}


def deserialize_component(data: Mapping[str, Any], entity: Any) -> Optional[Component]:
    """Add the component named by ``data["type"]`` to ``entity`` and read it.

    Returns the new component, or ``None`` when the type is not recognised.
    """
    if not isinstance(data, Mapping):
        raise TypeError("component data must be a mapping")
    component_type = _DESERIALIZABLE.get(data.get("type", ""))
    if component_type is None:
        return None
    component = entity.add_component(component_type)
    component.deserialize(data)
    return component