# ecsworld

An entity-component-system scene model. A scene is a set of entities with
transforms arranged in a parent/child hierarchy, each carrying components
such as cameras, lights, movement, free-camera controllers, colliders and
mesh renderers. Scenes, assets, materials and pipeline options are read from
plain JSON-style dictionaries and lists. Matrix work is done with numpy;
matrices are 4×4 arrays applied as `matrix @ point`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ecsworld.matrices`: `translate(offset)`, `scale(factors)`,
  `yaw_pitch_roll(yaw, pitch, roll)` (the rotation `Ry @ Rx @ Rz`, radians),
  `look_at(eye, center, up)`, `perspective(fovy, aspect, near, far)` and
  `ortho(left, right, bottom, top)`. Degenerate input raises `ValueError`.
- `ecsworld.transform.Transform`: `position`, `rotation` (Euler angles in
  radians: x pitch, y yaw, z roll) and `scale`. `to_mat4()` returns
  translation @ rotation @ scale. `deserialize(data)` reads `position`,
  `rotation` (given in degrees) and `scale`, keeping absent values.
- `ecsworld.mesh`: the frozen `Vertex` (position, RGBA8 color, texture
  coordinate, normal); `Mesh`, an indexed triangle list whose `triangles()`
  yields vertex triples (nothing when `enabled` is false);
  `load_obj(filename)`, which reads a Wavefront OBJ file, fan-triangulates
  polygons, merges identical vertices and takes optional per-vertex colors
  from `v x y z r g b`; and `sphere(segments)`, a unit UV sphere for
  `(longitude, latitude)` divisions with counter-clockwise triangles.
- `ecsworld.pipeline`: `PipelineState` with `FaceCulling`, `DepthTesting`,
  `Blending`, `color_mask` and `depth_mask`. Enumerated options are held by
  their OpenGL constant names (`"GL_BACK"`, `"GL_SRC_ALPHA"`, ...); an
  unknown name leaves the current value unchanged.
- `ecsworld.material`: `Material`, `TintedMaterial`, `TexturedMaterial` and
  `LightMaterial`, each with `deserialize(data, assets)`, and
  `create_material_from_type(type_name)` (`"tinted"`, `"textured"`,
  `"lighted"`; anything else gives a plain `Material`).
- `ecsworld.assets`: `AssetStore` (named assets of one kind, with `get`,
  `register`, `clear`, `in`, `len` and iteration) and `AssetLibrary`, whose
  `deserialize(data)` fills its `shaders`, `textures`, `samplers`, `meshes`
  and `materials` stores, loading materials last so they can refer to the
  others by name.
- `ecsworld.component.Component`: the abstract base of every component, with
  a class-level `ID` and an `owner`.
- `ecsworld.camera`: `CameraType` and `CameraComponent`, whose
  `view_matrix()` is derived from the owner's local-to-world matrix and whose
  `projection_matrix((width, height))` is perspective or orthographic.
- `ecsworld.components`: `FreeCameraControllerComponent`,
  `MovementComponent`, `LightComponent` (with `LightType`, `Attenuation`,
  `SpotAngle`, `SkyLight`), `CollisionComponent`, `MeshRendererComponent`
  and `deserialize_component(data, entity)`, which creates the component
  named by `data["type"]` (`"Camera"`, `"Free Camera Controller"`,
  `"Movement"`, `"Mesh Renderer"`, `"Light"`) and returns it, or `None` for
  any other type. An unknown `lightType` raises `ValueError`.
- `ecsworld.entity.Entity`: name, parent, `local_transform` and components,
  with `add_component`, `get_component`, `get_component_at`,
  `delete_component`, `delete_component_at`, `remove_component`,
  `local_to_world_matrix()`, `world_translation()` and `deserialize(data)`.
- `ecsworld.world.World`: a set of entities with `add`, `deserialize(data,
  parent)` (recursing into `children`), `entity_by_name`,
  `mark_for_removal`, `mark_for_removal_by_name`, `unmark_removal`,
  `is_marked_for_removal`, `delete_marked_entities` and `clear`. Marked
  entities stay in the world until `delete_marked_entities()` is called.
- `ecsworld.game_controller.GameController`: a battery count from 5 down to
  0 that sets the player speed (3.0, 2.5, 2.0, 1.7, 1.5) and marks or
  unmarks the entities named `plane1` … `plane5` for removal. Losing the
  last battery calls `change_state("gameover")` on the application passed
  to `enter(app, world)` and returns 0.0.

## Example

```python
from ecsworld.camera import CameraComponent
from ecsworld.world import World

world = World()
world.deserialize([
    {
        "name": "player",
        "position": [0, 1, 5],
        "components": [{"type": "Movement", "linearVelocity": [0, 0, -1]}],
        "children": [
            {
                "name": "eye",
                "components": [{"type": "Camera", "fovY": 90, "near": 0.1, "far": 100}],
            }
        ],
    }
])

eye = world.entity_by_name("eye")
camera = eye.get_component(CameraComponent)
view = camera.view_matrix()
projection = camera.projection_matrix((1280, 720))
print(eye.world_translation())  # [0. 1. 5.]
```

Assets are loaded into an `AssetLibrary`; a `World` given that library lets
`"Mesh Renderer"` components resolve their mesh and material names:

```python
from ecsworld.assets import AssetLibrary
from ecsworld.world import World

library = AssetLibrary()
library.deserialize({
    "shaders": {"flat": {"vs": "flat.vert", "fs": "flat.frag"}},
    "materials": {"red": {"type": "tinted", "shader": "flat", "tint": [1, 0, 0, 1]}},
})
print(library.materials.get("red").tint)  # (1.0, 0.0, 0.0, 1.0)

world = World(assets=library)
```

## What this package does not do

It is a scene model only. It opens no window, runs no frame loop, draws
nothing and talks to no graphics driver. Shaders are kept as pairs of
vertex and fragment file paths and are not read or compiled; textures are
kept as paths and their images are not decoded; samplers are kept as the
parameter dictionaries they were given. There is no application class: the
object handed to `GameController.enter` must provide `change_state` itself.