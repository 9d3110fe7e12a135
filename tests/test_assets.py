from pathlib import Path

import pytest

from ecsworld.assets import AssetLibrary, AssetStore
from ecsworld.material import LightMaterial, Material, TintedMaterial


OBJ_TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


def test_store_get_missing_returns_none():
    store = AssetStore()
    assert store.get("nothing") is None


def test_store_register_and_get():
    store = AssetStore()
    asset = object()
    store.register("a", asset)
    assert store.get("a") is asset
    assert "a" in store
    assert len(store) == 1


def test_store_register_replaces():
    store = AssetStore()
    first, second = object(), object()
    store.register("a", first)
    store.register("a", second)
    assert store.get("a") is second
    assert len(store) == 1


def test_store_clear_empties():
    store = AssetStore()
    store.register("a", 1)
    store.register("b", 2)
    store.clear()
    assert len(store) == 0
    assert store.get("a") is None


def test_store_iterates_names():
    store = AssetStore()
    store.register("x", 1)
    store.register("y", 2)
    assert sorted(store) == ["x", "y"]


def test_library_ignores_non_mapping():
    library = AssetLibrary()
    library.deserialize(["shaders"])
    assert len(library.shaders) == 0
    assert len(library.materials) == 0


def test_library_loads_shaders_with_defaults():
    library = AssetLibrary()
    library.deserialize({"shaders": {"tinted": {"vs": "a.vert", "fs": "b.frag"}, "bare": {}}})
    tinted = library.shaders.get("tinted")
    assert tinted.vertex == "a.vert"
    assert tinted.fragment == "b.frag"
    bare = library.shaders.get("bare")
    assert bare.vertex == ""
    assert bare.fragment == ""


def test_library_loads_textures_and_samplers():
    library = AssetLibrary()
    library.deserialize(
        {
            "textures": {"white": "textures/white.png"},
            "samplers": {"pixelated": {"MAG_FILTER": "GL_NEAREST"}},
        }
    )
    assert library.textures.get("white") == Path("textures/white.png")
    assert library.samplers.get("pixelated") == {"MAG_FILTER": "GL_NEAREST"}


def test_texture_must_be_string():
    library = AssetLibrary()
    with pytest.raises(TypeError):
        library.deserialize({"textures": {"bad": 3}})


def test_library_loads_meshes(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(OBJ_TRIANGLE)
    library = AssetLibrary()
    library.deserialize({"meshes": {"tri": str(path)}})
    mesh = library.meshes.get("tri")
    assert mesh.element_count == 3
    assert len(mesh.vertices) == 3


def test_missing_mesh_file_raises(tmp_path):
    library = AssetLibrary()
    with pytest.raises(OSError):
        library.deserialize({"meshes": {"gone": str(tmp_path / "missing.obj")}})


def test_materials_resolve_shaders_and_textures():
    library = AssetLibrary()
    library.deserialize(
        {
            "shaders": {"lit": {"vs": "lit.vert", "fs": "lit.frag"}},
            "textures": {"wood": "wood.png"},
            "samplers": {"default": {}},
            "materials": {
                "plain": {"shader": "lit"},
                "red": {"type": "tinted", "shader": "lit", "tint": [1, 0, 0, 1]},
                "floor": {
                    "type": "lighted",
                    "shader": "lit",
                    "texture": "wood",
                    "sampler": "default",
                    "albedo": "wood",
                    "transparent": True,
                },
            },
        }
    )
    shader = library.shaders.get("lit")

    plain = library.materials.get("plain")
    assert type(plain) is Material
    assert plain.shader is shader

    red = library.materials.get("red")
    assert isinstance(red, TintedMaterial)
    assert red.tint == (1.0, 0.0, 0.0, 1.0)

    floor = library.materials.get("floor")
    assert isinstance(floor, LightMaterial)
    assert floor.texture == Path("wood.png")
    assert floor.albedo_map == Path("wood.png")
    assert floor.sampler == {}
    assert floor.transparent is True
    assert floor.specular_map is None


def test_material_with_unknown_shader_gets_none():
    library = AssetLibrary()
    library.deserialize({"materials": {"m": {"shader": "unknown"}}})
    assert library.materials.get("m").shader is None


def test_material_without_shader_key_raises():
    library = AssetLibrary()
    with pytest.raises(KeyError):
        library.deserialize({"materials": {"m": {"type": "tinted"}}})


def test_library_clear_empties_all_stores():
    library = AssetLibrary()
    library.deserialize(
        {
            "shaders": {"s": {}},
            "textures": {"t": "t.png"},
            "samplers": {"p": {}},
            "materials": {"m": {"shader": "s"}},
        }
    )
    library.clear()
    stores = (library.shaders, library.textures, library.samplers, library.meshes, library.materials)
    assert all(len(store) == 0 for store in stores)