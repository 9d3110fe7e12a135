import math

import numpy as np
import pytest

from ecsworld.mesh import Mesh, Vertex, load_obj, sphere


def _write(tmp_path, text, name="model.obj"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


QUAD = """\
# a unit quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def test_vertex_equality_and_hashing():
    a = Vertex(position=(1.0, 2.0, 3.0))
    b = Vertex(position=(1.0, 2.0, 3.0))
    c = Vertex(position=(1.0, 2.0, 4.0))
    assert a == b
    assert len({a, b, c}) == 2


def test_mesh_triangles_follow_elements():
    verts = [Vertex(position=(float(i), 0.0, 0.0)) for i in range(4)]
    mesh = Mesh(verts, [0, 1, 2, 2, 3, 0])
    tris = list(mesh.triangles())
    assert mesh.element_count == 6
    assert tris == [(verts[0], verts[1], verts[2]), (verts[2], verts[3], verts[0])]


def test_disabled_mesh_yields_no_triangles():
    mesh = Mesh([Vertex()] * 3, [0, 1, 2])
    mesh.enabled = False
    assert list(mesh.triangles()) == []


def test_mesh_rejects_out_of_range_elements():
    with pytest.raises(ValueError):
        Mesh([Vertex()], [0, 1, 0])


def test_load_obj_triangulates_quad_and_merges_vertices(tmp_path):
    mesh = load_obj(_write(tmp_path, QUAD))
    assert len(mesh.vertices) == 4
    assert mesh.element_count == 6
    assert mesh.elements[:3] == (0, 1, 2)
    assert mesh.elements[3] == 0 and mesh.elements[5] == 3
    assert all(v.normal == (0.0, 0.0, 1.0) for v in mesh.vertices)
    assert mesh.vertices[2].tex_coord == (1.0, 1.0)


def test_load_obj_defaults_to_opaque_white(tmp_path):
    mesh = load_obj(_write(tmp_path, QUAD))
    assert {v.color for v in mesh.vertices} == {(255, 255, 255, 255)}


def test_load_obj_reads_vertex_colors(tmp_path):
    text = "v 0 0 0 1 0 0\nv 1 0 0 0 1 0\nv 0 1 0 0 0 1\nf 1 2 3\n"
    mesh = load_obj(_write(tmp_path, text))
    assert [v.color for v in mesh.vertices] == [
        (255, 0, 0, 255),
        (0, 255, 0, 255),
        (0, 0, 255, 255),
    ]


def test_load_obj_missing_attributes_become_zero(tmp_path):
    mesh = load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"))
    assert all(v.normal == (0.0, 0.0, 0.0) and v.tex_coord == (0.0, 0.0) for v in mesh.vertices)


def test_load_obj_negative_indices_match_positive(tmp_path):
    positive = load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n", "a.obj"))
    negative = load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n", "b.obj"))
    assert negative.vertices == positive.vertices
    assert negative.elements == positive.elements


def test_load_obj_shared_vertices_are_deduplicated(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\nf 1 2 3\n"
    mesh = load_obj(_write(tmp_path, text))
    assert len(mesh.vertices) == 3
    assert mesh.elements[:3] == mesh.elements[3:]


def test_load_obj_records_path(tmp_path):
    path = _write(tmp_path, QUAD)
    assert load_obj(path).path == str(path)


def test_load_obj_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")


@pytest.mark.parametrize(
    "text",
    [
        "v 0 0 0\nv 1 0 0\nf 1 2 5\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n",
        "v 0 0\n",
        "v 0 0 0\nv 1 0 0\nf 1 2\n",
        "v a b c\n",
    ],
)
def test_load_obj_rejects_malformed_input(tmp_path, text):
    with pytest.raises(ValueError):
        load_obj(_write(tmp_path, text))


@pytest.mark.parametrize("segments", [(4, 3), (16, 8), (1, 1)])
def test_sphere_counts(segments):
    x, y = segments
    mesh = sphere(segments)
    assert len(mesh.vertices) == (x + 1) * (y + 1)
    assert mesh.element_count == 6 * x * y


def test_sphere_vertices_lie_on_unit_sphere():
    mesh = sphere((12, 6))
    for v in mesh.vertices:
        assert math.isclose(np.linalg.norm(v.position), 1.0, rel_tol=1e-12)
        assert v.normal == v.position
        assert v.color == (255, 255, 255, 255)
        assert 0.0 <= v.tex_coord[0] <= 1.0 and 0.0 <= v.tex_coord[1] <= 1.0


def test_sphere_poles_and_texture_corners():
    mesh = sphere((8, 4))
    first, last = mesh.vertices[0], mesh.vertices[-1]
    np.testing.assert_allclose(first.position, [0, -1, 0], atol=1e-12)
    np.testing.assert_allclose(last.position, [0, 1, 0], atol=1e-12)
    assert first.tex_coord == (0.0, 0.0)
    assert last.tex_coord == (1.0, 1.0)


def test_sphere_triangles_face_outward():
    mesh = sphere((10, 6))
    for a, b, c in mesh.triangles():
        pa, pb, pc = (np.array(v.position) for v in (a, b, c))
        normal = np.cross(pb - pa, pc - pa)
        if np.linalg.norm(normal) < 1e-9:
            continue
        assert normal @ (pa + pb + pc) > 0


def test_sphere_rejects_zero_segments():
    with pytest.raises(ValueError):
        sphere((0, 4))