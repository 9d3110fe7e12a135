import math

import numpy as np
import pytest

from ecsworld.transform import Transform


def test_default_transform_is_identity():
    np.testing.assert_allclose(Transform().to_mat4(), np.identity(4))


def test_scale_is_applied_before_translation():
    t = Transform(position=[1, 2, 3], scale=[2, 2, 2])
    point = t.to_mat4() @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(point[:3], [3, 2, 3])


def test_rotation_is_applied_before_translation():
    t = Transform(position=[5, 0, 0], rotation=[0, math.pi / 2, 0])
    point = t.to_mat4() @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(point[:3], [5, 0, -1], atol=1e-12)


def test_translation_lives_in_last_column():
    t = Transform(position=[7, -8, 9], rotation=[0.2, 0.4, 0.6], scale=[1, 2, 3])
    np.testing.assert_allclose(t.to_mat4()[:3, 3], [7, -8, 9])


def test_deserialize_reads_rotation_in_degrees():
    t = Transform()
    t.deserialize({"position": [1, 2, 3], "rotation": [0, 90, 180], "scale": [4, 5, 6]})
    np.testing.assert_allclose(t.position, [1, 2, 3])
    np.testing.assert_allclose(t.rotation, [0, math.pi / 2, math.pi])
    np.testing.assert_allclose(t.scale, [4, 5, 6])


def test_deserialize_keeps_absent_fields():
    t = Transform(position=[1, 1, 1], rotation=[0.5, 0.25, 0.125], scale=[3, 3, 3])
    t.deserialize({"position": [0, 0, 0]})
    np.testing.assert_allclose(t.position, [0, 0, 0])
    np.testing.assert_allclose(t.rotation, [0.5, 0.25, 0.125])
    np.testing.assert_allclose(t.scale, [3, 3, 3])


def test_deserialize_rejects_non_mapping():
    with pytest.raises(TypeError):
        Transform().deserialize([1, 2, 3])


def test_deserialize_rejects_wrong_vector_length():
    with pytest.raises(ValueError):
        Transform().deserialize({"scale": [1, 2]})


def test_instances_do_not_share_arrays():
    a, b = Transform(), Transform()
    a.position[0] = 42.0
    assert b.position[0] == 0.0