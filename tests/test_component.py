import numpy as np
import pytest

from ecsworld.component import Component
from ecsworld.components import CollisionComponent, MovementComponent
from ecsworld.entity import Entity


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_concrete_component_owner_defaults_to_none_and_can_be_set():
    component = CollisionComponent()
    assert component.owner is None
    owner = object()
    component.owner = owner
    assert component.owner is owner


def test_entity_sets_itself_as_owner():
    entity = Entity()
    component = entity.add_component(CollisionComponent)
    assert component.owner is entity
    assert isinstance(component, Component)


def test_concrete_component_deserialize_reads_data():
    component = MovementComponent()
    component.deserialize({"linearVelocity": [1, 2, 3]})
    np.testing.assert_allclose(component.linear_velocity, [1, 2, 3])
    assert isinstance(component, Component)