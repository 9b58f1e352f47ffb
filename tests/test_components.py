import math

import pytest

from angine.components import (
    Component,
    ComponentManager,
    InputComponent,
    MovementComponent,
    SpriteComponent,
)
from angine.input import Button, ButtonState, InputHandler
from angine.mathutils import Vec2


class FakeObject:
    def __init__(self, object_id, parent=None):
        self.id = object_id
        self.local_position = Vec2()
        self.parent = parent
        self.children = []
        if parent is not None:
            parent.children.append(self)

    def set_local_position(self, position):
        self.local_position = position

    def world_position(self):
        if self.parent is None:
            return self.local_position
        return self.parent.world_position() + self.local_position


@pytest.fixture
def manager():
    return ComponentManager()


def test_get_component_returns_added(manager):
    owner = FakeObject(1)
    sprite = manager.add_sprite_component(owner)
    assert manager.get_component(SpriteComponent, 1) is sprite
    assert manager.has_component(SpriteComponent, 1)
    assert manager.get_component(MovementComponent, 1) is None
    assert not manager.has_component(MovementComponent, 1)


def test_remove_component_keeps_others_reachable(manager):
    owners = [FakeObject(i) for i in range(3)]
    sprites = [manager.add_sprite_component(o) for o in owners]
    manager.remove_component(SpriteComponent, 0)
    assert manager.get_component(SpriteComponent, 0) is None
    assert manager.get_component(SpriteComponent, 1) is sprites[1]
    assert manager.get_component(SpriteComponent, 2) is sprites[2]


def test_remove_missing_component_is_harmless(manager):
    owner = FakeObject(4)
    sprite = manager.add_sprite_component(owner)
    manager.remove_component(SpriteComponent, 99)
    manager.remove_component(MovementComponent, 4)
    assert manager.get_component(SpriteComponent, 4) is sprite


def test_remove_components_removes_all_types(manager):
    owner = FakeObject(5)
    other = FakeObject(6)
    manager.add_sprite_component(owner)
    manager.add_movement_component(owner, 1.0)
    kept = manager.add_movement_component(other, 1.0)
    manager.remove_components(5)
    assert not manager.has_component(SpriteComponent, 5)
    assert not manager.has_component(MovementComponent, 5)
    assert manager.get_component(MovementComponent, 6) is kept


def test_set_direction_normalises(manager):
    movement = manager.add_movement_component(FakeObject(1), 1.0)
    movement.set_direction(Vec2(3.0, 4.0))
    assert abs(movement.direction) == pytest.approx(1.0)
    assert movement.direction.x * 4.0 == pytest.approx(movement.direction.y * 3.0)


def test_add_direction_of_opposite_gives_nan(manager):
    movement = manager.add_movement_component(FakeObject(1), 1.0)
    movement.set_direction(Vec2(1.0, 0.0))
    movement.add_direction(Vec2(-1.0, 0.0))
    direction = movement.direction
    assert math.isnan(direction.x) is True


def test_movement_without_direction_does_not_move(manager):
    owner = FakeObject(1)
    owner.set_local_position(Vec2(2.0, 3.0))
    movement = manager.add_movement_component(owner, 10.0)
    manager.update(1.0)
    assert owner.local_position == Vec2(2.0, 3.0)
    assert movement.velocity == Vec2(0.0, 0.0)


def test_movement_update_moves_owner(manager):
    owner = FakeObject(1)
    owner.set_local_position(Vec2(5.0, 5.0))
    movement = manager.add_movement_component(owner, 2.0)
    movement.set_direction(Vec2(1.0, 0.0))
    manager.update(0.5)
    assert movement.velocity == Vec2(1.0, 0.0)
    assert owner.local_position == Vec2(5.0, 5.0) + movement.velocity


def test_apply_position_refreshes_subtree_sprites(manager):
    parent = FakeObject(1)
    child = FakeObject(2, parent)
    child.set_local_position(Vec2(1.0, 1.0))
    child_sprite = manager.add_sprite_component(child)
    child_sprite.add_text("score", 12)
    movement = manager.add_movement_component(parent, 1.0)
    movement.apply_position(Vec2(10.0, 20.0))
    assert parent.local_position == Vec2(10.0, 20.0)
    assert child_sprite.position == child.world_position()


def test_sprite_text_lifecycle(manager):
    owner = FakeObject(1)
    owner.set_local_position(Vec2(4.0, 2.0))
    sprite = manager.add_sprite_component(owner)
    sprite.update_text("ignored")
    assert sprite.text is None
    sprite.add_text("hello", 24)
    assert (sprite.text, sprite.size, sprite.position) == ("hello", 24, Vec2(4.0, 2.0))
    sprite.update_text("bye")
    assert sprite.text == "bye"
    assert sprite.size == 24


def test_input_component_dispatches_states(manager):
    handler = InputHandler()
    calls = []
    owner = FakeObject(7)
    manager.add_input_component(
        owner,
        lambda m, oid, state: calls.append(("fire", m, oid, state)),
        lambda m, oid, state: calls.append(("left", m, oid, state)),
        None,
    )
    handler.update({Button.FIRE, Button.RIGHT})
    manager.update(0.1)
    assert calls == [("fire", manager, 7, ButtonState.PRESSED)]

    calls.clear()
    handler.swap()
    handler.update({Button.FIRE})
    manager.update(0.1)
    assert calls == [("fire", manager, 7, ButtonState.HELD)]

    calls.clear()
    handler.swap()
    handler.update(set())
    manager.update(0.1)
    assert calls == [("fire", manager, 7, ButtonState.RELEASED)]

    calls.clear()
    handler.swap()
    handler.update(set())
    manager.update(0.1)
    assert calls == []


def test_update_runs_input_before_movement(manager):
    handler = InputHandler()
    owner = FakeObject(1)
    movement = manager.add_movement_component(owner, 1.0)

    def steer(component_manager, owner_id, state):
        component_manager.get_component(MovementComponent, owner_id).set_direction(
            Vec2(0.0, 1.0)
        )

    manager.add_input_component(owner, None, steer, None)
    handler.update({Button.LEFT})
    manager.update(2.0)
    assert movement.direction == Vec2(0.0, 1.0)
    assert owner.local_position == Vec2(0.0, 2.0)


def test_base_component_update_keeps_owner():
    owner = FakeObject(3)
    manager = ComponentManager()
    component = Component(owner, manager)
    component.update(1.0)
    assert component.owner is owner
    assert component.manager is manager
    assert owner.local_position == Vec2()


def test_input_component_type_is_pooled(manager):
    InputHandler()
    component = manager.add_input_component(FakeObject(9))
    assert isinstance(component, InputComponent)
    assert manager.get_component(InputComponent, 9) is component