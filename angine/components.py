"""Components attached to game objects and the manager that stores them."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

from angine.input import Button, ButtonState, InputFunc, InputWatcher
from angine.mathutils import Vec2, is_zero

C = TypeVar("C", bound="Component")


class Component:
    """Behaviour attached to a game object.

    ``owner`` is the game object the component belongs to; it must expose
    ``id``, ``local_position``, ``set_local_position(position)``,
    ``world_position()`` and ``children``.
    """

    def __init__(self, owner: Any, manager: ComponentManager) -> None:
        self.owner = owner
        self.manager = manager

    def update(self, delta_time: float) -> None:
        """Advance the component by one frame; does nothing by default."""


class InputComponent(Component):
    """Calls a callback for each tracked button whose state changed or is held."""

    def __init__(
        self,
        owner: Any,
        manager: ComponentManager,
        on_fire_pressed: Optional[InputFunc] = None,
        on_left_pressed: Optional[InputFunc] = None,
        on_right_pressed: Optional[InputFunc] = None,
    ) -> None:
        super().__init__(owner, manager)
        self._watcher = InputWatcher()
        self._callbacks: tuple[tuple[Button, Optional[InputFunc]], ...] = (
            (Button.FIRE, on_fire_pressed),
            (Button.LEFT, on_left_pressed),
            (Button.RIGHT, on_right_pressed),
        )

    def update(self, delta_time: float) -> None:
        """Dispatch the current state of every button that is not idle."""
        for button, callback in self._callbacks:
            state = self._watcher.button_state(button)
            if state is not ButtonState.NONE and callback is not None:
                callback(self.manager, self.owner.id, state)


class MovementComponent(Component):
    """Moves its owner along a normalised direction."""

    def __init__(
        self, owner: Any, manager: ComponentManager, acceleration: float
    ) -> None:
        super().__init__(owner, manager)
        self.acceleration = acceleration
        self._direction = Vec2(0.0, 0.0)
        self._velocity = Vec2(0.0, 0.0)

    @property
    def direction(self) -> Vec2:
        """Current unit direction, or the zero vector before any is set."""
        return self._direction

    @property
    def velocity(self) -> Vec2:
        """Displacement applied during the last update."""
        return self._velocity

    def update(self, delta_time: float) -> None:
        """Move the owner if a direction is set."""
        if is_zero(self._direction):
            return
        self._velocity = self._direction * self.acceleration * delta_time
        self.apply_position(self.owner.local_position + self._velocity)

    def add_direction(self, direction: Vec2) -> None:
        """Add to the current direction and normalise the sum."""
        self.set_direction(self._direction + direction)

    def set_direction(self, direction: Vec2) -> None:
        """Set the direction, normalised."""
        self._direction = direction.normalized()

    def apply_position(self, position: Vec2) -> None:
        """Place the owner and refresh the sprites of its whole subtree."""
        self.owner.set_local_position(position)
        for node in _subtree(self.owner):
            sprite = self.manager.get_component(SpriteComponent, node.id)
            if sprite is not None:
                sprite.update_position()


def _subtree(root: Any) -> Iterator[Any]:
    yield root
    for child in root.children:
        yield from _subtree(child)


class SpriteComponent(Component):
    """Visual attached to an object: holds an optional text and its position."""

    def __init__(self, owner: Any, manager: ComponentManager) -> None:
        super().__init__(owner, manager)
        self.text: Optional[str] = None
        self.size: Optional[int] = None
        self.position: Optional[Vec2] = None

    def add_text(self, text: str, size: int) -> None:
        """Replace any current visual with a text of the given size."""
        self._remove_sprite()
        self.text = text
        self.size = size
        self.update_position()

    def update_text(self, text: str) -> None:
        """Change the text, if the visual is a text."""
        if self.text is not None:
            self.text = text

    def update(self, delta_time: float) -> None:
        """Sprites need no per-frame work."""

    def update_position(self) -> None:
        """Follow the owner's world position, if there is a visual."""
        if self.text is not None:
            self.position = self.owner.world_position()

    def _remove_sprite(self) -> None:
        self.text = None
        self.size = None
        self.position = None


@dataclass
class _ComponentPool:
    components: list[Component] = field(default_factory=list)
    entity_ids: list[int] = field(default_factory=list)
    index_of: dict[int, int] = field(default_factory=dict)


# Component types updated each frame, in this order.
_UPDATE_ORDER: tuple[type[Component], ...] = (
    InputComponent,
    MovementComponent,
    SpriteComponent,
)


class ComponentManager:
    """Stores components in one densely packed pool per component type."""

    def __init__(self) -> None:
        self._pools: dict[type[Component], _ComponentPool] = {}

    def _pool(self, component_type: type[Component]) -> _ComponentPool:
        return self._pools.setdefault(component_type, _ComponentPool())

    def get_component(self, component_type: type[C], entity_id: int) -> Optional[C]:
        """The entity's component of that type, or None."""
        pool = self._pools.get(component_type)
        if pool is None:
            return None
        index = pool.index_of.get(entity_id)
        if index is None:
            return None
        return pool.components[index]  # type: ignore[return-value]

    def has_component(self, component_type: type[Component], entity_id: int) -> bool:
        """True if the entity has a component of that type."""
        pool = self._pools.get(component_type)
        return pool is not None and entity_id in pool.index_of

    def remove_component(self, component_type: type[Component], entity_id: int) -> None:
        """Remove the entity's component of that type, filling the gap with the last one."""
        pool = self._pools.get(component_type)
        if pool is None or entity_id not in pool.index_of:
            return
        index = pool.index_of[entity_id]
        last = len(pool.components) - 1
        if index != last:
            pool.components[index] = pool.components[last]
            pool.entity_ids[index] = pool.entity_ids[last]
            pool.index_of[pool.entity_ids[index]] = index
        pool.components.pop()
        pool.entity_ids.pop()
        del pool.index_of[entity_id]

    def remove_components(self, entity_id: int) -> None:
        """Remove every component the entity has."""
        for component_type in list(self._pools):
            self.remove_component(component_type, entity_id)

    def _create(self, component: Component, entity_id: int) -> None:
        pool = self._pool(type(component))
        pool.index_of[entity_id] = len(pool.components)
        pool.components.append(component)
        pool.entity_ids.append(entity_id)

    def add_input_component(
        self,
        owner: Any,
        on_fire_pressed: Optional[InputFunc] = None,
        on_left_pressed: Optional[InputFunc] = None,
        on_right_pressed: Optional[InputFunc] = None,
    ) -> InputComponent:
        """Attach an input component to ``owner``."""
        component = InputComponent(
            owner, self, on_fire_pressed, on_left_pressed, on_right_pressed
        )
        self._create(component, owner.id)
        return component

    def add_movement_component(self, owner: Any, acceleration: float) -> MovementComponent:
        """Attach a movement component to ``owner``."""
        component = MovementComponent(owner, self, acceleration)
        self._create(component, owner.id)
        return component

    def add_sprite_component(self, owner: Any) -> SpriteComponent:
        """Attach a sprite component to ``owner``."""
        component = SpriteComponent(owner, self)
        self._create(component, owner.id)
        return component

    def update(self, delta_time: float) -> None:
        """Update input, then movement, then sprite components."""
        for component_type in _UPDATE_ORDER:
            for component in list(self._pool(component_type).components):
                component.update(delta_time)


ComponentFactory = Callable[[Any, ComponentManager], Component]