"""Game objects arranged in a tree, and the builders that create them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Optional

from angine.components import ComponentManager, SpriteComponent
from angine.input import InputFunc
from angine.mathutils import Vec2

# Identifiers shared by every builder in the process; roots draw from it too.
_ids = itertools.count()


class GameObject:
    """A named node in a scene tree with a position relative to its parent.

    Objects are normally made through :class:`GameObjectBuilder`. Removing an
    object from its parent destroys it: the components of it and of its whole
    subtree are removed from the component manager.
    """

    def __init__(
        self,
        name: str,
        component_manager: ComponentManager,
        parent: Optional[GameObject] = None,
        object_id: int = 0,
    ) -> None:
        self._name = name
        self._manager = component_manager
        self._parent = parent
        self._id = object_id
        self._local_position = Vec2()
        self._children: list[GameObject] = []

    @property
    def name(self) -> str:
        """The object's name."""
        return self._name

    @property
    def id(self) -> int:
        """The object's identifier."""
        return self._id

    @property
    def parent(self) -> Optional[GameObject]:
        """The parent object, or None for a root."""
        return self._parent

    @property
    def children(self) -> tuple[GameObject, ...]:
        """The child objects, in the order they were added."""
        return tuple(self._children)

    @property
    def local_position(self) -> Vec2:
        """Position relative to the parent."""
        return self._local_position

    def set_local_position(self, position: Vec2) -> None:
        """Set the position relative to the parent."""
        self._local_position = position

    def world_position(self) -> Vec2:
        """Position obtained by adding the local positions up to the root."""
        if self._parent is not None:
            return self._parent.world_position() + self._local_position
        return self._local_position

    def remove_child(self, child_id: int) -> None:
        """Destroy the first child with the given id, if there is one."""
        for child in self._children:
            if child.id == child_id:
                self._children.remove(child)
                child._destroy()
                return

    def remove_children(self) -> None:
        """Destroy every child."""
        children, self._children = self._children, []
        for child in children:
            child._destroy()

    def destroy_self(self) -> None:
        """Remove this object from its parent; a root is left to its scene."""
        if self._parent is not None:
            parent, self._parent = self._parent, None
            child = parent._extract_child(self)
            if child is not None:
                child._destroy()

    def set_parent(self, parent: GameObject) -> None:
        """Move this object under ``parent``; a root cannot be moved."""
        if self._parent is None:
            return
        if parent is None:
            raise ValueError("a game object cannot be detached from the tree")
        extracted = self._parent._extract_child(self)
        self._parent = parent
        if extracted is not None:
            parent._add_child(extracted)

    def _add_child(self, child: GameObject) -> GameObject:
        self._children.append(child)
        return child

    def _extract_child(self, child: GameObject) -> Optional[GameObject]:
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return self._children.pop(index)
        return None

    def _destroy(self) -> None:
        self._manager.remove_components(self._id)
        self._parent = None
        children, self._children = self._children, []
        for child in children:
            child._parent = None
            child._destroy()

    def __repr__(self) -> str:
        return f"GameObject(name={self._name!r}, id={self._id})"


@dataclass
class InputCallbacks:
    """Callbacks for the tracked buttons; any of them may be left out."""

    on_space_pressed: Optional[InputFunc] = None
    on_left_pressed: Optional[InputFunc] = None
    on_right_pressed: Optional[InputFunc] = None


class ObjectBuilder:
    """Configures one new object; :meth:`build` attaches it to its parent."""

    def __init__(
        self, name: str, component_manager: ComponentManager, parent: GameObject
    ) -> None:
        self._manager = component_manager
        self._parent = parent
        self._object = GameObject(name, component_manager, parent, next(_ids))

    @property
    def game_object(self) -> GameObject:
        """The object being built."""
        return self._object

    def add_text(self, text: str, size: int) -> ObjectBuilder:
        """Attach a sprite showing ``text`` at the given size."""
        self._manager.add_sprite_component(self._object).add_text(text, size)
        return self

    def add_sprite(self) -> ObjectBuilder:
        """Attach an empty sprite."""
        self._manager.add_sprite_component(self._object)
        return self

    def add_movement_data(self, acceleration: float) -> ObjectBuilder:
        """Attach a movement component."""
        self._manager.add_movement_component(self._object, acceleration)
        return self

    def add_input_info(self, callbacks: InputCallbacks) -> ObjectBuilder:
        """Attach an input component with the given callbacks."""
        self._manager.add_input_component(
            self._object,
            callbacks.on_space_pressed,
            callbacks.on_left_pressed,
            callbacks.on_right_pressed,
        )
        return self

    def set_local_position(self, position: Vec2) -> ObjectBuilder:
        """Place the object and move its sprite along with it."""
        self._object.set_local_position(position)
        sprite = self._manager.get_component(SpriteComponent, self._object.id)
        if sprite is not None:
            sprite.update_position()
        return self

    def build(self) -> GameObject:
        """Add the object to its parent and return it."""
        return self._parent._add_child(self._object)


class GameObjectBuilder:
    """Hands out builders that share one component manager."""

    def __init__(self, component_manager: ComponentManager) -> None:
        self._manager = component_manager

    def create_builder(self, name: str, parent: GameObject) -> ObjectBuilder:
        """A builder for an object named ``name`` under ``parent``."""
        return ObjectBuilder(name, self._manager, parent)

    @staticmethod
    def create_root(component_manager: ComponentManager) -> GameObject:
        """A new parentless object named ``Root``."""
        return GameObject("Root", component_manager, None, next(_ids))