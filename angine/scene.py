"""Scenes, their window description and the handler that switches them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from angine.components import ComponentManager
from angine.game_object import GameObject, GameObjectBuilder, ObjectBuilder
from angine.input import InputWatcher


@dataclass(frozen=True)
class WindowData:
    """Size of the game window."""

    width: int = 1240
    height: int = 720


class AbstractScene(ABC):
    """A tree of game objects under a root, with its own update logic."""

    def __init__(
        self, component_manager: ComponentManager, window_data: WindowData
    ) -> None:
        self.component_manager = component_manager
        self.window_data = window_data
        self.input_watcher = InputWatcher()
        self._builder = GameObjectBuilder(component_manager)
        self._root = GameObjectBuilder.create_root(component_manager)

    @property
    def root(self) -> GameObject:
        """The root object of the scene."""
        return self._root

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def next_scene(self) -> Optional[AbstractScene]:
        """The scene to switch to, or None to stay."""

    @abstractmethod
    def name(self) -> str:
        """The scene's name."""

    def create_game_object_builder(
        self, name: str, parent: Optional[GameObject] = None
    ) -> ObjectBuilder:
        """A builder for a new object under ``parent``, or under the root."""
        return self._builder.create_builder(
            name, parent if parent is not None else self._root
        )


class SceneHandler:
    """Creates scenes and installs them in the engine loop.

    The engine loop must provide ``set_current_scene(scene)`` and a
    ``current_scene`` attribute.
    """

    def __init__(
        self,
        engine_loop: Any,
        component_manager: ComponentManager,
        window_data: WindowData,
    ) -> None:
        self._engine_loop = engine_loop
        self.component_manager = component_manager
        self.window_data = window_data

    def create_and_set_scene(self, scene_type: type[AbstractScene], *args: Any) -> None:
        """Build ``scene_type`` with the shared manager and window, then make it current."""
        if not (isinstance(scene_type, type) and issubclass(scene_type, AbstractScene)):
            raise TypeError("scene_type must derive from AbstractScene")
        scene = scene_type(self.component_manager, self.window_data, *args)
        self.set_current_scene(scene)

    def set_current_scene(self, scene: Optional[AbstractScene]) -> None:
        """Make ``scene`` the engine's current scene."""
        self._engine_loop.set_current_scene(scene)

    @property
    def current_scene(self) -> Optional[AbstractScene]:
        """The engine's current scene."""
        return self._engine_loop.current_scene