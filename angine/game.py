"""The game built on the engine: its scenes, loop and entry point."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, Sequence

from angine.components import ComponentManager
from angine.engine_loop import EngineLoop
from angine.scene import AbstractScene, WindowData


class SceneType(Enum):
    """Kinds of scene the game knows."""

    DEBUG = "DEBUG"
    GAMEPLAY = "GAMEPLAY"
    MENU = "MENU"


class DebugScene(AbstractScene):
    """A small fixed tree of objects for inspecting the engine."""

    def __init__(
        self, component_manager: ComponentManager, window_data: WindowData
    ) -> None:
        super().__init__(component_manager, window_data)
        self.elapsed_time = 0.0
        self._next: Optional[AbstractScene] = None
        self.create_game_object_builder("Bibboop").build()
        parent = self.create_game_object_builder("Bibboop2").build()
        self.create_game_object_builder("ChildOfBibboop2", parent).build()

    def update(self, delta_time: float) -> None:
        """Track how long the debug scene has been running."""
        self.elapsed_time += delta_time

    def next_scene(self) -> Optional[AbstractScene]:
        """The scene to hand over to; the debug scene never sets one."""
        return self._next

    def name(self) -> str:
        return "DebugScene"


class GameLoop(EngineLoop):
    """The game's engine loop."""

    elapsed_time: float = 0.0

    def game_loop(self, delta_time: float) -> None:
        """Track the total time the game has been running."""
        self.elapsed_time += delta_time


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    game = GameLoop()
    try:
        try:
            game.check_initialised()
        except RuntimeError as error:
            print(f"Failed to initialize: {error}")
            return -1
        return int(game.run())
    finally:
        game.close()


if __name__ == "__main__":
    sys.exit(main())