"""A small component-based 2D game engine with scenes, game-object trees and frame-based input."""

__version__ = "0.1.0"

__all__ = [
    "components",
    "debug",
    "engine_loop",
    "game",
    "game_object",
    "input",
    "mathutils",
    "scene",
]