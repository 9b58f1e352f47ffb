"""The main loop: event polling, input sampling and frame rendering."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, Optional, Protocol

import pygame

from angine.components import ComponentManager
from angine.input import Button, InputHandler
from angine.scene import AbstractScene, SceneHandler, WindowData

_log = logging.getLogger(__name__)

_WINDOW_SIZE = (1920, 1080)
_WINDOW_TITLE = "Angine"
_CLEAR_COLOUR = (0, 0, 0)

_BUTTON_KEYS = {
    Button.FIRE: pygame.K_SPACE,
    Button.LEFT: pygame.K_LEFT,
    Button.RIGHT: pygame.K_RIGHT,
}


class _Backend(Protocol):
    def events(self) -> Iterable[Any]: ...

    def is_quit(self, event: Any) -> bool: ...

    def pressed_buttons(self) -> set[Button]: ...

    def prepare_render(self) -> bool: ...

    def begin_render(self) -> bool: ...

    def render(self) -> None: ...

    def end_render(self) -> None: ...

    def error(self) -> str: ...

    def close(self) -> None: ...


class _PygameBackend:
    """Window, events and keyboard provided by pygame."""

    def __init__(self) -> None:
        pygame.display.init()
        self._surface = pygame.display.set_mode(_WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(_WINDOW_TITLE)

    def events(self) -> Iterable[Any]:
        return pygame.event.get()

    def is_quit(self, event: Any) -> bool:
        return event.type == pygame.QUIT

    def pressed_buttons(self) -> set[Button]:
        keys = pygame.key.get_pressed()
        return {button for button, key in _BUTTON_KEYS.items() if keys[key]}

    def prepare_render(self) -> bool:
        if not pygame.display.get_init():
            _log.warning("Display is not initialised")
            return False
        return True

    def begin_render(self) -> bool:
        surface = pygame.display.get_surface()
        if surface is None:
            _log.warning("Window surface is not available")
            return False
        self._surface = surface
        return True

    def render(self) -> None:
        self._surface.fill(_CLEAR_COLOUR)

    def end_render(self) -> None:
        pygame.display.flip()

    def error(self) -> str:
        return pygame.get_error()

    def close(self) -> None:
        pygame.display.quit()


class Inputs:
    """Drains pending events, stopping at a quit request."""

    def __init__(
        self,
        event_source: Callable[[], Iterable[Any]],
        is_quit: Callable[[Any], bool],
        on_event: Optional[Callable[[Any], None]] = None,
    ) -> None:
        self._event_source = event_source
        self._is_quit = is_quit
        self._on_event = on_event

    def poll(self) -> bool:
        """Dispatch pending events; False once a quit event is seen."""
        for event in self._event_source():
            if self._is_quit(event):
                return False
            if self._on_event is not None:
                self._on_event(event)
        return True


class EngineLoop(ABC):
    """Owns the window, input state, components and the current scene."""

    def __init__(self, backend: Optional[_Backend] = None) -> None:
        self.backend: _Backend = backend if backend is not None else _PygameBackend()
        self.inputs = Inputs(self.backend.events, self.backend.is_quit)
        self.input_handler = InputHandler()
        self._current_scene: Optional[AbstractScene] = None
        self._last_frame_time = time.perf_counter()
        self.last_delta_time = 0.0
        self.component_manager = ComponentManager()
        self.window_data = WindowData()
        self.scene_handler = SceneHandler(
            self, self.component_manager, self.window_data
        )

    def check_initialised(self) -> None:
        """Raise RuntimeError carrying the backend's error, if it reported one."""
        error = self.backend.error()
        if error:
            raise RuntimeError(error)

    def set_current_scene(self, scene: Optional[AbstractScene]) -> None:
        """Replace the current scene."""
        self._current_scene = scene

    @property
    def current_scene(self) -> Optional[AbstractScene]:
        """The scene being played, or None."""
        return self._current_scene

    def run(self, max_frames: Optional[int] = None) -> bool:
        """Run frames until a quit event, or until ``max_frames`` have run."""
        frames = 0
        while (max_frames is None or frames < max_frames) and self.inputs.poll():
            frames += 1
            now = time.perf_counter()
            # Measured in whole seconds.
            self.last_delta_time = float(int(now - self._last_frame_time))
            self._last_frame_time = now

            self.input_handler.update(self.backend.pressed_buttons())
            if not self.backend.prepare_render():
                _log.warning("Failed to prepare render")
                continue

            if self.backend.begin_render():
                self.backend.render()
                self.backend.end_render()
            self.input_handler.swap()
        return True

    def close(self) -> None:
        """Release the window."""
        self.backend.close()

    @abstractmethod
    def game_loop(self, delta_time: float) -> None:
        """Game-specific per-frame logic."""