"""Button states shared between the input handler and every input watcher."""

from __future__ import annotations

from collections.abc import Callable, Collection
from enum import Enum
from typing import Any


class ButtonState(Enum):
    """Transition of a button between two consecutive frames."""

    PRESSED = "Pressed"
    HELD = "Held"
    RELEASED = "Released"
    NONE = "None"


class Button(Enum):
    """Logical buttons the engine tracks."""

    FIRE = "Fire"
    LEFT = "Left"
    RIGHT = "Right"


# Called with the component manager, the owning object's id and the state.
InputFunc = Callable[[Any, int, ButtonState], None]

# Order in which the handler samples the buttons.
_TRACKED_BUTTONS = (Button.LEFT, Button.RIGHT, Button.FIRE)


class _ButtonStates:
    """Button levels of the previous and the current frame."""

    def __init__(self) -> None:
        self.previous: dict[Button, bool] = {}
        self.current: dict[Button, bool] = {}

    def swap(self) -> None:
        self.previous, self.current = self.current, self.previous


# One set of states for the whole process: every watcher sees what the
# handler last sampled.
_STATES = _ButtonStates()


class InputWatcher:
    """Read-only view of the shared button states.

    Querying a button before any :class:`InputHandler` has been created
    raises :class:`KeyError`.
    """

    def __init__(self) -> None:
        self._states = _STATES

    def button_state(self, button: Button) -> ButtonState:
        """Classify the button's change between the last two frames."""
        if self.is_pressed(button):
            return ButtonState.PRESSED
        if self.is_holding(button):
            return ButtonState.HELD
        if self.is_released(button):
            return ButtonState.RELEASED
        return ButtonState.NONE

    def is_pressed(self, button: Button) -> bool:
        """True if the button went down this frame."""
        return not self._states.previous[button] and self._states.current[button]

    def is_holding(self, button: Button) -> bool:
        """True if the button was down in both frames."""
        return self._states.previous[button] and self._states.current[button]

    def is_released(self, button: Button) -> bool:
        """True if the button went up this frame."""
        return self._states.previous[button] and not self._states.current[button]

    def _swap(self) -> None:
        self._states.swap()


class InputHandler:
    """Feeds keyboard levels into the shared button states."""

    def __init__(self) -> None:
        self._watcher = InputWatcher()
        _STATES.current = {button: False for button in _TRACKED_BUTTONS}
        _STATES.previous = dict(_STATES.current)

    def update(self, pressed: Collection[Button]) -> None:
        """Record which tracked buttons are down in the current frame."""
        for button in _TRACKED_BUTTONS:
            _STATES.current[button] = button in pressed

    def swap(self) -> None:
        """End the frame: the current levels become the previous ones."""
        self._watcher._swap()