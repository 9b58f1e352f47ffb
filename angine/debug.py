"""Base class for items shown by the debug overlay."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OverlordItem(ABC):
    """A debug tool that can be drawn and shown or hidden."""

    def __init__(self) -> None:
        self._visible = False

    @abstractmethod
    def render(self) -> None:
        """Draw the item."""

    @abstractmethod
    def name(self) -> str:
        """Name shown for the item in the overlay."""

    @property
    def visible(self) -> bool:
        """Whether the item is currently shown."""
        return self._visible

    def toggle_visible(self) -> None:
        """Flip visibility."""
        self._visible = not self._visible

    def set_visible(self, visible: bool) -> None:
        """Show or hide the item."""
        self._visible = visible