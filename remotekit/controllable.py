"""Interfaces every platform input controller implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from remotekit.dsl import evaluate
from remotekit.keys import AnyKey, MouseButton


class KeyboardControllable(ABC):
    """Keyboard operations a controller provides."""

    def key_sequence_parse(self, sequence: str) -> None:
        """Type a DSL string; ``{+SHIFT}hello{-SHIFT}`` types HELLO.

        Raises :class:`remotekit.dsl.ParseError` if the string is malformed.
        """
        evaluate(self, sequence)

    @abstractmethod
    def key_sequence(self, sequence: str) -> None:
        """Type the given text, independent of the keyboard layout."""

    @abstractmethod
    def key_down(self, key: AnyKey) -> None:
        """Press a key; raises ``OSError`` if the system rejects the event."""

    @abstractmethod
    def key_up(self, key: AnyKey) -> None:
        """Release a key previously pressed with :meth:`key_down`."""

    @abstractmethod
    def key_click(self, key: AnyKey) -> None:
        """Press and release a key."""

    @abstractmethod
    def get_key_state(self, key: AnyKey) -> bool:
        """Whether the key is down (or, for lock keys, toggled on)."""


class MouseControllable(ABC):
    """Mouse operations a controller provides."""

    @abstractmethod
    def mouse_move_to(self, x: int, y: int) -> None:
        """Move the cursor to absolute screen coordinates; (0, 0) is top left."""

    @abstractmethod
    def mouse_move_relative(self, x: int, y: int) -> None:
        """Move the cursor by the given offset; positive values go right and down."""

    @abstractmethod
    def mouse_down(self, button: MouseButton) -> None:
        """Press a mouse button; raises ``OSError`` if the system rejects the event."""

    @abstractmethod
    def mouse_up(self, button: MouseButton) -> None:
        """Release a mouse button."""

    def mouse_click(self, button: MouseButton) -> None:
        """Press and release a mouse button; a failed press is ignored."""
        try:
            self.mouse_down(button)
        except OSError:
            pass
        self.mouse_up(button)

    @abstractmethod
    def mouse_scroll_x(self, length: int) -> None:
        """Scroll horizontally by ``length`` lines; positive scrolls right."""

    @abstractmethod
    def mouse_scroll_y(self, length: int) -> None:
        """Scroll vertically by ``length`` lines; positive scrolls down."""