"""Mouse handling for buttons and sliders."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Protocol

from .basics import Position

KEY_MOUSE = 0o631
"""Key code that announces a pending mouse event."""


class MouseFlag(enum.IntFlag):
    """Button and motion state carried by a mouse event."""

    NONE = 0
    BUTTON1_RELEASED = 0x1
    BUTTON1_PRESSED = 0x2
    BUTTON1_CLICKED = 0x4
    REPORT_POSITION = 0x8


@dataclass(frozen=True)
class MouseEvent:
    """Where the mouse is and what its buttons did."""

    x: int
    y: int
    state: MouseFlag = MouseFlag.NONE

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


class Clickable(Protocol):
    def mouse_in_bounds(self, position: Position) -> bool: ...

    def execute_function(self) -> None: ...


class Draggable(Protocol):
    def mouse_in_bounds(self, position: Position) -> bool: ...

    def set_position_from_mouse(self, mouse_position: Position) -> None: ...


class InputHandler:
    """Routes mouse events to registered buttons and sliders."""

    def __init__(self, mouse_reader: Callable[[], MouseEvent | None] | None = None) -> None:
        self.mouse_reader = mouse_reader
        self._buttons: list[Clickable] = []
        self._sliders: list[Draggable] = []
        self._dragged: Draggable | None = None
        self._event: MouseEvent | None = None
        self._processed = False

    @property
    def buttons(self) -> tuple[Clickable, ...]:
        return tuple(self._buttons)

    @property
    def sliders(self) -> tuple[Draggable, ...]:
        return tuple(self._sliders)

    @property
    def slider_dragging(self) -> bool:
        return self._dragged is not None

    @property
    def dragged_slider(self) -> Draggable | None:
        return self._dragged

    @property
    def mouse_event_processed(self) -> bool:
        return self._processed

    def add_button(self, button: Clickable) -> None:
        self._buttons.append(button)

    def add_slider(self, slider: Draggable) -> None:
        self._sliders.append(slider)

    def process_input(self, user_input: int) -> bool:
        """Handle one key code; True if a UI element consumed it."""
        self._processed = False
        if user_input != KEY_MOUSE or self.mouse_reader is None:
            return False
        event = self.mouse_reader()
        if event is None:
            return False
        return self.process_mouse_event(event)

    def process_mouse_event(self, event: MouseEvent) -> bool:
        """Handle a mouse event; True if a press landed on a UI element."""
        self._processed = True
        self._event = event
        position = event.position
        if event.state & MouseFlag.BUTTON1_PRESSED and self.handle_mouse_press(position):
            return True
        if event.state & (MouseFlag.BUTTON1_RELEASED | MouseFlag.BUTTON1_CLICKED):
            self.handle_mouse_release()
        if event.state & MouseFlag.REPORT_POSITION:
            self.handle_mouse_drag(position)
        return False

    def handle_mouse_press(self, position: Position) -> bool:
        """Start dragging a slider or run a button under ``position``."""
        for slider in self._sliders:
            if slider.mouse_in_bounds(position):
                self._dragged = slider
                slider.set_position_from_mouse(position)
                return True
        for button in self._buttons:
            if button.mouse_in_bounds(position):
                button.execute_function()
                return True
        return False

    def handle_mouse_release(self) -> None:
        """Stop any slider drag."""
        self._dragged = None

    def handle_mouse_drag(self, position: Position) -> None:
        """Move the slider being dragged, if any."""
        if self._dragged is not None:
            self._dragged.set_position_from_mouse(position)

    def clear(self) -> None:
        """Forget all buttons and sliders and stop dragging."""
        self._buttons.clear()
        self._sliders.clear()
        self._dragged = None

    def is_mouse_over_ui(self, position: Position) -> bool:
        """Whether ``position`` lies on any registered button or slider."""
        return any(b.mouse_in_bounds(position) for b in self._buttons) or any(
            s.mouse_in_bounds(position) for s in self._sliders
        )

    def last_mouse_event(self) -> MouseEvent | None:
        """The event handled by the last call, or None if it was not a mouse event."""
        return self._event if self._processed else None