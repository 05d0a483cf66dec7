"""Clickable UI elements that run a callback."""

from __future__ import annotations

from typing import Callable, Iterable

from .animation import Animation
from .basics import Pixel, Position
from .ui_element import UIElement

_MIN_BORDER_LENGTH = 6


class Button(UIElement):
    """A UI element that runs ``function`` when clicked."""

    def __init__(
        self,
        name: str = "default",
        animations: Iterable[Animation] | None = None,
        visible: bool = False,
        moveable_by_camera: bool = True,
        function: Callable[[], object] | None = None,
    ) -> None:
        super().__init__(name, animations, visible, moveable_by_camera)
        self.function = function

    def execute_function(self) -> None:
        """Run the callback, if one is set."""
        if self.function is not None:
            self.function()

    def mouse_in_bounds(self, position: Position) -> bool:
        """Whether a pixel of the current frame sits at ``position``."""
        return self.current_animation().current_frame_sprite().position_in_bounds(position)

    def set_text(self, text: str) -> None:
        """Redraw the current frame as ``text`` wrapped in the frame's own border style."""
        sprite = self.current_animation().current_frame_sprite()

        top_left = top_right = bottom_left = bottom_right = "+"
        top_edge = bottom_edge = "-"
        left_edge = right_edge = "|"

        pixels = sprite.pixels
        if pixels:
            min_x = min(p.position.x for p in pixels)
            max_x = max(p.position.x for p in pixels)
            min_y = min(p.position.y for p in pixels)
            max_y = max(p.position.y for p in pixels)
            for pixel in pixels:
                x, y, ch = pixel.position.x, pixel.position.y, pixel.character
                if y == min_y:
                    if x == min_x:
                        top_left = ch
                    elif x == max_x:
                        top_right = ch
                    else:
                        top_edge = ch
                elif y == max_y:
                    if x == min_x:
                        bottom_left = ch
                    elif x == max_x:
                        bottom_right = ch
                    else:
                        bottom_edge = ch
                elif x == min_x:
                    left_edge = ch
                elif x == max_x:
                    right_edge = ch

        lines = text.split("\n")
        border_length = max(max(len(line) for line in lines) + 4, _MIN_BORDER_LENGTH)
        inner = border_length - 2

        rows = [top_left + top_edge * inner + top_right]
        rows.extend(left_edge + line.ljust(inner) + right_edge for line in lines)
        rows.append(bottom_left + bottom_edge * inner + bottom_right)

        sprite.set_pixels(
            Pixel(Position(x, y), ch) for y, row in enumerate(rows) for x, ch in enumerate(row)
        )
        sprite.anchor = Position(0, 0)
        self.set_positions()