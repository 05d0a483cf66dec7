"""A draggable slider drawn as a bar with a handle."""

from __future__ import annotations

from .animation import Animation
from .basics import Frame, Pixel, Position, Sprite
from .ui_element import ScreenLockPosition, StackDirection, UIElement

_MIN_LENGTH = 2


class Slider(UIElement):
    """A bar of ``length`` cells with a handle at ``position``."""

    def __init__(self, length: int = 10, horizontal: bool = True) -> None:
        super().__init__("defaultSlider", None, True, False)
        self._length = max(_MIN_LENGTH, length)
        self._position = 0
        self.horizontal = horizontal
        self.lock_position = ScreenLockPosition.NONE
        self.stack_direction = StackDirection.VERTICAL
        self._update_sprite()

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, length: int) -> None:
        self._length = max(_MIN_LENGTH, length)
        self._position = min(max(self._position, 0), self._length - 1)
        self._update_sprite()

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, pos: int) -> None:
        self._position = min(max(pos, 0), self._length - 1)
        self._update_sprite()

    def move_left(self) -> None:
        """Move the handle one cell back."""
        self.position = self._position - 1

    def move_right(self) -> None:
        """Move the handle one cell forward."""
        self.position = self._position + 1

    def value(self) -> float:
        """The handle position as a fraction from 0.0 to 1.0."""
        if self._length <= 1:
            return 0.0
        return self._position / (self._length - 1)

    def set_animation(self, animation: Animation) -> None:
        """Replace the drawn bar with a custom animation."""
        self.animations.clear()
        self.animations.append(animation)
        self._current_name = animation.name

    def mouse_in_bounds(self, position: Position) -> bool:
        """Whether a pixel of the slider sits at ``position``."""
        return self.current_animation().current_frame_sprite().position_in_bounds(position)

    def set_position_from_mouse(self, mouse_position: Position) -> None:
        """Put the handle under the mouse, measured from the slider's anchor."""
        anchor = self.current_animation().current_frame_sprite().anchor
        if self.horizontal:
            relative = mouse_position.x - anchor.x
        else:
            relative = mouse_position.y - anchor.y
        self.position = relative

    def _update_sprite(self) -> None:
        animations = self.animations
        previous_anchor = animations[0].current_frame_sprite().anchor if animations else Position(0, 0)

        def cell(i: int) -> Position:
            return Position(i, 0) if self.horizontal else Position(0, i)

        pixels = [
            Pixel(cell(i), "|" if i == self._position else "-") for i in range(self._length)
        ]
        sprite = Sprite(pixels)
        sprite.move_anchor_to_position(previous_anchor)

        animations.clear()
        animations.append(Animation("default", [Frame(sprite, 1.0)], True))
        self._current_name = "default"