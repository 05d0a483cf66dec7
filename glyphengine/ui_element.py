"""UI elements that can be locked to an edge, corner or the centre of the screen."""

from __future__ import annotations

import enum
from typing import ClassVar, Iterable

from .animation import Animation
from .basics import Position
from .printable import Printable


class ScreenLockPosition(enum.Enum):
    """Where on the screen a UI element is pinned."""

    NONE = enum.auto()
    TOP_MIDDLE = enum.auto()
    RIGHT_MIDDLE = enum.auto()
    BOTTOM_MIDDLE = enum.auto()
    LEFT_MIDDLE = enum.auto()
    CENTER = enum.auto()
    TOP_LEFT_CORNER = enum.auto()
    TOP_RIGHT_CORNER = enum.auto()
    BOTTOM_LEFT_CORNER = enum.auto()
    BOTTOM_RIGHT_CORNER = enum.auto()


class StackDirection(enum.Enum):
    """How elements pinned to the same corner are stacked."""

    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()


def _half(n: int) -> int:
    """Halve ``n``, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


class UIElement(Printable):
    """A printable with a bounding box that can be pinned to the screen."""

    _locked: ClassVar[dict[ScreenLockPosition, list[UIElement]]] = {
        lock: [] for lock in ScreenLockPosition if lock is not ScreenLockPosition.NONE
    }

    def __init__(
        self,
        name: str = "default",
        animations: Iterable[Animation] | None = None,
        visible: bool = False,
        moveable_by_camera: bool = True,
    ) -> None:
        if animations is not None:
            animations = list(animations)
            if not animations:
                raise ValueError(f"UI element {name!r} has no animations")
        super().__init__(name, animations, visible, moveable_by_camera)
        self.min_position = Position()
        self.max_position = Position()
        self.lock_position = ScreenLockPosition.NONE
        self.stack_direction = StackDirection.VERTICAL
        if animations is not None:
            self.set_positions()

    def _width(self) -> int:
        return self.max_position.x - self.min_position.x + 1

    def _height(self) -> int:
        return self.max_position.y - self.min_position.y + 1

    def set_positions(self) -> None:
        """Recompute the bounding box from the current frame of the current animation."""
        self.min_position = self.current_animation().current_frame_sprite().anchor
        max_x = 0
        max_y = 0
        for animation in self.animations:
            if animation.name != self.current_animation_name:
                continue
            for pixel in animation.current_frame_sprite().pixels:
                max_x = max(max_x, pixel.position.x)
                max_y = max(max_y, pixel.position.y)
        self.max_position = Position(max_x, max_y)

    def set_dynamic_position(
        self,
        position: ScreenLockPosition,
        direction: StackDirection = StackDirection.VERTICAL,
    ) -> None:
        """Pin this element to ``position``, stacking in ``direction`` with its neighbours."""
        self.lock_position = position
        self.stack_direction = direction
        if position is not ScreenLockPosition.NONE:
            UIElement._locked[position].append(self)

    @classmethod
    def clear_locked(cls) -> None:
        """Forget every pinned element."""
        for elements in UIElement._locked.values():
            elements.clear()

    @classmethod
    def update_all_locked_positions(cls, screen_length: int, screen_height: int) -> None:
        """Lay out every pinned element for a screen of the given size."""
        locked = UIElement._locked

        def reset_to_origin(elements: list[UIElement]) -> None:
            for el in elements:
                el.set_positions()
                el.move_to_position(Position(0, 0))
                el.set_positions()

        def place(el: UIElement, x: int, y: int) -> None:
            el.move_to_position(Position(x, y))
            el.set_positions()

        elements = locked[ScreenLockPosition.TOP_MIDDLE]
        reset_to_origin(elements)
        dx = _half(screen_length - sum(el._width() for el in elements))
        for el in elements:
            place(el, dx, 0)
            dx += el._width()

        elements = locked[ScreenLockPosition.RIGHT_MIDDLE]
        reset_to_origin(elements)
        dy = _half(screen_height - sum(el._height() for el in elements))
        for el in elements:
            place(el, screen_length - el._width(), dy)
            dy += el._height()

        elements = locked[ScreenLockPosition.BOTTOM_MIDDLE]
        reset_to_origin(elements)
        dx = _half(screen_length - sum(el._width() for el in elements))
        bottom = screen_height - 1
        for el in elements:
            place(el, dx, bottom - el._height() + 1)
            dx += el._width()

        elements = locked[ScreenLockPosition.LEFT_MIDDLE]
        reset_to_origin(elements)
        dy = _half(screen_height - sum(el._height() for el in elements))
        for el in elements:
            place(el, 0, dy)
            dy += el._height()

        elements = locked[ScreenLockPosition.CENTER]
        reset_to_origin(elements)
        dx = _half(screen_length - sum(el._width() for el in elements))
        tallest = max((el._height() for el in elements), default=0)
        y = _half(screen_height - tallest)
        for el in elements:
            place(el, dx, y)
            dx += el._width()

        dx, dy = 0, 0
        for el in locked[ScreenLockPosition.TOP_LEFT_CORNER]:
            el.set_positions()
            place(el, dx, dy)
            if el.stack_direction is StackDirection.HORIZONTAL:
                dx += el._width()
            else:
                dy += el._height()

        dx, dy = screen_length, 0
        for el in locked[ScreenLockPosition.TOP_RIGHT_CORNER]:
            el.set_positions()
            if el.stack_direction is StackDirection.HORIZONTAL:
                dx -= el._width()
                el.move_to_position(Position(dx, dy))
            else:
                el.move_to_position(Position(dx - el._width(), dy))
                dy += el._height()
            el.set_positions()

        dx, dy = 0, screen_height
        for el in locked[ScreenLockPosition.BOTTOM_LEFT_CORNER]:
            el.set_positions()
            if el.stack_direction is StackDirection.HORIZONTAL:
                el.move_to_position(Position(dx, dy - el._height()))
                dx += el._width()
            else:
                dy -= el._height()
                el.move_to_position(Position(dx, dy))
            el.set_positions()

        dx, dy = screen_length, screen_height
        for el in locked[ScreenLockPosition.BOTTOM_RIGHT_CORNER]:
            el.set_positions()
            if el.stack_direction is StackDirection.HORIZONTAL:
                dx -= el._width()
                el.move_to_position(Position(dx, dy - el._height()))
            else:
                dy -= el._height()
                el.move_to_position(Position(dx - el._width(), dy))
            el.set_positions()

    def displace(self, dx: int, dy: int) -> None:
        """Move the element and its bounding box by the given offset."""
        self.min_position = self.min_position.translated(dx, dy)
        self.max_position = self.max_position.translated(dx, dy)
        super().displace(dx, dy)