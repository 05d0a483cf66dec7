"""Double-buffered terminal drawing of every registered printable."""

from __future__ import annotations

import copy
import curses
import locale
import sys
from typing import Any, Optional

from .basics import Pixel, Position, Sprite
from .colors import ColorManager
from .input_handler import MouseEvent, MouseFlag
from .params import EngineContext
from .ui_element import UIElement

_MOUSE_TRACKING_ON = "\033[?1003h\n"
_MOUSE_TRACKING_OFF = "\033[?1003l\n"

_MOUSE_FLAGS = (
    (curses.BUTTON1_RELEASED, MouseFlag.BUTTON1_RELEASED),
    (curses.BUTTON1_PRESSED, MouseFlag.BUTTON1_PRESSED),
    (curses.BUTTON1_CLICKED, MouseFlag.BUTTON1_CLICKED),
    (curses.REPORT_MOUSE_POSITION, MouseFlag.REPORT_POSITION),
)


def _blank_rows(height: int, length: int) -> list[list[Pixel]]:
    return [[Pixel() for _ in range(length)] for _ in range(height)]


def _looks_same(a: Pixel, b: Pixel) -> bool:
    return (
        a.character == b.character
        and a.text_color == b.text_color
        and a.background_color == b.background_color
        and a.attributes == b.attributes
    )


def _quietly(func: Any) -> Any:
    def call(*args: int) -> None:
        try:
            func(*args)
        except curses.error:
            pass

    return call


class Display:
    """Draws printables into a frame buffer and writes only changed cells to the terminal."""

    def __init__(
        self,
        context: Optional[EngineContext] = None,
        height: Optional[int] = None,
        length: Optional[int] = None,
    ) -> None:
        self.context = context if context is not None else EngineContext()
        self.height = self.context.screen_height if height is None else height
        self.length = self.context.screen_length if length is None else length
        self.context.screen_height = self.height
        self.context.screen_length = self.length
        self._current = _blank_rows(self.height, self.length)
        self._last = _blank_rows(self.height, self.length)
        self._screen: Any = None
        self._colors: Optional[ColorManager] = None

    def __enter__(self) -> Display:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def started(self) -> bool:
        return self._screen is not None

    def cell(self, x: int, y: int) -> Pixel:
        """The pixel queued for screen column ``x``, row ``y``."""
        return self._current[y][x]

    def start(self) -> None:
        """Put the terminal into drawing mode with mouse tracking."""
        if self._screen is not None:
            return
        locale.setlocale(locale.LC_ALL, "")
        screen = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
            screen.nodelay(True)
            _quietly(curses.curs_set)(0)
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
            curses.mouseinterval(0)
            sys.stdout.write(_MOUSE_TRACKING_ON)
            sys.stdout.flush()

            height, length = screen.getmaxyx()
            self.height, self.length = height, length
            self.context.screen_height = height
            self.context.screen_length = length
            self._current = _blank_rows(height, length)
            self._last = _blank_rows(height, length)

            if curses.has_colors():
                curses.start_color()
                _quietly(curses.use_default_colors)()
                init_color = _quietly(curses.init_color) if curses.can_change_color() else None
                self._colors = ColorManager(
                    curses.COLOR_PAIRS, init_color, _quietly(curses.init_pair)
                )
        except Exception:
            curses.endwin()
            raise
        self._screen = screen
        self.context.input_handler.mouse_reader = self._read_mouse

    def stop(self) -> None:
        """Turn mouse tracking off and give the terminal back."""
        if self._screen is None:
            return
        sys.stdout.write(_MOUSE_TRACKING_OFF)
        sys.stdout.flush()
        curses.endwin()
        self._screen = None
        self._colors = None
        self.context.input_handler.mouse_reader = None

    def user_input(self) -> int:
        """The next key code, or -1 if none is waiting."""
        if self._screen is None:
            raise RuntimeError("display has not been started")
        return self._screen.getch()

    def _read_mouse(self) -> Optional[MouseEvent]:
        try:
            _device, x, y, _z, bstate = curses.getmouse()
        except curses.error:
            return None
        flags = MouseFlag.NONE
        for bit, flag in _MOUSE_FLAGS:
            if bstate & bit:
                flags |= flag
        return MouseEvent(x, y, flags)

    def resize(self, height: int, length: int) -> None:
        """Adopt a new screen size: camera, pinned UI and buffers follow."""
        self.height, self.length = height, length
        ctx = self.context
        ctx.screen_height = height
        ctx.screen_length = length
        if ctx.camera is not None:
            ctx.camera.height = height
            ctx.camera.length = length
        UIElement.update_all_locked_positions(length, height)
        self._current = _blank_rows(height, length)
        self._last = _blank_rows(height, length)
        ctx.display_needs_cleared = True

    def refresh(self, delta_time: float) -> list[tuple[Position, Pixel]]:
        """Advance animations, redraw, and write the changed cells; returns those cells."""
        if self._screen is not None:
            height, length = self._screen.getmaxyx()
            if (height, length) != (self.height, self.length):
                self.resize(height, length)

        if self.context.display_needs_cleared:
            if self._screen is not None:
                self._screen.clear()
            self._current = _blank_rows(self.height, self.length)
            self._last = _blank_rows(self.height, self.length)
            self.context.display_needs_cleared = False

        self.refresh_entities(delta_time)

        changes: list[tuple[Position, Pixel]] = []
        for y, (current_row, last_row) in enumerate(zip(self._current, self._last)):
            for x, (current, last) in enumerate(zip(current_row, last_row)):
                if not _looks_same(current, last):
                    self._draw(x, y, current)
                    last_row[x] = current
                    changes.append((Position(x, y), current))

        if self._screen is not None:
            self._screen.noutrefresh()
            curses.doupdate()
            _quietly(curses.curs_set)(0)
        return changes

    def _draw(self, x: int, y: int, pixel: Pixel) -> None:
        if self._screen is None:
            return
        attr = pixel.attributes
        if self._colors is not None:
            attr |= curses.color_pair(self._colors.color_pair(pixel.text_color, pixel.background_color))
        try:
            self._screen.addstr(y, x, pixel.character, attr)
        except curses.error:
            pass  # the bottom-right cell cannot be written without scrolling

    def _camera_offset(self) -> tuple[int, int]:
        camera = self.context.camera
        if camera is None:
            return 0, 0
        return camera.length_offset, camera.height_offset

    def print_pixel(self, pixel: Pixel, moveable_by_camera: bool) -> None:
        """Queue ``pixel`` at its position, shifted by the camera if asked; off-screen is dropped."""
        x, y = pixel.position.x, pixel.position.y
        if moveable_by_camera:
            dx, dy = self._camera_offset()
            x += dx
            y += dy
        if 0 <= x < self.length and 0 <= y < self.height:
            self._current[y][x] = copy.copy(pixel)

    def print_sprite(self, sprite: Sprite, moveable_by_camera: bool) -> None:
        """Queue every pixel of ``sprite``."""
        for pixel in sprite.pixels:
            self.print_pixel(pixel, moveable_by_camera)

    def erase_sprite(self, sprite: Sprite, moveable_by_camera: bool) -> None:
        """Queue blanks over every cell of ``sprite``."""
        for pixel in sprite.pixels:
            self.print_pixel(Pixel(pixel.position, " "), moveable_by_camera)

    def refresh_entities(self, delta_time: float) -> None:
        """Advance each printable's animation, erase what moved and draw by layer."""
        ctx = self.context
        if ctx.printables_need_sorted:
            ctx.all_printables.sort(
                key=lambda p: p.current_animation().current_frame_sprite().layer
            )
            ctx.printables_need_sorted = False

        for printable in ctx.all_printables:
            for animation in printable.animations:
                if animation.name != printable.current_animation_name:
                    continue
                if animation.playing:
                    animation.update(delta_time)
                    printable.add_dirty_sprite(animation.previous_frame_sprite())
                for sprite in printable.dirty_sprites:
                    self.erase_sprite(sprite, printable.moveable_by_camera)
                printable.clear_dirty_sprites()
                self.print_sprite(animation.current_frame_sprite(), printable.moveable_by_camera)