"""Value types for terminal graphics: positions, colours, pixels, sprites and frames."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterable, Iterator

_COLOR_MIN = 0
_COLOR_MAX = 1000


def _clamp_channel(value: int) -> int:
    return max(_COLOR_MIN, min(_COLOR_MAX, int(value)))


@dataclass(frozen=True)
class Position:
    """A cell on the terminal grid."""

    x: int = 0
    y: int = 0

    def translated(self, dx: int, dy: int) -> Position:
        """Return a new position moved by ``dx`` columns and ``dy`` rows."""
        return Position(self.x + dx, self.y + dy)


class RGB:
    """A colour with channels clamped to the curses range 0..1000."""

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._r = _clamp_channel(r)
        self._g = _clamp_channel(g)
        self._b = _clamp_channel(b)

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    def __iter__(self) -> Iterator[int]:
        return iter((self._r, self._g, self._b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGB):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"RGB({self._r}, {self._g}, {self._b})"


def _white() -> RGB:
    return RGB(_COLOR_MAX, _COLOR_MAX, _COLOR_MAX)


@dataclass
class Pixel:
    """A character with colours and attributes at a grid position."""

    position: Position = field(default_factory=Position)
    character: str = " "
    text_color: RGB = field(default_factory=_white)
    background_color: RGB = field(default_factory=RGB)
    attributes: int = 0

    def displace(self, dx: int, dy: int) -> None:
        """Move the pixel by ``dx`` columns and ``dy`` rows."""
        self.position = self.position.translated(dx, dy)


class Sprite:
    """A group of pixels drawn on one layer, with a top-left anchor."""

    def __init__(self, pixels: Iterable[Pixel] = (), layer: int = 0) -> None:
        self._pixels: list[Pixel] = [copy.copy(p) for p in pixels]
        self.layer = layer
        self.anchor = Position()
        self._refresh_anchor()

    @property
    def pixels(self) -> tuple[Pixel, ...]:
        return tuple(self._pixels)

    def _refresh_anchor(self) -> None:
        x, y = self.anchor.x, self.anchor.y
        for pixel in self._pixels:
            x = min(x, pixel.position.x)
            y = min(y, pixel.position.y)
        self.anchor = Position(x, y)

    def add_pixel(self, pixel: Pixel) -> None:
        """Append a copy of ``pixel``, lowering the anchor if needed."""
        self._pixels.append(copy.copy(pixel))
        self.anchor = Position(
            min(self.anchor.x, pixel.position.x),
            min(self.anchor.y, pixel.position.y),
        )

    def displace(self, dx: int, dy: int) -> None:
        """Move every pixel and the anchor by the given offset."""
        for pixel in self._pixels:
            pixel.displace(dx, dy)
        self.anchor = self.anchor.translated(dx, dy)

    def move_anchor_to_position(self, position: Position) -> None:
        """Move the sprite so that its anchor lands on ``position``."""
        self.displace(position.x - self.anchor.x, position.y - self.anchor.y)

    def position_in_bounds(self, position: Position) -> bool:
        """Whether any pixel of the sprite sits exactly at ``position``."""
        return any(pixel.position == position for pixel in self._pixels)

    def set_pixels(self, pixels: Iterable[Pixel]) -> None:
        """Replace the pixels, lowering the anchor to cover them."""
        self._pixels = [copy.copy(p) for p in pixels]
        self._refresh_anchor()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return (
            self._pixels == other._pixels
            and self.layer == other.layer
            and self.anchor == other.anchor
        )

    def __repr__(self) -> str:
        return f"Sprite(pixels={self._pixels!r}, layer={self.layer}, anchor={self.anchor!r})"


@dataclass
class Frame:
    """A sprite shown for ``duration`` seconds within an animation."""

    sprite: Sprite = field(default_factory=Sprite)
    duration: float = 1.0

    def __post_init__(self) -> None:
        self.sprite = copy.deepcopy(self.sprite)

    def displace(self, dx: int, dy: int) -> None:
        """Move the frame's sprite by the given offset."""
        self.sprite.displace(dx, dy)