"""Mapping of RGB foreground/background pairs onto terminal colour pairs."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .basics import RGB

_LEVELS = 5
_CHANNEL_MAX = 1000

FIRST_CUSTOM_COLOR = 16
"""Colour ids below this are left to the terminal's basic and bold colours."""

FALLBACK = 0
"""Colour and pair id used when the terminal has none left."""

ColorCallback = Callable[[int, int, int, int], object]
PairCallback = Callable[[int, int, int], object]


def quantize(value: float) -> int:
    """Map a channel from 0..1000 onto the six levels 0..5 of a colour cube."""
    scaled = value / _CHANNEL_MAX * _LEVELS
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def to_curses_rgb(level: int) -> int:
    """Map a cube level 0..5 back onto the 0..1000 channel range."""
    scaled = level * _CHANNEL_MAX
    return scaled // _LEVELS if scaled >= 0 else -((-scaled) // _LEVELS)


class ColorManager:
    """Hands out colour pairs for RGB combinations, allocating colours as needed.

    ``init_color(color_id, r, g, b)`` defines a colour and ``init_pair(pair_id,
    fg_id, bg_id)`` defines a pair; either may be None when the terminal cannot
    do it. Colours stay allocated across :meth:`reset`; pairs do not.
    """

    def __init__(
        self,
        max_pairs: int,
        init_color: Optional[ColorCallback] = None,
        init_pair: Optional[PairCallback] = None,
    ) -> None:
        self.max_pairs = max_pairs
        self._init_color = init_color
        self._init_pair = init_pair
        self._pairs: dict[tuple[int, ...], int] = {}
        self._colors: dict[tuple[int, int, int], int] = {}
        self._next_pair = 1
        self._next_color = FIRST_CUSTOM_COLOR

    def _color_id(self, rgb: RGB) -> int:
        key = (quantize(rgb.r), quantize(rgb.g), quantize(rgb.b))
        known = self._colors.get(key)
        if known is not None:
            return known
        if self._next_color >= self.max_pairs:
            return FALLBACK
        color_id = self._next_color
        self._next_color += 1
        if self._init_color is not None:
            self._init_color(color_id, *(to_curses_rgb(level) for level in key))
        self._colors[key] = color_id
        return color_id

    def color_pair(self, fg: RGB, bg: RGB) -> int:
        """The pair id for ``fg`` on ``bg``, or 0 once all pairs are used."""
        key = tuple(quantize(c) for c in (*fg, *bg))
        known = self._pairs.get(key)
        if known is not None:
            return known
        if self._next_pair >= self.max_pairs:
            return FALLBACK
        fg_id = self._color_id(fg)
        bg_id = self._color_id(bg)
        pair = self._next_pair
        if self._init_pair is not None:
            self._init_pair(pair, fg_id, bg_id)
        self._pairs[key] = pair
        self._next_pair += 1
        return pair

    def reset(self) -> None:
        """Forget every allocated pair and start again from pair 1."""
        self._pairs.clear()
        self._next_pair = 1