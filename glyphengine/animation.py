"""Timed sequences of frames."""

from __future__ import annotations

import copy
from typing import Iterable

from .basics import Frame, Pixel, Sprite


class Animation:
    """A named list of frames advanced by elapsed time or by hand."""

    def __init__(
        self,
        name: str = "none",
        frames: Iterable[Frame] | None = None,
        repeats: bool = True,
    ) -> None:
        self.name = name
        self._frames: list[Frame] = [Frame()] if frames is None else copy.deepcopy(list(frames))
        self.repeats = repeats
        self.playing = True
        self._current = 0
        self._previous = 0
        self._timer = 0.0

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def current_frame_index(self) -> int:
        return self._current

    @property
    def previous_frame_index(self) -> int:
        return self._previous

    def _wrap(self, index: int) -> int:
        if 0 <= index < len(self._frames):
            return index
        if self.repeats:
            return 0
        return max(len(self._frames) - 1, 0)

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, skipping frames whose time is used up."""
        if not self._frames or not self.playing:
            return
        self._timer += delta_time
        self._previous = self._current
        while True:
            duration = self._frames[self._current].duration
            if duration <= 0 or self._timer < duration:
                break
            self._timer -= duration
            self._current = self._wrap(self._current + 1)

    def increment_frame(self) -> None:
        """Step to the next frame, wrapping or stopping at the end."""
        self._previous = self._current
        self._current = self._wrap(self._current + 1)

    def decrement_frame(self) -> None:
        """Step to the previous frame; stepping before the first wraps like running past the end."""
        self._previous = self._current
        self._current = self._wrap(self._current - 1)

    def current_frame_sprite(self) -> Sprite:
        """The sprite of the frame now showing."""
        return self._frames[self._current].sprite

    def previous_frame_sprite(self) -> Sprite:
        """The sprite of the frame shown before the last step."""
        return self._frames[self._previous].sprite

    def displace(self, dx: int, dy: int) -> None:
        """Move every frame by the given offset."""
        for frame in self._frames:
            frame.displace(dx, dy)

    def add_pixel_to_current_frame(self, pixel: Pixel) -> None:
        """Add ``pixel`` to the sprite of the frame now showing."""
        self._frames[self._current].sprite.add_pixel(pixel)

    def set_all_sprite_layers(self, layer: int) -> None:
        """Put the sprite of every frame on ``layer``."""
        for frame in self._frames:
            frame.sprite.layer = layer

    def __repr__(self) -> str:
        return (
            f"Animation(name={self.name!r}, frames={len(self._frames)}, "
            f"repeats={self.repeats}, playing={self.playing})"
        )