"""A viewport whose offset shifts camera-moveable objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .params import EngineContext


class Camera:
    """A rectangle on the display with an offset applied to world coordinates."""

    def __init__(
        self,
        length: int = 80,
        height: int = 24,
        context: EngineContext | None = None,
    ) -> None:
        self.length = length
        self.height = height
        self.context = context
        self._length_offset = 0
        self._height_offset = 0

    @property
    def length_offset(self) -> int:
        return self._length_offset

    @property
    def height_offset(self) -> int:
        return self._height_offset

    def displace_view_port(self, dx: int, dy: int) -> None:
        """Shift the view; any real move asks the display to redraw everything."""
        if (dx or dy) and self.context is not None:
            self.context.display_needs_cleared = True
        self._length_offset += dx
        self._height_offset += dy

    def __repr__(self) -> str:
        return (
            f"Camera(length={self.length}, height={self.height}, "
            f"offset=({self._length_offset}, {self._height_offset}))"
        )