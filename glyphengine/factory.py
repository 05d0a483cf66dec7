"""Loading and saving printables as plain-text frame files.

A frame file holds a header line ``duration,layer``, the character art up to a
``---`` line, then one row of ``r,g,b`` text colours per art line, one row of
``r,g,b`` background colours per art line, and one row of integer attributes
per art line.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from .animation import Animation
from .basics import RGB, Frame, Pixel, Position, Sprite
from .button import Button
from .params import EngineContext
from .printable import Entity, Printable
from .ui_element import UIElement

logger = logging.getLogger(__name__)

DEFAULT_BASE_DIR = Path("src/Animations")
DELIMITER = "---"
DEFAULT_BORDER = "defaultBorder"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathLike = Union[str, Path]


def _leading_int(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"not an integer: {value!r}")
    return int(match.group(1))


def _leading_float(value: str) -> float:
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"not a number: {value!r}")
    return float(match.group(1))


def _ints(line: str) -> Iterator[int]:
    """Yield whitespace-separated integers until something else is met."""
    pos = 0
    while (match := _INT_PREFIX.match(line, pos)) is not None:
        yield int(match.group(1))
        pos = match.end()


def _parse_rgb(token: str, default: RGB) -> RGB:
    parts = token.split(",", 2)
    if len(parts) < 3:
        return default
    return RGB(*(_leading_int(part) for part in parts))


def _read_colors(lines: Iterator[str], height: int, width: int, default: RGB) -> list[list[RGB]]:
    grid = [[default] * width for _ in range(height)]
    for row in grid:
        line = next(lines, None)
        if line is None:
            break
        for x, token in zip(range(width), line.split()):
            row[x] = _parse_rgb(token, default)
    return grid


def _parse_header(header: str) -> tuple[float, int]:
    duration, layer = 1.0, 0
    if not header:
        return duration, layer
    parts = header.split(",")
    duration = _leading_float(parts[0])
    layer_present = len(parts) > 1 and not (len(parts) == 2 and parts[1] == "")
    if layer_present:
        layer = _leading_int(parts[1])
    return duration, layer


def parse_frame(text: str) -> Frame:
    """Build a frame from the text of a frame file."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    it = iter(lines)

    duration, layer = _parse_header(next(it, ""))

    art: list[str] = []
    for line in it:
        if line == DELIMITER:
            break
        art.append(line)
    height = len(art)
    width = max((len(line) for line in art), default=0)

    text_colors = _read_colors(it, height, width, RGB(1000, 1000, 1000))
    background_colors = _read_colors(it, height, width, RGB(0, 0, 0))

    attributes = [[0] * width for _ in range(height)]
    for row in attributes:
        line = next(it, None)
        if line is None:
            break
        for x, value in zip(range(width), _ints(line)):
            row[x] = value

    pixels = [
        Pixel(
            Position(x, y),
            ch,
            text_colors[y][x],
            background_colors[y][x],
            attributes[y][x],
        )
        for y, line in enumerate(art)
        for x, ch in enumerate(line)
    ]
    return Frame(Sprite(pixels, layer), duration)


def format_frame(frame: Frame) -> str:
    """Render a frame as the text of a frame file."""
    sprite = frame.sprite
    pixels = sprite.pixels
    max_x = max([0, *(p.position.x for p in pixels)])
    max_y = max([0, *(p.position.y for p in pixels)])
    width, height = max_x + 1, max_y + 1

    chars = [[" "] * width for _ in range(height)]
    text_colors = [[RGB(1000, 1000, 1000)] * width for _ in range(height)]
    background_colors = [[RGB(0, 0, 0)] * width for _ in range(height)]
    attributes = [[0] * width for _ in range(height)]
    for pixel in pixels:
        x, y = pixel.position.x, pixel.position.y
        if 0 <= x < width and 0 <= y < height:
            chars[y][x] = pixel.character
            text_colors[y][x] = pixel.text_color
            background_colors[y][x] = pixel.background_color
            attributes[y][x] = pixel.attributes

    def color_row(row: list[RGB]) -> str:
        return " ".join(f"{c.r},{c.g},{c.b}" for c in row)

    out = [f"{frame.duration:g},{sprite.layer}"]
    out.extend("".join(row) for row in chars)
    out.append(DELIMITER)
    out.extend(color_row(row) for row in text_colors)
    out.extend(color_row(row) for row in background_colors)
    out.extend(" ".join(str(a) for a in row) for row in attributes)
    return "\n".join(out) + "\n"


def _error_frame() -> Frame:
    return Frame(Sprite([Pixel(Position(0, 0), "~")]), 1.0)


def _fallback_border() -> Animation:
    rows = ("+----+", "|    |", "+----+")
    pixels = [Pixel(Position(x, y), ch) for y, row in enumerate(rows) for x, ch in enumerate(row)]
    return Animation("default", [Frame(Sprite(pixels, 1), 10)], True)


class PrintableFactory:
    """Creates printables from frame files under ``base_dir`` and writes them back."""

    def __init__(
        self,
        base_dir: PathLike = DEFAULT_BASE_DIR,
        context: Optional[EngineContext] = None,
    ) -> None:
        self.base_dir = Path(base_dir)
        self.context = context if context is not None else EngineContext()

    def frame_from_file(self, path: PathLike) -> Frame:
        """Read one frame file; a file that cannot be opened gives a single ``~`` pixel."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Error opening the file: %s (%s)", path, exc)
            return _error_frame()
        return parse_frame(text)

    def load_animation(self, entity_name: str, animation_name: str, repeats: bool = True) -> Animation:
        """Load every frame file of one animation, in file-name order."""
        folder = self.base_dir / entity_name / animation_name
        try:
            files = sorted((p for p in folder.iterdir() if p.is_file()), key=lambda p: p.name)
        except OSError as exc:
            logger.error("Filesystem error: %s", exc)
            return Animation()
        frames = []
        for path in files:
            logger.info("Loading file: %s", path)
            frames.append(self.frame_from_file(path))
        animation = Animation(animation_name, frames, repeats)
        if len(frames) == 1:
            animation.playing = False
        return animation

    def _load_animations(self, name: str) -> list[Animation]:
        folder = self.base_dir / name
        try:
            names = sorted(p.name for p in folder.iterdir() if p.is_dir())
        except OSError as exc:
            logger.error("Error loading animations for %r: %s", name, exc)
            return []
        return [self.load_animation(name, animation_name, True) for animation_name in names]

    def load_entity(self, name: str, visible: bool = True, moveable_by_camera: bool = True) -> Entity:
        """Load an entity from the animation folders under ``base_dir/name`` and register it."""
        entity = Entity(name, self._load_animations(name), visible, moveable_by_camera)
        self.context.register(entity)
        return entity

    def load_ui_element(
        self, name: str, visible: bool = True, moveable_by_camera: bool = False
    ) -> UIElement:
        """Load a UI element from ``base_dir/name`` and register it."""
        element = UIElement(name, self._load_animations(name), visible, moveable_by_camera)
        self.context.register(element)
        return element

    def load_button(
        self,
        name: str,
        visible: bool = True,
        moveable_by_camera: bool = False,
        function: Optional[Callable[[], object]] = None,
    ) -> Button:
        """Load a button from ``base_dir/name``, register it and hand it to the input handler."""
        button = Button(name, self._load_animations(name), visible, moveable_by_camera, function)
        self.context.register(button)
        self.context.input_handler.add_button(button)
        return button

    def new_button(self, text: str, function: Optional[Callable[[], object]] = None) -> Button:
        """Make a bordered button around ``text``, using the default border if one is on disk."""
        folder = self.base_dir / DEFAULT_BORDER
        try:
            names = sorted(p.name for p in folder.iterdir() if p.is_dir())
        except OSError as exc:
            logger.error("Error loading default button animations: %s", exc)
            animations = [_fallback_border()]
        else:
            animations = [self.load_animation(DEFAULT_BORDER, n, True) for n in names]

        button = Button(DEFAULT_BORDER, animations, True, False, function)
        button.set_text(text)
        self.context.register(button)
        self.context.input_handler.add_button(button)
        return button

    def write_printable(self, printable: Optional[Printable]) -> None:
        """Write every frame of every animation to ``base_dir/name/animation/frameN.txt``."""
        if printable is None:
            return
        base = self.base_dir / printable.name
        base.mkdir(parents=True, exist_ok=True)
        for animation in printable.animations:
            folder = base / animation.name
            folder.mkdir(parents=True, exist_ok=True)
            for index, frame in enumerate(animation.frames):
                path = folder / f"frame{index}.txt"
                try:
                    path.write_text(format_frame(frame), encoding="utf-8")
                except OSError as exc:
                    logger.error("Failed to write frame file: %s (%s)", path, exc)