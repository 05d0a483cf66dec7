"""A terminal game engine: sprites, animations, UI widgets, frame files and a diffing curses display."""

__version__ = "0.1.0"