"""Shared engine state: printables, camera, screen size and run flags."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from .input_handler import InputHandler

if TYPE_CHECKING:
    from .printable import Printable

DEFAULT_SCREEN_HEIGHT = 24
DEFAULT_SCREEN_LENGTH = 80


@dataclass
class EngineContext:
    """State shared by the display, the factory and the game loop."""

    printables_to_save: list[Printable] = field(default_factory=list)
    all_printables: list[Printable] = field(default_factory=list)
    printables_need_sorted: bool = True
    camera: Any = None
    player_entity: Any = None
    screen_height: int = DEFAULT_SCREEN_HEIGHT
    screen_length: int = DEFAULT_SCREEN_LENGTH
    user_input: int = 0
    engine_running: bool = False
    display_needs_cleared: bool = False
    input_handler: InputHandler = field(default_factory=InputHandler)

    def register(self, printable: Printable) -> None:
        """Add ``printable`` to the drawn set and ask for a re-sort by layer."""
        self.all_printables.append(printable)
        self.printables_need_sorted = True

    def reset(self) -> None:
        """Restore every field to its starting value."""
        fresh = EngineContext()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))