"""The main loop: input, state updates and drawing."""

from __future__ import annotations

import time
from typing import Optional

from .display import Display
from .params import EngineContext

QUIT_KEY = ord("`")
_FRAME_PAUSE = 0.001
_NO_KEY = -1


class GameState:
    """One screen or mode of a game; subclasses override the hooks they need.

    The base hooks keep simple bookkeeping: ``ticks`` counts updates,
    ``active`` tells whether the engine is in this state, and
    ``pending_state`` names the state to switch to on the next step.
    """

    ticks: int = 0
    active: bool = False
    pending_state: Optional[GameState] = None

    def update(self) -> None:
        """Advance the state by one loop iteration."""
        self.ticks += 1

    def next_state(self) -> Optional[GameState]:
        """The state to switch to, or None to stay in this one; a pending state is handed over once."""
        following = self.pending_state
        self.pending_state = None
        return following

    def on_enter(self) -> None:
        """Called when the engine switches to this state."""
        self.active = True

    def on_exit(self) -> None:
        """Called when the engine leaves this state."""
        self.active = False


class GameEngine:
    """Runs a game state machine against a terminal display."""

    def __init__(self, initial_state: GameState, context: Optional[EngineContext] = None) -> None:
        self.state = initial_state
        self.context = context if context is not None else EngineContext()
        self.display = Display(self.context)

    def handle_key(self, key: int) -> bool:
        """Record ``key``, stop on the quit key and pass it to the UI; True if the UI used it."""
        ctx = self.context
        ctx.user_input = key
        if key == QUIT_KEY:
            ctx.engine_running = False
        return ctx.input_handler.process_input(key)

    def step(self, delta_time: float) -> None:
        """Update the state, switch to its successor if it names one, and redraw."""
        self.state.update()
        following = self.state.next_state()
        if following is not None:
            self.state.on_exit()
            self.state = following
            self.state.on_enter()
        self.display.refresh(delta_time)

    def run(self) -> None:
        """Loop until the quit key is pressed, then restore the terminal."""
        ctx = self.context
        ctx.user_input = 0
        last_time = time.monotonic()
        self.display.start()
        ctx.engine_running = True
        try:
            while ctx.engine_running:
                now = time.monotonic()
                delta_time = now - last_time
                last_time = now

                while (key := self.display.user_input()) != _NO_KEY:
                    self.handle_key(key)

                self.step(delta_time)
                time.sleep(_FRAME_PAUSE)
        finally:
            self.display.stop()