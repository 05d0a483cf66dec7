# glyphengine

A small game engine for the terminal. Everything on screen is built from
character cells: a `Pixel` is one character with a text colour, a background
colour and attributes, a `Sprite` is a layered set of pixels, a `Frame` pairs a
sprite with a duration, and an `Animation` steps through frames over time.

Drawing uses the standard library's `curses` module, so the display needs a
terminal where `curses` is available (POSIX systems). There are no other
dependencies.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install .[test]
pytest
```

## What is in it

- `glyphengine.basics`: `Position` (frozen, with `translated(dx, dy)`), `RGB`
  (channels clamped to 0–1000), `Pixel`, `Sprite` (pixels, a layer and a
  top-left anchor; `displace`, `move_anchor_to_position`,
  `position_in_bounds`, `add_pixel`, `set_pixels`) and `Frame`.
- `glyphengine.animation`: `Animation`, advanced by elapsed time with
  `update(delta_time)` or stepped by hand with `increment_frame()` and
  `decrement_frame()`. A repeating animation wraps to its first frame; a
  non-repeating one stops on its last.
- `glyphengine.printable`: `Printable`, `GameObject` and `Entity`, objects that
  own several named animations, switch between them with
  `set_current_animation(name)` and remember moved sprites
  (`dirty_sprites`) so they can be erased.
- `glyphengine.camera`: `Camera`, a view-port offset applied to objects that
  move with the camera. Moving it sets `display_needs_cleared` on its
  `EngineContext`.
- `glyphengine.ui_element`: `UIElement` with `ScreenLockPosition` and
  `StackDirection`. `set_dynamic_position` pins an element to an edge, a
  corner or the centre; `UIElement.update_all_locked_positions(length, height)`
  lays all pinned elements out for a screen size and
  `UIElement.clear_locked()` forgets them.
- `glyphengine.button`: `Button`, which runs its `function` from
  `execute_function()` and can wrap its border around text with `set_text`.
- `glyphengine.slider`: `Slider`, a bar with a handle; `position`, `length`,
  `move_left()`, `move_right()`, `value()` (0.0 to 1.0) and
  `set_position_from_mouse`.
- `glyphengine.input_handler`: `InputHandler`, `MouseEvent` and `MouseFlag`,
  routing mouse presses, drags and releases to buttons and sliders.
  `process_mouse_event(event)` can be called directly; `process_input(key)`
  reads the event through the handler's `mouse_reader` when the key is
  `KEY_MOUSE`.
- `glyphengine.colors`: `ColorManager`, mapping RGB foreground/background pairs
  onto a limited set of terminal colour pairs through `init_color` and
  `init_pair` callbacks, plus `quantize` and `to_curses_rgb`.
- `glyphengine.display`: `Display`, a double-buffered screen that only writes
  cells that changed. `start()`/`stop()` (or `with Display(...)`) take over
  and release the terminal; `refresh(delta_time)` also works without a
  terminal and returns the changed cells.
- `glyphengine.engine`: `GameEngine` and `GameState`. `run()` loops reading
  keys, calling the state's `update()`, switching to `next_state()` when one is
  given and redrawing, until the `` ` `` key is pressed.
- `glyphengine.factory`: `PrintableFactory`, loading entities, UI elements and
  buttons from frame files and saving printables back with `write_printable`;
  `parse_frame` and `format_frame` work on the text of one frame.
- `glyphengine.params`: `EngineContext`, the shared state of a running engine:
  registered printables, camera, screen size, run flag and input handler.

## A short example

```python
from glyphengine.basics import Pixel, Position, Sprite, Frame
from glyphengine.animation import Animation

blink = Animation(
    "blink",
    [
        Frame(Sprite([Pixel(Position(0, 0), "*")], 1), 0.5),
        Frame(Sprite([Pixel(Position(0, 0), " ")], 1), 0.5),
    ],
    True,
)
blink.update(0.6)
print(blink.current_frame_sprite().pixels[0].character)  # " "
```

Running a game means subclassing `GameState` and handing it to the engine:

```python
from glyphengine.engine import GameEngine, GameState

class Title(GameState):
    def update(self):
        super().update()

GameEngine(Title()).run()
```

## Frame files

A frame file holds a header line `duration,layer`, the character art, a `---`
line, then one row per art line of text colours (`r,g,b` separated by spaces),
the same for background colours, and finally one row of integer attributes per
art line. `PrintableFactory` reads an animation from every frame file in
`<base_dir>/<entity>/<animation>/`, sorted by file name; `base_dir` defaults
to `src/Animations` relative to the working directory. A file that cannot be
opened gives a frame holding a single `~`. `write_printable` writes
`<base_dir>/<name>/<animation>/frameN.txt`.

## What it does not do

The package is a library only: it installs no command and ships no game,
screens or artwork. A game supplies its own `GameState` subclasses and its
own frame files.