import pytest

from glyphengine.animation import Animation
from glyphengine.basics import Frame, Pixel, Position, Sprite
from glyphengine.camera import Camera
from glyphengine.display import Display
from glyphengine.params import EngineContext
from glyphengine.printable import Entity
from glyphengine.ui_element import ScreenLockPosition, UIElement


@pytest.fixture(autouse=True)
def no_locked_elements():
    UIElement.clear_locked()
    yield
    UIElement.clear_locked()


@pytest.fixture
def context():
    return EngineContext()


def entity_at(char, x, y, layer=0, name="thing"):
    sprite = Sprite([Pixel(Position(x, y), char)], layer)
    return Entity(name, [Animation("idle", [Frame(sprite, 1.0)])], True, False)


def test_construction_sets_screen_size(context):
    display = Display(context, 5, 10)
    assert (context.screen_height, context.screen_length) == (5, 10)
    assert display.cell(9, 4).character == " "


def test_defaults_to_context_size(context):
    display = Display(context)
    assert (display.height, display.length) == (context.screen_height, context.screen_length)


def test_print_pixel_in_bounds(context):
    display = Display(context, 5, 10)
    display.print_pixel(Pixel(Position(3, 2), "@"), False)
    assert display.cell(3, 2).character == "@"


def test_print_pixel_out_of_bounds_is_dropped(context):
    display = Display(context, 5, 10)
    for pos in (Position(-1, 0), Position(10, 0), Position(0, 5), Position(0, -1)):
        display.print_pixel(Pixel(pos, "@"), False)
    assert all(display.cell(x, y).character == " " for y in range(5) for x in range(10))


def test_camera_offset_applies_only_to_moveable(context):
    context.camera = Camera(context=context)
    context.camera.displace_view_port(2, 1)
    display = Display(context, 5, 10)
    display.print_pixel(Pixel(Position(0, 0), "@"), True)
    assert display.cell(2, 1).character == "@"
    assert display.cell(0, 0).character == " "
    display.print_pixel(Pixel(Position(0, 0), "#"), False)
    assert display.cell(0, 0).character == "#"


def test_erase_sprite_blanks_cells(context):
    display = Display(context, 5, 10)
    sprite = Sprite([Pixel(Position(1, 1), "a"), Pixel(Position(2, 1), "b")])
    display.print_sprite(sprite, False)
    assert display.cell(2, 1).character == "b"
    display.erase_sprite(sprite, False)
    assert display.cell(1, 1) == Pixel(Position(1, 1), " ")
    assert display.cell(2, 1).character == " "


def test_refresh_reports_changes_once(context):
    display = Display(context, 5, 10)
    display.print_pixel(Pixel(Position(3, 2), "@"), False)
    changes = display.refresh(0.0)
    assert [(pos, pixel.character) for pos, pixel in changes] == [(Position(3, 2), "@")]
    assert display.refresh(0.0) == []


def test_refresh_draws_registered_entity(context):
    display = Display(context, 5, 10)
    context.register(entity_at("E", 1, 1))
    display.refresh(0.0)
    assert display.cell(1, 1).character == "E"


def test_higher_layer_drawn_on_top(context):
    display = Display(context, 5, 10)
    top = entity_at("T", 2, 2, layer=5, name="top")
    bottom = entity_at("B", 2, 2, layer=1, name="bottom")
    context.register(top)
    context.register(bottom)
    display.refresh(0.0)
    assert display.cell(2, 2).character == "T"
    assert context.all_printables == [bottom, top]
    assert context.printables_need_sorted is False


def test_animation_advance_erases_previous_frame(context):
    display = Display(context, 5, 10)
    frames = [
        Frame(Sprite([Pixel(Position(0, 0), "A")]), 1.0),
        Frame(Sprite([Pixel(Position(1, 0), "B")]), 1.0),
    ]
    context.register(Entity("anim", [Animation("walk", frames)], True, False))
    display.refresh(0.0)
    assert display.cell(0, 0).character == "A"
    display.refresh(1.0)
    assert display.cell(0, 0).character == " "
    assert display.cell(1, 0).character == "B"


def test_displaced_entity_moves_on_screen(context):
    display = Display(context, 5, 10)
    entity = entity_at("E", 1, 1)
    context.register(entity)
    display.refresh(0.0)
    entity.displace(2, 0)
    display.refresh(0.0)
    assert display.cell(1, 1).character == " "
    assert display.cell(3, 1).character == "E"


def test_resize_updates_context_and_camera(context):
    context.camera = Camera(context=context)
    display = Display(context, 5, 10)
    display.resize(6, 12)
    assert (context.screen_height, context.screen_length) == (6, 12)
    assert (context.camera.height, context.camera.length) == (6, 12)
    assert context.display_needs_cleared is True
    display.refresh(0.0)
    assert context.display_needs_cleared is False
    display.print_pixel(Pixel(Position(11, 5), "@"), False)
    assert display.cell(11, 5).character == "@"


def test_clear_request_wipes_buffers(context):
    display = Display(context, 5, 10)
    display.print_pixel(Pixel(Position(3, 2), "@"), False)
    display.refresh(0.0)
    context.display_needs_cleared = True
    assert display.refresh(0.0) == []
    assert display.cell(3, 2).character == " "


def test_resize_lays_out_locked_elements(context):
    display = Display(context, 5, 10)
    sprite = Sprite([Pixel(Position(x, 0), "=") for x in range(3)])
    element = UIElement("bar", [Animation("idle", [Frame(sprite, 1.0)])], True, False)
    element.set_dynamic_position(ScreenLockPosition.BOTTOM_RIGHT_CORNER)
    display.resize(10, 20)
    assert element.max_position == Position(20 - 1, 10 - 1)


def test_user_input_requires_start(context):
    display = Display(context, 5, 10)
    with pytest.raises(RuntimeError):
        display.user_input()