from glyphengine.camera import Camera
from glyphengine.params import EngineContext


def test_default_size_and_offsets():
    camera = Camera()
    assert (camera.length, camera.height) == (80, 24)
    assert (camera.length_offset, camera.height_offset) == (0, 0)


def test_displace_accumulates_offsets():
    camera = Camera(40, 10)
    camera.displace_view_port(3, -2)
    camera.displace_view_port(1, 5)
    assert camera.length_offset == 3 + 1
    assert camera.height_offset == -2 + 5


def test_displace_requests_clear():
    context = EngineContext()
    camera = Camera(80, 24, context)
    camera.displace_view_port(0, 1)
    assert context.display_needs_cleared is True


def test_zero_displacement_leaves_flag():
    context = EngineContext()
    camera = Camera(80, 24, context)
    camera.displace_view_port(0, 0)
    assert context.display_needs_cleared is False
    assert camera.length_offset == 0


def test_size_is_settable():
    camera = Camera()
    camera.length = 120
    camera.height = 40
    assert (camera.length, camera.height) == (120, 40)