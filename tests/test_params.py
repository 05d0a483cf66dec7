from glyphengine.input_handler import InputHandler
from glyphengine.params import EngineContext
from glyphengine.printable import Printable


def test_defaults_match_standard_terminal():
    context = EngineContext()
    assert context.screen_height == 24
    assert context.screen_length == 80
    assert context.printables_need_sorted is True
    assert context.engine_running is False
    assert context.display_needs_cleared is False
    assert context.all_printables == []


def test_register_appends_and_marks_unsorted():
    context = EngineContext()
    context.printables_need_sorted = False
    first = Printable("first")
    second = Printable("second")
    context.register(first)
    context.register(second)
    assert context.all_printables == [first, second]
    assert context.printables_need_sorted is True


def test_reset_restores_defaults():
    context = EngineContext()
    old_handler = context.input_handler
    context.register(Printable("thing"))
    context.screen_height = 50
    context.engine_running = True
    context.display_needs_cleared = True
    context.user_input = 65
    context.reset()
    assert context == EngineContext(input_handler=context.input_handler)
    assert context.all_printables == []
    assert context.screen_height == 24
    assert context.input_handler is not old_handler
    assert isinstance(context.input_handler, InputHandler) and context.input_handler.buttons == ()


def test_contexts_do_not_share_lists():
    a = EngineContext()
    b = EngineContext()
    a.register(Printable())
    assert b.all_printables == []