import pytest

from glyphengine.animation import Animation
from glyphengine.basics import Frame, Pixel, Position, Sprite
from glyphengine.printable import Entity, GameObject, Printable


def make_animation(name, cells, layer=0):
    pixels = [Pixel(Position(x, y), "#") for x, y in cells]
    return Animation(name, [Frame(Sprite(pixels, layer), 1.0)], True)


def test_default_printable_falls_back_to_first_animation():
    printable = Printable()
    assert printable.name == "default"
    assert printable.current_animation_name == "default"
    assert printable.current_animation().name == "none"
    assert printable.visible is False


def test_current_animation_is_first_given():
    printable = Printable("thing", [make_animation("walk", [(0, 0)]), make_animation("run", [(1, 1)])])
    assert printable.current_animation_name == "walk"
    assert printable.current_animation().name == "walk"


def test_set_current_animation_known_and_unknown():
    printable = Printable("thing", [make_animation("walk", [(0, 0)]), make_animation("run", [(1, 1)])])
    assert printable.set_current_animation("run") is True
    assert printable.current_animation().name == "run"
    assert printable.set_current_animation("jump") is False
    assert printable.current_animation_name == "run"


def test_add_animation_makes_it_selectable():
    printable = Printable("thing", [make_animation("walk", [(0, 0)])])
    printable.add_animation(make_animation("run", [(2, 2)]))
    assert printable.set_current_animation("run") is True
    assert [a.name for a in printable.animations] == ["walk", "run"]


def test_empty_printable_current_animation_raises():
    printable = Printable("thing", [])
    with pytest.raises(LookupError):
        printable.current_animation()


def test_displace_moves_sprite_and_records_dirty_copy():
    printable = Printable("thing", [make_animation("walk", [(2, 3)])])
    before = printable.current_animation().current_frame_sprite().pixels[0].position
    printable.displace(4, 5)
    after = printable.current_animation().current_frame_sprite().pixels[0].position
    assert after == before.translated(4, 5)
    dirty = printable.dirty_sprites
    assert len(dirty) == 1
    assert dirty[0].pixels[0].position == before


def test_displace_only_moves_current_animation():
    printable = Printable("thing", [make_animation("walk", [(2, 3)]), make_animation("run", [(2, 3)])])
    printable.displace(1, 1)
    run = printable.animations[1]
    assert run.current_frame_sprite().pixels[0].position == Position(2, 3)


def test_clear_dirty_sprites():
    printable = Printable("thing", [make_animation("walk", [(0, 0)])])
    printable.add_dirty_sprite(Sprite([Pixel(Position(1, 1), "x")]))
    printable.displace(1, 0)
    assert len(printable.dirty_sprites) == 2
    printable.clear_dirty_sprites()
    assert printable.dirty_sprites == ()


def test_dirty_sprite_is_independent_copy():
    sprite = Sprite([Pixel(Position(1, 1), "x")])
    printable = Printable()
    printable.add_dirty_sprite(sprite)
    sprite.displace(3, 3)
    assert printable.dirty_sprites[0].pixels[0].position == Position(1, 1)


def test_move_to_position_moves_every_animation_anchor():
    printable = Printable("thing", [make_animation("walk", [(2, 3), (4, 5)]), make_animation("run", [(7, 1)])])
    target = Position(10, 20)
    printable.move_to_position(target)
    for animation in printable.animations:
        assert animation.current_frame_sprite().anchor == target


def test_set_all_animation_sprite_layers():
    printable = Printable("thing", [make_animation("walk", [(0, 0)]), make_animation("run", [(0, 0)])])
    printable.set_all_animation_sprite_layers(7)
    assert all(a.current_frame_sprite().layer == 7 for a in printable.animations)


def test_game_object_uses_explicit_current_animation():
    obj = GameObject("thing", True, False, [make_animation("walk", [(0, 0)]), make_animation("run", [(0, 0)])], "run")
    assert obj.current_animation_name == "run"
    assert obj.current_animation().name == "run"
    assert obj.visible is True
    assert obj.moveable_by_camera is False


def test_default_entity():
    entity = Entity()
    assert entity.name == "none"
    assert entity.moveable_by_camera is True
    assert entity.current_animation_name == "default"


def test_entity_without_animations_raises():
    with pytest.raises(ValueError):
        Entity("ghost", [])


def test_entity_position_in_bounds():
    entity = Entity("hero", [make_animation("idle", [(1, 1), (2, 1)])], True, True)
    assert entity.position_in_bounds(Position(2, 1)) is True
    assert entity.position_in_bounds(Position(3, 1)) is False