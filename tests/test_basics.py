import dataclasses

import pytest

from glyphengine.basics import RGB, Frame, Pixel, Position, Sprite


def test_position_default_is_origin():
    assert Position() == Position(0, 0)


def test_position_translated_from_origin():
    assert Position().translated(2, 7) == Position(2, 7)


def test_position_translated_round_trip():
    start = Position(5, -3)
    assert start.translated(4, 9).translated(-4, -9) == start


def test_position_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Position().x = 3


def test_rgb_clamps_channels():
    color = RGB(1500, -5, 500)
    assert (color.r, color.g, color.b) == (1000, 0, 500)


def test_rgb_default_is_black_and_equality():
    assert RGB() == RGB(0, 0, 0)
    assert hash(RGB(1000, 1000, 1000)) == hash(RGB(2000, 1000, 1000))
    assert tuple(RGB(10, 20, 30)) == (10, 20, 30)


def test_pixel_defaults():
    pixel = Pixel()
    assert pixel.character == " "
    assert pixel.text_color == RGB(1000, 1000, 1000)
    assert pixel.background_color == RGB(0, 0, 0)
    assert pixel.attributes == 0
    assert pixel.position == Position()


def test_pixel_displace():
    pixel = Pixel(Position(), "@")
    pixel.displace(6, 2)
    assert pixel.position == Position(6, 2)
    assert pixel.character == "@"


def test_sprite_anchor_never_exceeds_origin_on_construction():
    sprite = Sprite([Pixel(Position(3, 4), "a"), Pixel(Position(5, 6), "b")])
    assert sprite.anchor == Position(0, 0)


def test_sprite_anchor_takes_minimum_coordinates():
    sprite = Sprite([Pixel(Position(-2, 5), "a"), Pixel(Position(4, -3), "b")], 2)
    assert sprite.anchor == Position(-2, -3)
    assert sprite.layer == 2


def test_sprite_add_pixel_lowers_anchor():
    sprite = Sprite()
    sprite.add_pixel(Pixel(Position(-4, -1), "x"))
    assert sprite.anchor == Position(-4, -1)
    assert sprite.position_in_bounds(Position(-4, -1))


def test_sprite_displace_round_trip():
    pixels = [Pixel(Position(1, 1), "a"), Pixel(Position(2, 1), "b")]
    sprite = Sprite(pixels)
    original = [p.position for p in sprite.pixels]
    anchor = sprite.anchor
    sprite.displace(7, -2)
    assert sprite.anchor == anchor.translated(7, -2)
    sprite.displace(-7, 2)
    assert [p.position for p in sprite.pixels] == original
    assert sprite.anchor == anchor


def test_sprite_move_anchor_keeps_offsets():
    sprite = Sprite([Pixel(Position(-1, -1), "a"), Pixel(Position(2, 3), "b")])
    before = [(p.position.x - sprite.anchor.x, p.position.y - sprite.anchor.y) for p in sprite.pixels]
    target = Position(10, 20)
    sprite.move_anchor_to_position(target)
    assert sprite.anchor == target
    after = [(p.position.x - target.x, p.position.y - target.y) for p in sprite.pixels]
    assert after == before


def test_sprite_position_in_bounds():
    sprite = Sprite([Pixel(Position(1, 2), "a")])
    assert sprite.position_in_bounds(Position(1, 2))
    assert not sprite.position_in_bounds(Position(2, 1))


def test_sprite_set_pixels_replaces_and_lowers_anchor():
    sprite = Sprite([Pixel(Position(0, 0), "a")])
    sprite.set_pixels([Pixel(Position(-3, -6), "z")])
    assert [p.character for p in sprite.pixels] == ["z"]
    assert sprite.anchor == Position(-3, -6)


def test_sprite_copies_pixels():
    pixel = Pixel(Position(1, 1), "a")
    sprite = Sprite([pixel])
    pixel.displace(5, 5)
    assert sprite.pixels[0].position == Position(1, 1)


def test_frame_defaults_and_displace():
    frame = Frame()
    assert frame.duration == 1.0
    assert frame.sprite == Sprite()
    frame = Frame(Sprite([Pixel(Position(), "q")]), 0.5)
    frame.displace(3, 4)
    assert frame.sprite.pixels[0].position == Position(3, 4)


def test_frame_copies_sprite():
    sprite = Sprite([Pixel(Position(), "q")])
    frame = Frame(sprite, 2.0)
    sprite.displace(9, 9)
    assert frame.sprite.pixels[0].position == Position()