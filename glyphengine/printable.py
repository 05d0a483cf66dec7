"""Drawable objects made of named animations."""

from __future__ import annotations

import copy
from typing import Iterable

from .animation import Animation
from .basics import Position, Sprite


class Printable:
    """Something drawn on screen through one of its named animations."""

    def __init__(
        self,
        name: str = "default",
        animations: Iterable[Animation] | None = None,
        visible: bool = False,
        moveable_by_camera: bool = True,
    ) -> None:
        self.name = name
        self.visible = visible
        self.moveable_by_camera = moveable_by_camera
        if animations is None:
            self._animations: list[Animation] = [Animation()]
            self._current_name = "default"
        else:
            self._animations = copy.deepcopy(list(animations))
            self._current_name = self._animations[0].name if self._animations else "default"
        self._dirty_sprites: list[Sprite] = []

    @property
    def animations(self) -> list[Animation]:
        """The animations, in load order; the list itself, open to change."""
        return self._animations

    @property
    def current_animation_name(self) -> str:
        return self._current_name

    @property
    def dirty_sprites(self) -> tuple[Sprite, ...]:
        """Sprites drawn earlier that must be erased before the next draw."""
        return tuple(self._dirty_sprites)

    def add_animation(self, animation: Animation) -> None:
        """Append an animation."""
        self._animations.append(animation)

    def set_current_animation(self, name: str) -> bool:
        """Switch to the animation called ``name``; False if there is none."""
        if any(animation.name == name for animation in self._animations):
            self._current_name = name
            return True
        return False

    def current_animation(self) -> Animation:
        """The animation now playing, or the first one if the name matches none."""
        for animation in self._animations:
            if animation.name == self._current_name:
                return animation
        if not self._animations:
            raise LookupError(f"printable {self.name!r} has no animations")
        return self._animations[0]

    def displace(self, dx: int, dy: int) -> None:
        """Move the current animation, remembering its old sprite for erasing."""
        animation = next((a for a in self._animations if a.name == self._current_name), None)
        if animation is None:
            return
        self._dirty_sprites.append(copy.deepcopy(animation.current_frame_sprite()))
        animation.displace(dx, dy)

    def add_dirty_sprite(self, sprite: Sprite) -> None:
        """Remember a copy of ``sprite`` to be erased on the next draw."""
        self._dirty_sprites.append(copy.deepcopy(sprite))

    def clear_dirty_sprites(self) -> None:
        """Forget all sprites waiting to be erased."""
        self._dirty_sprites.clear()

    def move_to_position(self, position: Position) -> None:
        """Move the current frame of every animation so its anchor is ``position``."""
        for animation in self._animations:
            animation.current_frame_sprite().move_anchor_to_position(position)

    def set_all_animation_sprite_layers(self, layer: int) -> None:
        """Put every frame of every animation on ``layer``."""
        for animation in self._animations:
            animation.set_all_sprite_layers(layer)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"current={self._current_name!r}, animations={len(self._animations)})"
        )


class GameObject(Printable):
    """A printable whose starting animation is chosen explicitly."""

    def __init__(
        self,
        name: str = "default",
        visible: bool = False,
        moveable_by_camera: bool = True,
        animations: Iterable[Animation] | None = None,
        current_animation: str = "default",
    ) -> None:
        super().__init__(name, animations, visible, moveable_by_camera)
        self._current_name = current_animation


class Entity(Printable):
    """A named game object that starts on its first animation."""

    def __init__(
        self,
        name: str = "none",
        animations: Iterable[Animation] | None = None,
        visible: bool = False,
        moveable_by_camera: bool = True,
    ) -> None:
        if animations is not None:
            animations = list(animations)
            if not animations:
                raise ValueError(f"entity {name!r} has no animations")
        super().__init__(name, animations, visible, moveable_by_camera)

    def position_in_bounds(self, position: Position) -> bool:
        """Whether a pixel of the current frame sits at ``position``."""
        return self.current_animation().current_frame_sprite().position_in_bounds(position)