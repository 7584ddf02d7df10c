"""Per-frame systems: keyboard input, movement and rendering."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .entities import Entity, Game
from .images import ImageData, new_image
from .keys import Key, KeyState
from .renderer import Rect, clear_window, paint_image

FRAME_WIDTH = 800
FRAME_HEIGHT = 600
FRAME_DELAY = 0.016
WALK_SPEED = 2.0
ANIM_FRAMES = 47
SPRITE_RECT = Rect(200, 0, 200, 160)


def _new_frame() -> ImageData:
    return new_image(FRAME_WIDTH, FRAME_HEIGHT)


@dataclass
class Context:
    """Everything the systems need for one frame."""

    game: Game
    keys: KeyState = field(default_factory=KeyState)
    frame: ImageData = field(default_factory=_new_frame)
    present: Callable[[ImageData], None] | None = None
    frame_delay: float = FRAME_DELAY
    anim_frame: int = 0


def _axis(keys: KeyState, negative: Key, positive: Key) -> float:
    fast = keys.is_pressed(Key.SHIFT)
    value = 0.0
    if keys.is_pressed(negative):
        value = -WALK_SPEED * (2 if fast else 1)
    if keys.is_pressed(positive):
        value = WALK_SPEED * (2 if fast else 1)
    return value


def _steer(entity: Entity, keys: KeyState) -> None:
    velocity = entity.velocity
    velocity.vel_y = _axis(keys, Key.W, Key.S)
    velocity.vel_x = _axis(keys, Key.A, Key.D)


def keyboard_system(ctx: Context) -> None:
    """Set the velocity of keyboard-driven entities from the held keys."""
    for entity in ctx.game.entities:
        if entity.keyboard is not None and entity.velocity is not None:
            _steer(entity, ctx.keys)


def movement_system(ctx: Context) -> None:
    """Move every entity that has both a transform and a velocity."""
    for entity in ctx.game.entities:
        if entity.transform is not None and entity.velocity is not None:
            entity.transform.pos_x += entity.velocity.vel_x
            entity.transform.pos_y += entity.velocity.vel_y


def render_system(ctx: Context) -> None:
    """Clear the frame, draw every sprite, present it and wait for the next frame."""
    clear_window(ctx.frame)
    for entity in ctx.game.entities:
        if entity.sprite is None or entity.transform is None:
            continue
        if ctx.anim_frame > ANIM_FRAMES:
            ctx.anim_frame = 0
        ctx.anim_frame += 1
        if entity.sprite.image is not None:
            paint_image(ctx.frame, entity.sprite.image, SPRITE_RECT)
    if ctx.present is not None:
        ctx.present(ctx.frame)
    if ctx.frame_delay > 0:
        time.sleep(ctx.frame_delay)