# cubengine

A small game engine built around entities and components. A game
(`cubengine.entities.Game`) holds a list of entities, up to 1024 of them. Each
entity carries some of these components from `cubengine.components`:
`Keyboard`, `Transform`, `Velocity` and `Sprite`. Three systems in
`cubengine.systems` run on every frame, in this order:

1. **`keyboard_system`** sets the velocity of each entity that has both a
   `Keyboard` and a `Velocity`, based on the keys held down. W and S set the
   vertical speed and A and D set the horizontal speed, at 2 pixels per frame.
   Holding Shift doubles that. If both keys on one axis are held, S or D wins.
2. **`movement_system`** adds each entity's velocity to its position.
3. **`render_system`** clears the frame to black. For each entity that has a
   `Sprite` and a `Transform`, it copies the top-left 200×160 pixels of the
   sprite's image into the frame at (200, 0). Pixels of pure magenta
   (`0xFF00FF`) count as transparent. If the context has a `present` callback,
   the frame is passed to it. The system then sleeps for the context's
   `frame_delay`, which is 0.016 seconds by default.

`cubengine.app.game_loop(ctx)` runs the three systems once.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]`.

## Running

```
cubengine
cubengine --res path/to/images
```

This loads the images and then opens an 800×600 window titled `cub3d` with the
player entity in it. The images are read from the directory given by `--res`,
which defaults to `res` under the working directory:

- `walk_anim.xpm` is used for the hero and the crosshair.
- `oi.xpm` is used for the enemy.

If an image cannot be loaded, the command prints an error and exits with
status 1.

W/A/S/D move the player and the left Shift key makes it faster. Escape or the
window's close button quits. The command prints `Game is working...` once the
window is open.

## Using the library

```python
from cubengine.entities import Game, init_player
from cubengine.keys import Key, KeyState
from cubengine.images import ImageId, new_image
from cubengine.systems import Context, keyboard_system, movement_system

game = Game()
game.images[ImageId.HERO] = new_image(200, 160, 0x00FF00)
player = init_player(game)

keys = KeyState()
keys.keydown(Key.D)

ctx = Context(game=game, keys=keys, frame=new_image(800, 600, 0))
keyboard_system(ctx)
movement_system(ctx)
assert player.transform.pos_x == 2.0
```

The `init_enemy` and `init_crosshair` functions add entities that have a
`Transform` and a `Sprite`. They take their images from the `ENEM` and
`CROSSHAIR` slots of `game.images`.

`KeyState` tracks the keys held down, given as key codes from 0 to 65535. It
has the methods `keydown`, `keyup`, `is_pressed` and `reset`. Pressing
`Key.ESC` raises `WindowClosed`, and so does `request_close()`.

`cubengine.images` has `ImageData`, which is a row-major list of `0xRRGGBB`
integers. It also has `new_image(width, height, fill)`, and `load_image(path)`,
which reads any file that Pillow can open.

The drawing helpers in `cubengine.renderer` work on `ImageData`, so you can use
them without a window:

- `paint_pixel(image, x, y, color)`: sets one pixel. It raises `IndexError`
  if the pixel is outside the image.
- `paint_image(frame, src, rect)`: draws the top-left `rect.w`×`rect.h` of
  `src` at (`rect.x`, `rect.y`).
- `paint_anim_image(frame, src, dst, src_rect)`: draws the `src_rect` region
  of `src` at (`dst.x`, `dst.y`).
- `clear_window(frame)`: paints the whole frame black.

Both `paint_image` and `paint_anim_image` skip magenta pixels, and they also
skip pixels that fall outside either image.

## What it does not do

- There is no map, no walls and no 3D view. The `MAP`, `WALL_*`, `HUD_HP` and
  `BT_PLAY*` image slots exist, but nothing uses them.
- The command adds only the player entity. It loads the enemy and crosshair
  images but never places those entities.
- Sprites are always drawn at the same place in the frame. Movement changes
  an entity's `Transform`, but it does not change where the sprite appears,
  and sprites are not animated.

## Tests

```
pytest
```