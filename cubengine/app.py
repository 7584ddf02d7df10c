"""Window, event loop and the game's entry point."""

from __future__ import annotations

import argparse
import sys
from array import array
from pathlib import Path

from .entities import Game, init_player
from .images import ImageData, ImageId, load_image
from .keys import MAX_KEYS, Key, KeyState, WindowClosed, request_close
from .systems import FRAME_HEIGHT, FRAME_WIDTH, Context, keyboard_system, movement_system, render_system

TITLE = "cub3d"
IMAGE_FILES = {
    ImageId.HERO: "walk_anim.xpm",
    ImageId.CROSSHAIR: "walk_anim.xpm",
    ImageId.ENEM: "oi.xpm",
}


def game_loop(ctx: Context) -> int:
    """Run one frame: input, movement, rendering."""
    keyboard_system(ctx)
    movement_system(ctx)
    render_system(ctx)
    return 0


def _load_images(res_dir: Path) -> dict[ImageId, ImageData]:
    return {image_id: load_image(res_dir / name) for image_id, name in IMAGE_FILES.items()}


def _keysym(pygame_key: int, pygame) -> int | None:
    """Translate a pygame key code into the X11 key symbol the game uses."""
    special = {
        pygame.K_ESCAPE: int(Key.ESC),
        pygame.K_LSHIFT: int(Key.SHIFT),
        pygame.K_RSHIFT: int(Key.SHIFT) + 1,
    }
    if pygame_key in special:
        return special[pygame_key]
    if 0 <= pygame_key < MAX_KEYS:
        return pygame_key
    return None


def _presenter(pygame, screen):
    def present(frame: ImageData) -> None:
        packed = array("I", (p | 0xFF000000 for p in frame.pixels))
        if sys.byteorder == "little":
            packed.byteswap()
        surface = pygame.image.frombuffer(
            packed.tobytes(), (frame.width, frame.height), "ARGB"
        )
        screen.blit(surface, (0, 0))
        pygame.display.flip()

    return present


def _handle_events(pygame, keys: KeyState) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            request_close()
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            keysym = _keysym(event.key, pygame)
            if keysym is None:
                continue
            if event.type == pygame.KEYDOWN:
                keys.keydown(keysym)
            else:
                keys.keyup(keysym)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="cubengine", description="Run the game.")
    parser.add_argument("--res", default="res", help="directory holding the images")
    args = parser.parse_args(argv)

    game = Game()
    try:
        game.images.update(_load_images(Path(args.res)))
    except OSError as exc:
        print(f"cubengine: cannot load image: {exc}", file=sys.stderr)
        return 1
    init_player(game)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((FRAME_WIDTH, FRAME_HEIGHT))
        pygame.display.set_caption(TITLE)
        ctx = Context(game=game, present=_presenter(pygame, screen))
        print("Game is working...")
        while True:
            _handle_events(pygame, ctx.keys)
            game_loop(ctx)
    except WindowClosed:
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())