"""Software drawing into frame images."""

from __future__ import annotations

from dataclasses import dataclass

from .images import ImageData

MAGENTA = 0xFF00FF


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def paint_pixel(image: ImageData, x: int, y: int, color: int) -> None:
    """Set one pixel."""
    if not image.contains(x, y):
        raise IndexError(f"pixel ({x}, {y}) outside {image.width}x{image.height}")
    image.pixels[y * image.line_length + x] = color


def _blit(
    frame: ImageData,
    src: ImageData,
    src_x: int,
    src_y: int,
    dst_x: int,
    dst_y: int,
    w: int,
    h: int,
) -> None:
    """Copy a w x h block, skipping magenta and anything out of bounds."""
    for dy in range(h):
        sy, ty = src_y + dy, dst_y + dy
        if not (0 <= sy < src.height and 0 <= ty < frame.height):
            continue
        for dx in range(w):
            sx, tx = src_x + dx, dst_x + dx
            if not (0 <= sx < src.width and 0 <= tx < frame.width):
                continue
            pixel = src.pixels[sy * src.line_length + sx]
            if pixel != MAGENTA:
                frame.pixels[ty * frame.line_length + tx] = pixel


def paint_image(frame: ImageData, src: ImageData, rect: Rect) -> None:
    """Draw the top-left rect.w x rect.h of src at (rect.x, rect.y)."""
    _blit(frame, src, 0, 0, rect.x, rect.y, rect.w, rect.h)


def paint_anim_image(
    frame: ImageData, src: ImageData, dst: Rect, src_rect: Rect
) -> None:
    """Draw the src_rect region of src at (dst.x, dst.y)."""
    _blit(frame, src, src_rect.x, src_rect.y, dst.x, dst.y, src_rect.w, src_rect.h)


def clear_window(frame: ImageData) -> None:
    """Paint the whole frame black."""
    frame.pixels[:] = [0] * len(frame.pixels)