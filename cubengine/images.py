"""Image identifiers, in-memory pixel images and image loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike

from PIL import Image

log = logging.getLogger(__name__)


class ImageId(IntEnum):
    """Slots in the game's image table."""

    HERO = 0
    MAP = 1
    ENEM = 2
    CROSSHAIR = 3
    WALL_N = 4
    WALL_W = 5
    WALL_E = 6
    WALL_S = 7
    HUD_HP = 8
    BT_PLAY = 9
    BT_PLAY_HOVER = 10


@dataclass
class ImageData:
    """A row-major image of 0xRRGGBB integer pixels."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        expected = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * expected
        elif len(self.pixels) != expected:
            raise ValueError(
                f"expected {expected} pixels, got {len(self.pixels)}"
            )

    @property
    def line_length(self) -> int:
        """Number of pixels in one row."""
        return self.width

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """The colour at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def new_image(width: int, height: int, fill: int = 0) -> ImageData:
    """Create an image of the given size filled with one colour."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    return ImageData(width, height, [fill] * (width * height))


def load_image(path: str | PathLike[str]) -> ImageData:
    """Load an image file into packed 0xRRGGBB pixels."""
    with Image.open(path) as img:
        rgb = img.convert("RGB")
        width, height = rgb.size
        data = rgb.tobytes()
    pixels = [int.from_bytes(data[i:i + 3], "big") for i in range(0, len(data), 3)]
    log.debug("Image loaded. path: %s, width: %d, height: %d", path, width, height)
    return ImageData(width, height, pixels)