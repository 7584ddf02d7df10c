"""Components that entities may carry."""

from __future__ import annotations

from dataclasses import dataclass

from .images import ImageData


@dataclass
class Keyboard:
    """Marks an entity as driven by keyboard input."""


@dataclass
class Sprite:
    """The image an entity is drawn with."""

    image: ImageData | None = None


@dataclass
class Velocity:
    """Per-frame displacement."""

    vel_x: float = 0.0
    vel_y: float = 0.0


@dataclass
class Transform:
    """Position and rotation in the world."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    rot: int = 0