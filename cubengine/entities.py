"""Entities, the game world that holds them, and entity factories."""

from __future__ import annotations

from dataclasses import dataclass, field

from .components import Keyboard, Sprite, Transform, Velocity
from .images import ImageData, ImageId

MAX_ENTITIES = 1024


@dataclass
class Entity:
    """A bag of optional components with an id assigned by the game."""

    id: int = 0
    keyboard: Keyboard | None = None
    transform: Transform | None = None
    velocity: Velocity | None = None
    sprite: Sprite | None = None


@dataclass
class Game:
    """The set of entities and the loaded images."""

    entities: list[Entity] = field(default_factory=list)
    images: dict[ImageId, ImageData] = field(default_factory=dict)

    @property
    def total_entities(self) -> int:
        return len(self.entities)

    def add_entity(self, entity: Entity) -> int:
        """Register an entity, give it the next id and return the new count."""
        if len(self.entities) >= MAX_ENTITIES:
            raise OverflowError(f"no room for more than {MAX_ENTITIES} entities")
        entity.id = len(self.entities)
        self.entities.append(entity)
        return len(self.entities)


def init_player(game: Game) -> Entity:
    """Add the keyboard-driven player entity."""
    player = Entity(
        keyboard=Keyboard(),
        transform=Transform(),
        velocity=Velocity(),
        sprite=Sprite(game.images.get(ImageId.HERO)),
    )
    game.add_entity(player)
    return player


def init_enemy(game: Game) -> Entity:
    """Add a static enemy entity."""
    enemy = Entity(transform=Transform(), sprite=Sprite(game.images.get(ImageId.ENEM)))
    game.add_entity(enemy)
    return enemy


def init_crosshair(game: Game) -> Entity:
    """Add the crosshair entity."""
    crosshair = Entity(
        transform=Transform(), sprite=Sprite(game.images.get(ImageId.CROSSHAIR))
    )
    game.add_entity(crosshair)
    return crosshair