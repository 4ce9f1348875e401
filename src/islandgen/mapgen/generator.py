# src/islandgen/mapgen/generator.py
# Whole-world generator: one seeded stream feeds the cave, then the surface.

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..config import SETTINGS
from ..fixed import Fixed, as_u32
from ..rng import LevelRandom, check_seed
from .cave import Cave
from .placement import Position
from .surface import Surface

log = logging.getLogger(__name__)

EnemySet = Tuple[Position, ...]


class LevelType(enum.Enum):
    SURFACE = "surface"
    CAVE = "cave"


def warmed_up_random(seed: int) -> LevelRandom:
    rng = LevelRandom.from_seed(seed)
    for _ in range(SETTINGS.warmup_draws):
        rng.next()
    return rng


def enemy_random(seed: int) -> LevelRandom:
    """Second stream, seeded from the raw bits of the first stream's first draw."""
    initializer = LevelRandom.from_seed(seed)
    return LevelRandom.from_seed(as_u32(initializer.next_max(Fixed.MIN).bits))


@dataclass
class World:
    surface: Surface
    cave: Cave
    surface_enemies: Optional[EnemySet] = None
    cave_enemies: Optional[EnemySet] = None

    @classmethod
    def generate(cls, seed: int) -> "World":
        """Raises GenerationError from whichever level fails first."""
        check_seed(seed)
        rng = warmed_up_random(seed)
        cave = Cave.generate(rng)
        surface = Surface.generate(rng)
        log.info("generated world for seed %d (start %s)", seed, surface.start_position)
        return cls(surface=surface, cave=cave)

    def generate_enemies(self, seed: int) -> None:
        rng = enemy_random(check_seed(seed))
        self.cave_enemies = self.cave.generate_enemies(rng)
        self.surface_enemies = self.surface.generate_enemies(rng)

    def level(self, kind: LevelType) -> Union[Surface, Cave]:
        return self.surface if kind is LevelType.SURFACE else self.cave

    def enemies(self, kind: LevelType) -> Optional[EnemySet]:
        return self.surface_enemies if kind is LevelType.SURFACE else self.cave_enemies


def generate_world(seed: int, with_enemies: bool = False) -> World:
    world = World.generate(seed)
    if with_enemies:
        world.generate_enemies(seed)
    return world
