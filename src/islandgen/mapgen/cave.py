# src/islandgen/mapgen/cave.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import GenerationError
from ..fixed import Fixed
from ..grid import Grid
from ..rng import LevelRandom
from ..tiles import Tile
from .placement import (
    Position, choose_sand_or_grass, generate_enemies, place_ladder, place_surrounded_tile,
)
from .profile import CAVE
from .terrain import generate_terrain

log = logging.getLogger(__name__)


@dataclass
class Cave:
    grid: Grid
    boss_position: Optional[Position] = None

    profile = CAVE
    SIZE = CAVE.size

    @classmethod
    def generate(cls, rng: LevelRandom) -> "Cave":
        level = cls(grid=generate_terrain(rng, cls.profile))
        place_ladder(level.grid, cls.profile.ladder_surround)

        # The pick is thrown away; it only proves a droppable tile exists.
        if choose_sand_or_grass(level.grid, rng) is None:
            raise GenerationError(
                cls.profile.name, "failed to choose discarded tile while generating cave"
            )

        level.place_boss_entrance(rng)
        return level

    def tile(self, x: int, y: int) -> Tile:
        return self.grid.get(x, y)

    def place_boss_entrance(self, rng: LevelRandom) -> None:
        """
        One coordinate in [1, SIZE-2], the other pinned to 1 or SIZE-2,
        randomly transposed. Gem 3x3 with the boss ladder in the middle.
        """
        size = self.SIZE
        boss_x = rng.next_max(Fixed.from_int(size - 2)).floor().to_int() + 1
        boss_y = 1 if rng.next() > Fixed.HALF else size - 2
        if rng.next() > Fixed.HALF:
            boss_x, boss_y = boss_y, boss_x
        place_surrounded_tile(self.grid, boss_x, boss_y, Tile.BOSS_LADDER, Tile.GEM)
        self.boss_position = (boss_x, boss_y)
        log.debug("cave boss entrance at %s", self.boss_position)

    def generate_enemies(self, rng: LevelRandom) -> Tuple[Position, ...]:
        return generate_enemies(self.grid, rng)
