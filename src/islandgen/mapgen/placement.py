# src/islandgen/mapgen/placement.py
import logging
from typing import Optional, Tuple

from ..config import SETTINGS
from ..fixed import Fixed
from ..grid import Grid
from ..rng import LevelRandom
from ..tiles import ENEMY_BLOCKED, Tile, is_sand_or_grass

log = logging.getLogger(__name__)

Position = Tuple[int, int]


def place_surrounded_tile(
    grid: Grid,
    x: int,
    y: int,
    center_tile: Tile,
    surrounding_tile: Tile,
) -> None:
    """Overwrite the 3x3 block around (x, y), then the centre itself."""
    for i in range(x - 1, x + 2):
        for j in range(y - 1, y + 2):
            grid.set(i, j, surrounding_tile)
    grid.set(x, y, center_tile)


def place_ladder(grid: Grid, surrounding_tile: Tile) -> Position:
    cx = cy = grid.size // 2
    place_surrounded_tile(grid, cx, cy, Tile.LADDER, surrounding_tile)
    return cx, cy


def choose_sand_or_grass(grid: Grid, rng: LevelRandom) -> Optional[Position]:
    """
    Rejection-sample the inner 6/8 of the grid for a Sand or Grass cell.
    x is drawn before y on every attempt. None once the attempts run out.
    """
    offset = grid.size // 8
    span = grid.size * 6 // 8
    for _ in range(SETTINGS.position_attempts):
        x = offset + rng.next_uint_max(span)
        y = offset + rng.next_uint_max(span)
        if is_sand_or_grass(grid.get(x, y)):
            return x, y
    return None


def generate_enemies(grid: Grid, rng: LevelRandom) -> Tuple[Position, ...]:
    """
    Roughly 3% of walkable cells get an enemy. One draw per cell, every cell,
    x-major. Distance to the player is not taken into account.
    """
    roll_max = Fixed.from_int(SETTINGS.enemy_roll_max)
    below = Fixed.from_int(SETTINGS.enemy_roll_below)
    enemies = set()
    for x in range(grid.size):
        for y in range(grid.size):
            if rng.next_max(roll_max) >= below:
                continue
            if grid.get(x, y) in ENEMY_BLOCKED:
                continue
            enemies.add((x, y))
    log.debug("scattered %d enemies on %dx%d grid", len(enemies), grid.size, grid.size)
    return tuple(sorted(enemies))
