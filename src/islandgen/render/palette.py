# Flat tile colours shared by the pygame viewer and the PNG renderer.
from typing import Tuple

from ..tiles import Tile

RGBA = Tuple[int, int, int, int]

TILE_COLORS = {
    Tile.NONE:                (  0,   0,   0,   0),
    Tile.WATER:               ( 40,  90, 200, 255),
    Tile.SAND:                (230, 210, 140, 255),
    Tile.GRASS:               ( 80, 170,  60, 255),
    Tile.STONE:               (120, 120, 120, 255),
    Tile.TREE:                ( 20, 100,  30, 255),
    Tile.IRON:                (170, 140, 120, 255),
    Tile.GOLD:                (240, 200,  40, 255),
    Tile.GEM:                 (200,  60, 220, 255),
    Tile.LADDER:              (140,  90,  40, 255),
    Tile.SAND_WITH_ARTIFACT:  (255, 120,  60, 255),
    Tile.GRASS_WITH_ARTIFACT: (255,  80,  80, 255),
    Tile.BOSS_LADDER:         (180,   0,   0, 255),
}

ENEMY_COLOR: RGBA = (255, 255, 255, 255)
START_COLOR: RGBA = (255, 255, 0, 255)


def tile_color(tile: Tile) -> RGBA:
    return TILE_COLORS[Tile(tile)]
