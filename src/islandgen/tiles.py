# Canonical tile IDs. The numeric codes are written out byte-for-byte in the
# reference map data, so never renumber them.

from enum import IntEnum
from typing import Optional


class Tile(IntEnum):
    NONE = -1
    WATER = 0
    SAND = 1
    GRASS = 2
    STONE = 3
    TREE = 4
    IRON = 8
    GOLD = 9
    GEM = 10
    LADDER = 11
    SAND_WITH_ARTIFACT = 12
    GRASS_WITH_ARTIFACT = 13
    BOSS_LADDER = 14

    @property
    def byte(self) -> int:
        return self.value & 0xFF

    def with_artifact(self) -> Optional["Tile"]:
        return _ARTIFACT_VARIANT.get(self)


_ARTIFACT_VARIANT = {
    Tile.SAND: Tile.SAND_WITH_ARTIFACT,
    Tile.GRASS: Tile.GRASS_WITH_ARTIFACT,
}

ARTIFACT_TILES = frozenset(_ARTIFACT_VARIANT.values())

# Tiles the enemy scatter never spawns on.
ENEMY_BLOCKED = frozenset({
    Tile.WATER, Tile.STONE, Tile.TREE, Tile.IRON, Tile.GOLD, Tile.GEM,
})


def is_sand_or_grass(tile: Tile) -> bool:
    return tile == Tile.SAND or tile == Tile.GRASS


def from_code(code: int) -> Tile:
    """Decode a signed code or a raw byte (0xFF -> NONE)."""
    if code == 0xFF:
        return Tile.NONE
    return Tile(code)
