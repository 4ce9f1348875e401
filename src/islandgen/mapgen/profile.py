from dataclasses import dataclass
from typing import NamedTuple, Tuple

from ..tiles import Tile


class TerrainCounts(NamedTuple):
    tile_1: int
    tile_3: int
    tile_4: int

    def meets(self, minimum: "TerrainCounts") -> bool:
        return (
            self.tile_1 >= minimum.tile_1
            and self.tile_3 >= minimum.tile_3
            and self.tile_4 >= minimum.tile_4
        )


@dataclass(frozen=True)
class LevelProfile:
    """Everything that differs between level kinds for the shared algorithm."""
    name: str
    size: int
    terrain_tiles: Tuple[Tile, Tile, Tile, Tile, Tile]
    ladder_surround: Tile
    min_counts: TerrainCounts

    @property
    def center(self) -> Tuple[int, int]:
        return self.size // 2, self.size // 2


SURFACE = LevelProfile(
    name="surface",
    size=64,
    terrain_tiles=(Tile.WATER, Tile.SAND, Tile.GRASS, Tile.STONE, Tile.TREE),
    ladder_surround=Tile.STONE,
    min_counts=TerrainCounts(0, 30, 30),
)

CAVE = LevelProfile(
    name="cave",
    size=32,
    terrain_tiles=(Tile.STONE, Tile.IRON, Tile.SAND, Tile.GOLD, Tile.GEM),
    ladder_surround=Tile.SAND,
    min_counts=TerrainCounts(30, 20, 15),
)
