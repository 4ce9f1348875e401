# src/islandgen/mapgen/surface.py
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

from ..config import SETTINGS
from ..errors import GenerationError
from ..grid import Grid
from ..rng import LevelRandom
from ..tiles import Tile
from .placement import Position, choose_sand_or_grass, generate_enemies, place_ladder
from .profile import SURFACE
from .terrain import generate_terrain

log = logging.getLogger(__name__)


class Artifact(NamedTuple):
    x: int
    y: int
    tile: Tile


@dataclass
class Surface:
    grid: Grid
    start_position: Position = (0, 0)
    artifacts: List[Artifact] = field(default_factory=list)

    profile = SURFACE
    SIZE = SURFACE.size

    @classmethod
    def generate(cls, rng: LevelRandom) -> "Surface":
        """
        Terrain, ladder, start position, then the artifacts, in that draw
        order. Raises GenerationError if a Sand/Grass cell cannot be found.
        """
        level = cls(grid=generate_terrain(rng, cls.profile))
        place_ladder(level.grid, cls.profile.ladder_surround)
        level.choose_start_position(rng)
        level.place_artifacts(rng)
        return level

    def tile(self, x: int, y: int) -> Tile:
        return self.grid.get(x, y)

    def choose_start_position(self, rng: LevelRandom) -> None:
        position = choose_sand_or_grass(self.grid, rng)
        if position is None:
            raise GenerationError(self.profile.name, "failed to choose start position")
        self.start_position = position
        log.debug("surface start position %s", position)

    def place_artifacts(self, rng: LevelRandom) -> None:
        # Artifacts are not deduplicated; each pick only sees plain Sand/Grass.
        artifacts = []
        for _ in range(SETTINGS.artifact_count):
            position = choose_sand_or_grass(self.grid, rng)
            if position is None:
                raise GenerationError(self.profile.name, "failed to choose tile for artifact")
            ax, ay = position
            new_tile = self.grid.get(ax, ay).with_artifact()
            self.grid.set(ax, ay, new_tile)
            artifacts.append(Artifact(ax, ay, new_tile))
        self.artifacts = artifacts

    def generate_enemies(self, rng: LevelRandom) -> Tuple[Position, ...]:
        return generate_enemies(self.grid, rng)
