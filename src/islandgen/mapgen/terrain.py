# src/islandgen/mapgen/terrain.py
# Four noise layers -> one classified tile grid, retried until the
# profile's minimum tile counts are met.

import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from ..fixed import Fixed
from ..grid import Grid
from ..rng import LevelRandom
from ..tiles import Tile
from .noise import Field, generate_noise
from .profile import LevelProfile, TerrainCounts

log = logging.getLogger(__name__)


class NoiseLayer(NamedTuple):
    starting_scale: Fixed
    scale_multiplier: Fixed
    features_step: Optional[int]  # None -> the grid size


# Generated in this order from the same stream.
NOISE_LAYERS = (
    NoiseLayer(Fixed.from_num(0.9), Fixed.from_num(0.2), None),
    NoiseLayer(Fixed.from_num(0.9), Fixed.from_num(0.4), 8),
    NoiseLayer(Fixed.from_num(0.9), Fixed.from_num(0.3), 8),
    NoiseLayer(Fixed.from_num(0.8), Fixed.from_num(1.1), 4),
)

WATER_BELOW = Fixed.from_num(-1.3)
COAST_ABOVE = Fixed.from_num(0.3)
INLAND_ABOVE = Fixed.from_num(0.6)
RIDGE_ABOVE = Fixed.from_num(0.5)
HALF = Fixed.HALF


def generate_layers(rng: LevelRandom, size: int) -> Tuple[Field, ...]:
    return tuple(
        generate_noise(rng, size, layer.starting_scale, layer.scale_multiplier,
                       layer.features_step or size)
        for layer in NOISE_LAYERS
    )


def edge_distance(i: int, size: int) -> Fixed:
    """|i/size - 0.5| * 2: 0 at the centre line, 1 at index 0."""
    return abs(Fixed.from_int(i) / Fixed.from_int(size) - HALF) * 2


def classify_terrain(
    fields: Sequence[Field],
    profile: LevelProfile,
) -> Tuple[Grid, TerrainCounts]:
    cur, cur2, cur3, cur4 = fields
    tile_0, tile_1, tile_2, tile_3, tile_4 = profile.terrain_tiles
    size = profile.size
    grid = Grid.filled(size)
    dists = [edge_distance(i, size) for i in range(size)]

    n1 = n3 = n4 = 0
    for i in range(size):
        for j in range(size):
            c = cur[i][j]
            v = abs(c - cur2[i][j])
            v2 = abs(c - cur3[i][j])
            v3 = abs(c - cur4[i][j])
            dist = max(dists[i], dists[j])
            coast = v * 4 - dist * dist * dist * dist * 4

            if coast < WATER_BELOW:
                tile = Tile.WATER
            elif coast > COAST_ABOVE:
                if v2 > RIDGE_ABOVE:
                    n3 += 1
                    tile = tile_3
                elif coast > INLAND_ABOVE:
                    if v3 > RIDGE_ABOVE:
                        n4 += 1
                        tile = tile_4
                    else:
                        tile = tile_2
                else:
                    n1 += 1
                    tile = tile_1
            else:
                tile = tile_0

            grid.set(i, j, tile)

    return grid, TerrainCounts(n1, n3, n4)


def try_generate_terrain(rng: LevelRandom, profile: LevelProfile) -> Optional[Grid]:
    grid, counts = classify_terrain(generate_layers(rng, profile.size), profile)
    if counts.meets(profile.min_counts):
        log.debug("%s terrain accepted: %s", profile.name, counts)
        return grid
    log.debug("%s terrain rejected: %s < %s", profile.name, counts, profile.min_counts)
    return None


def generate_terrain(rng: LevelRandom, profile: LevelProfile) -> Grid:
    """
    Retry until the minimum counts are met. No attempt cap: a profile whose
    minimums can never be met blocks forever.
    """
    attempts = 0
    while True:
        attempts += 1
        grid = try_generate_terrain(rng, profile)
        if grid is not None:
            if attempts > 1:
                log.debug("%s terrain needed %d passes", profile.name, attempts)
            return grid
