from dataclasses import replace

import pytest

from islandgen.fixed import Fixed
from islandgen.mapgen.noise import flat_field
from islandgen.mapgen.profile import CAVE, SURFACE, TerrainCounts
from islandgen.mapgen.terrain import (
    classify_terrain, edge_distance, generate_terrain, try_generate_terrain,
)
from islandgen.rng import LevelRandom
from islandgen.tiles import Tile

N = CAVE.size
C = N // 2

def fields(cur, cur2, cur3, cur4):
    return [flat_field(N, Fixed.from_num(v)) for v in (cur, cur2, cur3, cur4)]

def test_edge_distance():
    assert edge_distance(0, 64) == Fixed.ONE
    assert edge_distance(32, 64) == Fixed.ZERO
    assert edge_distance(16, 64) == Fixed.HALF
    assert edge_distance(63, 64) == Fixed.from_bits(0xF800)

def test_flat_noise_is_base_tile_with_water_rim():
    grid, counts = classify_terrain(fields(0.5, 0.5, 0.5, 0.5), CAVE)
    assert grid.get(C, C) == Tile.STONE
    assert grid.get(0, 0) == Tile.WATER
    assert grid.get(0, C) == Tile.WATER
    assert counts == TerrainCounts(0, 0, 0)

def test_ridge_tile_when_v2_high():
    grid, counts = classify_terrain(fields(1.0, 0.5, 0.0, 1.0), CAVE)
    assert grid.get(C, C) == Tile.GOLD
    assert grid.get(0, 0) == Tile.WATER
    assert counts.tile_3 == grid.count(Tile.GOLD) > 0

def test_inland_tiles():
    grid, counts = classify_terrain(fields(1.0, 0.5, 1.0, 0.0), CAVE)
    assert grid.get(C, C) == Tile.GEM
    assert counts.tile_4 == grid.count(Tile.GEM)
    grid, _ = classify_terrain(fields(1.0, 0.5, 1.0, 1.0), CAVE)
    assert grid.get(C, C) == Tile.SAND

def test_coast_band_tile():
    # v = 0.125 -> coast 0.5 at the centre, inside (0.3, 0.6]
    grid, counts = classify_terrain(fields(1.0, 0.875, 1.0, 1.0), CAVE)
    assert grid.get(C, C) == Tile.IRON
    assert counts.tile_1 == grid.count(Tile.IRON) > 0

def test_surface_tiles_follow_profile():
    flat = [flat_field(SURFACE.size, Fixed.from_num(v)) for v in (1.0, 0.5, 0.0, 1.0)]
    grid, _ = classify_terrain(flat, SURFACE)
    assert grid.get(32, 32) == Tile.STONE
    assert grid.get(63, 63) == Tile.WATER

def test_unreachable_minimum_rejects_and_consumes_four_fields():
    impossible = replace(CAVE, min_counts=TerrainCounts(N * N + 1, 0, 0))
    rng = LevelRandom.from_seed(21)
    assert try_generate_terrain(rng, impossible) is None
    ref = LevelRandom.from_seed(21)
    for _ in range(4 * (N * N - 1)):
        ref.next()
    assert rng == ref

def test_profile_values():
    assert SURFACE.size == 64 and CAVE.size == 32
    assert SURFACE.terrain_tiles == (Tile.WATER, Tile.SAND, Tile.GRASS, Tile.STONE, Tile.TREE)
    assert CAVE.terrain_tiles == (Tile.STONE, Tile.IRON, Tile.SAND, Tile.GOLD, Tile.GEM)
    assert SURFACE.min_counts == TerrainCounts(0, 30, 30)
    assert CAVE.min_counts == TerrainCounts(30, 20, 15)
    assert (SURFACE.ladder_surround, CAVE.ladder_surround) == (Tile.STONE, Tile.SAND)

@pytest.mark.parametrize("profile, counted", [
    (SURFACE, (Tile.SAND, Tile.STONE, Tile.TREE)),
    (CAVE, (Tile.IRON, Tile.GOLD, Tile.GEM)),
])
def test_accepted_terrain_meets_minimums(profile, counted):
    for seed in (1, 77, 4096):
        grid = generate_terrain(LevelRandom.from_seed(seed), profile)
        assert grid.size == profile.size
        got = TerrainCounts(*(grid.count(t) for t in counted))
        assert got.meets(profile.min_counts), f"{profile.name} seed {seed}: {got}"
