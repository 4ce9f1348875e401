from islandgen.grid import Grid
from islandgen.mapgen.placement import (
    choose_sand_or_grass, generate_enemies, place_ladder, place_surrounded_tile,
)
from islandgen.rng import LevelRandom
from islandgen.fixed import Fixed
from islandgen.tiles import Tile

def test_surrounded_tile_overwrites_3x3():
    g = Grid.filled(8, Tile.WATER)
    place_surrounded_tile(g, 2, 5, Tile.BOSS_LADDER, Tile.GEM)
    assert g.get(2, 5) == Tile.BOSS_LADDER
    assert g.count(Tile.GEM) == 8
    assert g.get(1, 4) == Tile.GEM and g.get(3, 6) == Tile.GEM
    assert g.get(4, 5) == Tile.WATER

def test_ladder_sits_at_exact_centre():
    g = Grid.filled(32, Tile.GRASS)
    assert place_ladder(g, Tile.SAND) == (16, 16)
    assert g.find(Tile.LADDER) == [(16, 16)]
    for x in (15, 16, 17):
        for y in (15, 16, 17):
            if (x, y) != (16, 16):
                assert g.get(x, y) == Tile.SAND

def test_choose_gives_up_after_501_attempts():
    g = Grid.filled(32, Tile.WATER)
    rng = LevelRandom.from_seed(9)
    assert choose_sand_or_grass(g, rng) is None
    ref = LevelRandom.from_seed(9)
    for _ in range(2 * 501):
        ref.next_uint_max(24)
    assert rng == ref

def test_choose_draws_x_then_y_in_inner_region():
    g = Grid.filled(64, Tile.SAND)
    rng, ref = LevelRandom.from_seed(13), LevelRandom.from_seed(13)
    x, y = choose_sand_or_grass(g, rng)
    assert (x, y) == (8 + ref.next_uint_max(48), 8 + ref.next_uint_max(48))
    for _ in range(200):
        x, y = choose_sand_or_grass(g, rng)
        assert 8 <= x < 56 and 8 <= y < 56

def test_choose_skips_non_droppable_cells():
    g = Grid.filled(32, Tile.STONE)
    g.set(16, 16, Tile.GRASS)
    assert choose_sand_or_grass(g, LevelRandom.from_seed(1)) in ((16, 16), None)

def test_enemies_never_on_blocked_tiles():
    g = Grid.filled(32, Tile.WATER)
    rng = LevelRandom.from_seed(3)
    assert generate_enemies(g, rng) == ()
    ref = LevelRandom.from_seed(3)
    for _ in range(32 * 32):
        ref.next()
    assert rng == ref

def test_enemies_follow_three_percent_rolls():
    g = Grid.filled(32, Tile.SAND)
    got = generate_enemies(g, LevelRandom.from_seed(3))
    ref = LevelRandom.from_seed(3)
    want = [
        (x, y) for x in range(32) for y in range(32)
        if ref.next_max(Fixed.from_int(100)) < Fixed.from_int(3)
    ]
    assert list(got) == want
    assert list(got) == sorted(set(got))
