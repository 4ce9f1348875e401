# src/islandgen/mapgen/noise.py
# Midpoint-displacement ("diamond-square") noise in 16.16 fixed point.
# The order of every rng draw below is part of the output: reordering any
# two statements changes every map.

from typing import List

from ..fixed import Fixed
from ..rng import LevelRandom

Field = List[List[Fixed]]  # field[x][y]

HALF = Fixed.HALF
QUARTER = Fixed.QUARTER
ONE = Fixed.ONE
ONE_AND_HALF = Fixed.from_num(1.5)


def flat_field(size: int, value: Fixed = HALF) -> Field:
    return [[value] * size for _ in range(size)]


def generate_noise(
    rng: LevelRandom,
    size: int,
    starting_scale: Fixed,
    scale_multiplier: Fixed,
    features_step: int,
) -> Field:
    """
    Return a size x size field, column-major (`field[x][y]`).

    Cells past the last row/column are treated as 0.5 rather than wrapping.
    Consumes exactly size*size - 1 draws from rng.
    """
    if size < 2 or size & (size - 1):
        raise ValueError(f"noise size must be a power of two >= 2, got {size}")

    n = flat_field(size)
    step = size
    random_scale = starting_scale

    while step > 1:
        scale = ONE if step == features_step else random_scale

        def displace() -> Fixed:
            return (rng.next() - HALF) * scale

        h = step // 2
        last = size - step
        edge = range(0, last, step)

        # edge midpoints
        for x in edge:
            col, nxt = n[x], n[x + step]
            for y in edge:
                n[x + h][y] = (col[y] + nxt[y]) * HALF + displace()
                col[y + h] = (col[y] + col[y + step]) * HALF + displace()
            # bottom row
            n[x + h][last] = (col[last] + nxt[last]) * HALF + displace()
            col[size - h] = (col[last] + HALF) * HALF + displace()

        # right column
        for y in edge:
            n[size - h][y] = (n[last][y] + HALF) * HALF + displace()
            n[last][y + h] = (n[last][y] + n[last][y + step]) * HALF + displace()

        # bottom-right corner
        n[size - h][last] = (n[last][last] + HALF) * HALF + displace()
        n[last][size - h] = (n[last][last] + HALF) * HALF + displace()

        # centres
        for x in edge:
            col, nxt = n[x], n[x + step]
            for y in edge:
                n[x + h][y + h] = (
                    (col[y] + nxt[y] + col[y + step] + nxt[y + step]) * QUARTER
                    + displace()
                )
            n[x + h][size - h] = (col[last] + nxt[last] + ONE) * QUARTER + displace()

        for y in edge:
            n[size - h][y + h] = (n[last][y] + n[last][y + step] + ONE) * QUARTER + displace()

        n[size - h][size - h] = (n[last][last] + ONE_AND_HALF) * QUARTER + displace()

        step //= 2
        random_scale = random_scale * scale_multiplier

    return n
