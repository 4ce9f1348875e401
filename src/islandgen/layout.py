# Reference map-data layout: one 128-byte row per y, surface in columns
# 0..63, cave in columns 64..95, everything else 0xFF.

from typing import Dict

from .mapgen.generator import World
from .tiles import Tile, from_code

ROW_STRIDE = 128
ROWS = 64
BUFFER_SIZE = ROW_STRIDE * ROWS  # 0x2000
CAVE_COLUMN = 64
FILL = 0xFF


def world_to_bytes(world: World) -> bytes:
    data = bytearray([FILL] * BUFFER_SIZE)
    surface = world.surface.grid
    for y in range(surface.size):
        for x in range(surface.size):
            data[y * ROW_STRIDE + x] = surface.get(x, y).byte
    cave = world.cave.grid
    for y in range(cave.size):
        for x in range(cave.size):
            data[y * ROW_STRIDE + x + CAVE_COLUMN] = cave.get(x, y).byte
    return bytes(data)


def tile_at(data: bytes, x: int, y: int, cave: bool = False) -> Tile:
    """Read one tile back out of a reference buffer."""
    return from_code(data[y * ROW_STRIDE + x + (CAVE_COLUMN if cave else 0)])


def start_position_record(world: World) -> Dict[str, int]:
    x, y = world.surface.start_position
    return {"x": x, "y": y}
