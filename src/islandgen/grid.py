from dataclasses import dataclass
from typing import List

from .tiles import Tile


@dataclass
class Grid:
    """Square tile grid addressed as (x, y), origin top-left."""
    size: int
    buf: List[Tile]

    @classmethod
    def filled(cls, size: int, tile: Tile = Tile.NONE) -> "Grid":
        return cls(size=size, buf=[tile] * (size * size))

    def idx(self, x: int, y: int) -> int:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"({x}, {y}) outside {self.size}x{self.size} grid")
        return y * self.size + x

    def get(self, x: int, y: int) -> Tile:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: Tile) -> None:
        self.buf[self.idx(x, y)] = v

    def count(self, tile: Tile) -> int:
        return self.buf.count(tile)

    def find(self, tile: Tile):
        """All (x, y) holding `tile`, in row-major order."""
        return [(i % self.size, i // self.size) for i, t in enumerate(self.buf) if t == tile]
