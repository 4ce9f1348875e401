# src/islandgen/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import Tile
from .palette import tile_color

ASSET_DIR = os.path.join("assets", "tiles")


def _path_candidates(tile: Tile) -> Tuple[str, ...]:
    return (
        os.path.join(ASSET_DIR, f"{tile.name.lower()}.png"),
        os.path.join(ASSET_DIR, f"{int(tile)}.png"),
    )


class Tileset:
    """
    Cached pygame tile surfaces:
      - Uses assets/tiles/<name>.png or <code>.png when present
      - Otherwise a flat colour swatch from the palette
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile: Tile) -> pygame.Surface:
        for p in _path_candidates(tile):
            if os.path.exists(p):
                return pygame.image.load(p).convert_alpha()
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(tile_color(tile))
        return img

    @lru_cache(maxsize=256)
    def view(self, tile: Tile, size: int) -> pygame.Surface:
        base = self.get(tile)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
