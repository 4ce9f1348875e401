#!/usr/bin/env python3
# Minimal interactive viewer for generated worlds (no gameplay).
# - Surface on the left, cave on the right (toggle cave: C)
# - Enemy overlay toggle: E
# - Seed: LEFT/RIGHT step by 1, UP/DOWN step by 100
# - 60 Hz fixed loop

import argparse
import logging
import pygame

from islandgen.errors import GenerationError
from islandgen.logsetup import setup_logging
from islandgen.mapgen.generator import generate_world
from islandgen.render.palette import ENEMY_COLOR, START_COLOR
from islandgen.render.tileset import Tileset

log = logging.getLogger("run_viewer")

SEED_MAX = 0xFFFFFFFF

def draw_grid(screen, grid, x0, tile, get_tile_surface):
    for y in range(grid.size):
        for x in range(grid.size):
            screen.blit(get_tile_surface(grid.get(x, y)), (x0 + x * tile, y * tile))

def draw_markers(screen, positions, x0, tile, color):
    r = max(1, tile // 3)
    for x, y in positions:
        pygame.draw.circle(screen, color, (x0 + x * tile + tile // 2, y * tile + tile // 2), r)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1, help="World seed")
    ap.add_argument("--tile", type=int, default=10, help="Tile size in pixels")
    ap.add_argument("--enemies", action="store_true", help="Start with the enemy overlay on")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    pygame.init()
    clock = pygame.time.Clock()

    tiles = Tileset(args.tile)
    def get_tile_surface(tile):
        return tiles.view(tile, args.tile)

    seed = args.seed
    show_cave = True
    show_enemies = args.enemies

    def window_size():
        cols = 64 + (32 if show_cave else 0)
        return cols * args.tile, 64 * args.tile

    screen = pygame.display.set_mode(window_size())

    def load_world():
        # A failed seed leaves the previous world on screen.
        try:
            return generate_world(seed, with_enemies=True)
        except GenerationError as e:
            log.warning("seed %d: %s generation failed: %s", seed, e.level, e.reason)
            return None

    world = load_world()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                step = {pygame.K_RIGHT: 1, pygame.K_LEFT: -1,
                        pygame.K_UP: 100, pygame.K_DOWN: -100}.get(ev.key)
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif step is not None:
                    seed = (seed + step) & SEED_MAX
                    world = load_world() or world
                elif ev.key == pygame.K_e:
                    show_enemies = not show_enemies
                elif ev.key == pygame.K_c:
                    show_cave = not show_cave
                    screen = pygame.display.set_mode(window_size())

        screen.fill((0, 0, 0))
        if world is not None:
            draw_grid(screen, world.surface.grid, 0, args.tile, get_tile_surface)
            draw_markers(screen, [world.surface.start_position], 0, args.tile, START_COLOR)
            if show_enemies:
                draw_markers(screen, world.surface_enemies, 0, args.tile, ENEMY_COLOR)
            if show_cave:
                x0 = 64 * args.tile
                draw_grid(screen, world.cave.grid, x0, args.tile, get_tile_surface)
                if show_enemies:
                    draw_markers(screen, world.cave_enemies, x0, args.tile, ENEMY_COLOR)

        pygame.display.set_caption(
            f"islandgen viewer  seed {seed}  enemies:{show_enemies}  cave:{show_cave}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
