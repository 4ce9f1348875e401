#!/usr/bin/env python3
# Render a generated world (surface + cave side by side) to a PNG using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from islandgen.logsetup import setup_logging
from islandgen.mapgen.generator import generate_world
from islandgen.render.palette import ENEMY_COLOR, START_COLOR, tile_color

def draw_grid(draw, grid, x0, y0, tile_size):
    for y in range(grid.size):
        for x in range(grid.size):
            px, py = x0 + x * tile_size, y0 + y * tile_size
            draw.rectangle((px, py, px + tile_size - 1, py + tile_size - 1),
                           fill=tile_color(grid.get(x, y)))

def mark(draw, positions, x0, y0, tile_size, color):
    inset = max(1, tile_size // 4)
    for x, y in positions:
        px, py = x0 + x * tile_size, y0 + y * tile_size
        draw.ellipse((px + inset, py + inset, px + tile_size - 1 - inset, py + tile_size - 1 - inset),
                     fill=color)

def render_world(world, out_png, tile_size=8, margin=4):
    s, c = world.surface.grid, world.cave.grid
    w = (s.size + c.size) * tile_size + 3 * margin
    h = s.size * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)
    cave_x0 = 2 * margin + s.size * tile_size
    draw_grid(draw, s, margin, margin, tile_size)
    draw_grid(draw, c, cave_x0, margin, tile_size)
    mark(draw, [world.surface.start_position], margin, margin, tile_size, START_COLOR)
    if world.surface_enemies is not None:
        mark(draw, world.surface_enemies, margin, margin, tile_size, ENEMY_COLOR)
    if world.cave_enemies is not None:
        mark(draw, world.cave_enemies, cave_x0, margin, tile_size, ENEMY_COLOR)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="World seed (0..2**32-1)")
    ap.add_argument("--out", type=str, default=None, help="PNG path (default out/png/<seed>.png)")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--enemies", action="store_true", help="Overlay enemy spawn points")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    world = generate_world(args.seed, with_enemies=args.enemies)
    out = args.out or os.path.join("out", "png", f"{args.seed}.png")
    render_world(world, out, tile_size=args.tile)
    print(f"Wrote {out}")

if __name__ == "__main__":
    main()
