#!/usr/bin/env python3
import argparse, json, os
from islandgen.layout import start_position_record, world_to_bytes
from islandgen.logsetup import setup_logging
from islandgen.mapgen.generator import generate_world

def write_dat(data, path):
    with open(path, 'wb') as f:
        f.write(data)

def cmd_emit(args):
    world = generate_world(args.seed)
    write_dat(world_to_bytes(world), args.out)
    print(f"Wrote {args.out} (start {world.surface.start_position})")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    starts = {}
    for seed in args.seeds:
        world = generate_world(seed)
        write_dat(world_to_bytes(world), os.path.join(args.outdir, f"{seed}.dat"))
        starts[str(seed)] = start_position_record(world)
    with open(os.path.join(args.outdir, "start_positions.json"), 'w', encoding='utf-8') as f:
        json.dump(starts, f, indent=2, sort_keys=True)
    print(f"Wrote {len(args.seeds)} maps to {args.outdir}")

def cmd_enemies(args):
    world = generate_world(args.seed, with_enemies=True)
    print(json.dumps({
        "cave": [list(p) for p in world.cave_enemies],
        "surface": [list(p) for p in world.surface_enemies],
    }))

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seeds', type=int, nargs='+', required=True)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('enemies')
    p3.add_argument('--seed', type=int, required=True)
    p3.set_defaults(func=cmd_enemies)
    args = p.parse_args()
    setup_logging(args.verbose)
    args.func(args)

if __name__ == '__main__':
    main()
