#!/usr/bin/env python3
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .catalog import DEFAULT_CATALOG
from .config import DEFAULT_CONFIG
from .dungeon import DungeonMap
from .errors import DungeonError
from .export import dump_ascii, write_grid

logger = logging.getLogger(__name__)


def build_map(args: argparse.Namespace) -> DungeonMap:
    config = dataclasses.replace(
        DEFAULT_CONFIG,
        room_count=args.rooms,
        max_attempts_per_room=args.max_attempts,
        on_exhaustion="shrink" if args.shrink else "raise",
    )
    catalog = DEFAULT_CATALOG
    if args.fit_catalog:
        catalog = DEFAULT_CATALOG.fitting(args.width, args.height)
    m = DungeonMap(args.width, args.height, args.seed, catalog=catalog, config=config)
    m.generate()
    return m


def cmd_emit(args: argparse.Namespace) -> int:
    m = build_map(args)
    if args.out == "-":
        write_grid(m.grid, sys.stdout, delimiter=args.delimiter)
    else:
        write_grid(m.grid, args.out, delimiter=args.delimiter)
        print(f"Wrote {args.out} (seed {m.seed})")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    m = build_map(args)
    print(dump_ascii(m.grid))
    print(f"seed {m.seed}, {len(m.rooms)} rooms")
    for i, r in enumerate(m.rooms, 1):
        print(f"{i:3d}  {r.category.name.lower():6s}  {r.width}x{r.height} at ({r.x},{r.y})")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    # Pillow is only needed here
    from .render.image import render_grid

    m = build_map(args)
    render_grid(m.grid, args.out, tile_size=args.tile)
    print(f"Wrote {args.out} (seed {m.seed})")
    return 0


def _add_map_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('--width', type=int, required=True)
    p.add_argument('--height', type=int, required=True)
    p.add_argument('--seed', type=int, default=None, help="Omit for a random seed")
    p.add_argument('--rooms', type=int, default=DEFAULT_CONFIG.room_count)
    p.add_argument('--max-attempts', type=int, default=DEFAULT_CONFIG.max_attempts_per_room,
                   help="Rejected candidates in a row before giving up")
    p.add_argument('--shrink', action='store_true',
                   help="Keep fewer rooms instead of failing when the budget runs out")
    p.add_argument('--fit-catalog', action='store_true',
                   help="Drop room categories too large for the grid")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dungeongen", description="Seeded room-placement dungeon generator")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit', help="Write the grid as delimited text")
    _add_map_args(p1)
    p1.add_argument('--out', type=str, default='-', help="Output path, '-' for stdout")
    p1.add_argument('--delimiter', type=str, default=',')
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('show', help="Print the map and its rooms")
    _add_map_args(p2)
    p2.set_defaults(func=cmd_show)

    p3 = sub.add_parser('render', help="Render the map to a PNG")
    _add_map_args(p3)
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=int, default=8, help="Tile size in pixels")
    p3.set_defaults(func=cmd_render)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(message)s")
    try:
        return args.func(args)
    except DungeonError as e:
        logger.error("%s", e)
        return 2


if __name__ == '__main__':
    raise SystemExit(main())
