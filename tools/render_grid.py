#!/usr/bin/env python3
# Render exported grid files (delimited text) to PNGs using Pillow.

import argparse
import os

from dungeongen.export import read_grid
from dungeongen.render.image import render_grid

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("paths", nargs="+", help="Grid files written by `dungeongen emit`")
    ap.add_argument("--delimiter", type=str, default=",")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    args = ap.parse_args()

    for path in args.paths:
        grid = read_grid(path, delimiter=args.delimiter)
        stem = os.path.splitext(os.path.basename(path))[0]
        png = os.path.join(args.outdir, f"{stem}.png")
        render_grid(grid, png, tile_size=args.tile)
        print(f"Wrote {png}")

if __name__ == "__main__":
    main()
