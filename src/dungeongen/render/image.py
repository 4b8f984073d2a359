# src/dungeongen/render/image.py
# Render a finished grid to a PNG using Pillow.

import os
from typing import Sequence

from PIL import Image, ImageDraw

from ..tiles import VOID
from .palette import TILE_COLORS, color_for

def grid_image(grid: Sequence[Sequence[int]], tile_size: int = 8, margin: int = 0) -> Image.Image:
    if tile_size < 1:
        raise ValueError("tile_size must be >= 1")
    height = len(grid)
    width = len(grid[0]) if height else 0
    w, h = width * tile_size + 2 * margin, height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), TILE_COLORS[VOID])
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(grid):
        for x, tid in enumerate(row):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            # rectangle() bounds are inclusive
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=color_for(tid))
    return canvas

def render_grid(grid: Sequence[Sequence[int]], out_png: str, tile_size: int = 8, margin: int = 0) -> None:
    canvas = grid_image(grid, tile_size=tile_size, margin=margin)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
