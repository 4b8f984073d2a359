# tests/test_render.py
import os

from PIL import Image

from dungeongen.render.image import grid_image, render_grid
from dungeongen.render.palette import TILE_COLORS
from dungeongen.render.tileset import Tileset
from dungeongen.tiles import VOID, WALL, WALKABLE

GRID = ((VOID, WALL),
        (WALKABLE, VOID))

def test_grid_image_pixels():
    img = grid_image(GRID, tile_size=4)
    assert img.size == (8, 8)
    assert img.getpixel((0, 0)) == TILE_COLORS[VOID]
    assert img.getpixel((7, 3)) == TILE_COLORS[WALL]
    assert img.getpixel((3, 4)) == TILE_COLORS[WALKABLE]

def test_margin_grows_canvas():
    img = grid_image(GRID, tile_size=4, margin=2)
    assert img.size == (12, 12)
    assert img.getpixel((6, 2)) == TILE_COLORS[WALL]

def test_render_grid_writes_png(tmp_path):
    out = os.path.join(str(tmp_path), "png", "map.png")
    render_grid(GRID, out, tile_size=3)
    with Image.open(out) as img:
        assert img.size == (6, 6)

def test_tileset_surfaces():
    ts = Tileset(8)
    wall = ts.get(WALL)
    assert wall.get_size() == (8, 8)
    assert tuple(wall.get_at((0, 0))) == TILE_COLORS[WALL]
    assert ts.get(WALL) is wall
    assert ts.view(WALL, 8) is wall
    assert ts.view(WALKABLE, 16).get_size() == (16, 16)

def test_tileset_caches_are_per_instance():
    a, b = Tileset(4), Tileset(4)
    assert a.get(VOID) is not b.get(VOID)
    assert a.view(WALL, 12) is a.view(WALL, 12)
    assert tuple(a.view(WALL, 12).get_at((11, 11))) == TILE_COLORS[WALL]
