# Shared tile colours for the image renderer and the pygame tileset.
from typing import Tuple

from ..tiles import VOID, WALL, WALKABLE

RGBA = Tuple[int, int, int, int]

TILE_COLORS = {
    VOID:     ( 16,  16,  16, 255),
    WALL:     ( 80,  80,  80, 255),
    WALKABLE: (220, 220, 220, 255),
}

UNKNOWN_COLOR: RGBA = (255, 0, 255, 255)

def color_for(tile: int) -> RGBA:
    return TILE_COLORS.get(tile, UNKNOWN_COLOR)
