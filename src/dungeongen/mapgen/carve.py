# src/dungeongen/mapgen/carve.py
# Writes an accepted room into the grid: walkable interior, wall ring.

from ..grid import Grid
from ..rooms import Room
from ..tiles import WALKABLE, WALL

def write_room(room: Room, grid: Grid) -> None:
    # Unconditional; callers validate with is_free first.
    for x, y in room.cells():
        grid.set(x, y, WALL if room.on_ring(x, y) else WALKABLE)
