# src/dungeongen/mapgen/placement.py
from ..catalog import RoomSizeCatalog
from ..errors import DungeonConfigError, SamplingRangeError
from ..grid import Grid
from ..rooms import Room
from ..tiles import VOID

# Void tiles kept between any room and the grid edge
MARGIN = 1

def within_bounds(room: Room, width: int, height: int) -> bool:
    # Strict on both ends: origin > 0 and origin < dim - size, so a room never
    # touches the outer edge of the grid.
    return (room.x > 0 and room.y > 0
            and room.x < width - room.width
            and room.y < height - room.height)

def is_free(room: Room, grid: Grid) -> bool:
    """True when the room is inside the margin and its whole footprint is void."""
    if not within_bounds(room, grid.width, grid.height):
        return False
    for x, y in room.cells():
        if grid.get(x, y) != VOID:
            return False
    return True

def check_dimensions(width: int, height: int, catalog: RoomSizeCatalog) -> None:
    """
    Reject grids that can never be filled, before any random draw:
      - non-positive dimensions;
      - too small for the smallest catalog room plus the margin on both sides;
      - a catalog maximum that leaves an empty origin draw range.
    """
    if width <= 0 or height <= 0:
        raise DungeonConfigError(f"grid dimensions must be positive, got {width}x{height}")

    min_w, min_h = catalog.smallest()
    if width < min_w + 2 * MARGIN or height < min_h + 2 * MARGIN:
        raise DungeonConfigError(
            f"{width}x{height} grid cannot fit a {min_w}x{min_h} room with a "
            f"{MARGIN}-tile margin"
        )

    max_w, max_h = catalog.largest()
    if max_w >= width or max_h >= height:
        raise SamplingRangeError(
            f"catalog allows rooms up to {max_w}x{max_h}, which does not fit a "
            f"{width}x{height} grid; pass a smaller catalog (see RoomSizeCatalog.fitting)"
        )
