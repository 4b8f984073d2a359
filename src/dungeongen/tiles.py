# Canonical tile IDs stored in the grid (and written by the exporter)

VOID = 0      # undefined space, never walkable
WALL = 1      # room ring, counted as geometry
WALKABLE = 2  # room interior

TILE_VALUES = (VOID, WALL, WALKABLE)

TILE_NAMES = {
    VOID: "void",
    WALL: "wall",
    WALKABLE: "walkable",
}

# Console glyphs used by the debug dump
GLYPHS = {
    VOID: " ",
    WALL: "#",
    WALKABLE: ".",
}

def is_valid_tile(tile: int) -> bool:
    return tile in TILE_VALUES

def is_void(tile: int) -> bool:
    return tile == VOID

def is_room_tile(tile: int) -> bool:
    # Anything carved by a room: ring or interior.
    return tile == WALL or tile == WALKABLE
