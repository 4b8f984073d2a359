from dungeongen.tiles import VOID, WALL, WALKABLE, is_room_tile, is_valid_tile, is_void

def test_wire_values():
    # Exported grids depend on these exact numbers
    assert (VOID, WALL, WALKABLE) == (0, 1, 2)

def test_classification():
    assert is_void(VOID) and not is_void(WALL)
    assert is_room_tile(WALL) and is_room_tile(WALKABLE) and not is_room_tile(VOID)
    assert not is_valid_tile(3)
