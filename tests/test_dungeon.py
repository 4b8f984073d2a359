# tests/test_dungeon.py
import pytest

from dungeongen.catalog import DEFAULT_CATALOG
from dungeongen.config import GeneratorConfig
from dungeongen.dungeon import DungeonMap
from dungeongen.errors import (
    AlreadyGeneratedError, DungeonConfigError, PlacementError, SamplingRangeError,
)
from dungeongen.mapgen.placement import within_bounds
from dungeongen.rooms import Room
from dungeongen.tiles import VOID, WALL, WALKABLE

def generated(width, height, seed, **kw):
    m = DungeonMap(width, height, seed, **kw)
    m.generate()
    return m

def assert_map_invariants(m):
    grid = m.grid
    assert len(grid) == m.height and all(len(row) == m.width for row in grid)

    rooms = m.rooms
    for r in rooms:
        assert within_bounds(r, m.width, m.height), f"{r} breaks the margin"
        assert r.x + r.width <= m.width and r.y + r.height <= m.height

    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            assert not a.intersects(b), f"{a} overlaps {b}"

    covered = set()
    for r in rooms:
        for x, y in r.cells():
            want = WALL if r.on_ring(x, y) else WALKABLE
            assert grid[y][x] == want, f"({x},{y}) in {r}"
            covered.add((x, y))

    for y in range(m.height):
        for x in range(m.width):
            if (x, y) not in covered:
                assert grid[y][x] == VOID, f"({x},{y}) outside every room"

def test_reference_scenario_50x50_seed_42():
    m = generated(50, 50, 42)
    assert len(m.rooms) == 10
    assert m.report.complete
    assert_map_invariants(m)

def test_invariants_across_seeds():
    for seed in range(15):
        m = generated(50, 50, seed)
        assert len(m.rooms) == 10, f"seed {seed}"
        assert_map_invariants(m)

def test_same_seed_same_map():
    a = generated(60, 40, 2024)
    b = generated(60, 40, 2024)
    assert a.grid == b.grid
    assert a.rooms == b.rooms

def test_different_seeds_differ():
    assert generated(50, 50, 1).rooms != generated(50, 50, 2).rooms

def test_unseeded_map_can_be_replayed():
    a = generated(50, 50, None)
    b = generated(50, 50, a.seed)
    assert a.grid == b.grid

def test_too_small_grid_is_rejected_up_front():
    with pytest.raises(DungeonConfigError):
        DungeonMap(4, 4, seed=1)

def test_catalog_larger_than_grid_is_rejected_up_front():
    with pytest.raises(SamplingRangeError):
        DungeonMap(12, 12, seed=1)
    # opting into a fitted catalog makes the same grid usable
    m = generated(12, 12, 1, catalog=DEFAULT_CATALOG.fitting(12, 12),
                  config=GeneratorConfig(room_count=1))
    assert len(m.rooms) == 1

def test_bad_config_is_rejected():
    with pytest.raises(DungeonConfigError):
        DungeonMap(50, 50, 1, config=GeneratorConfig(room_count=0))
    with pytest.raises(DungeonConfigError):
        DungeonMap(50, 50, 1, config=GeneratorConfig(on_exhaustion="retry"))

def test_generate_twice_is_rejected():
    m = generated(50, 50, 42)
    before = m.grid
    with pytest.raises(AlreadyGeneratedError):
        m.generate()
    assert m.grid == before

def test_grid_is_a_read_only_snapshot():
    m = DungeonMap(30, 30, 1)
    snap = m.grid
    with pytest.raises(TypeError):
        snap[1][1] = WALL
    m.carve(Room.at(1, 1, 3, 3))
    assert snap[1][1] == VOID
    assert m.grid[1][1] == WALL

def test_carve_validates():
    m = DungeonMap(30, 30, 1)
    m.carve(Room.at(2, 2, 4, 4))
    with pytest.raises(PlacementError):
        m.carve(Room.at(3, 3, 3, 3))
    with pytest.raises(PlacementError):
        m.carve(Room.at(0, 5, 3, 3))
    assert len(m.rooms) == 1
    assert m.tile_at(2, 2) == WALL
    assert m.tile_at(3, 3) == WALKABLE
    assert not m.is_free(Room.at(5, 5, 3, 3))
    assert m.is_free(Room.at(6, 6, 3, 3))

def test_tile_at_out_of_range():
    m = DungeonMap(20, 20, 1)
    with pytest.raises(IndexError):
        m.tile_at(20, 0)

def test_carve_after_generate_is_rejected():
    m = generated(50, 50, 42)
    before = m.grid
    spot = next(Room.at(x, y, 3, 3) for y in range(1, 46) for x in range(1, 46)
                if m.is_free(Room.at(x, y, 3, 3)))
    with pytest.raises(AlreadyGeneratedError):
        m.carve(spot)
    assert len(m.rooms) == m.report.placed == 10
    assert m.grid == before
