# tests/test_generator.py
import logging

import pytest

from dungeongen.catalog import DEFAULT_CATALOG, RoomSizeCatalog, SizeBounds
from dungeongen.config import GeneratorConfig
from dungeongen.errors import GenerationIncompleteError
from dungeongen.grid import Grid
from dungeongen.mapgen.carve import write_room
from dungeongen.mapgen.generator import place_rooms
from dungeongen.rng import PMRandom
from dungeongen.rooms import Room, RoomCategory
from dungeongen.tiles import VOID

# A 7x7 grid has room for exactly one room from this catalog
TINY = RoomSizeCatalog({RoomCategory.SMALL: SizeBounds(3, 3, 5, 5)})

def test_reaches_target_and_counts_attempts():
    g, rooms = Grid.empty(50, 50), []
    report = place_rooms(g, PMRandom.from_seed(3), DEFAULT_CATALOG, GeneratorConfig(), rooms)
    assert report.complete
    assert report.placed == len(rooms) == 10
    assert report.attempts == report.placed + report.rejections

def test_existing_rooms_count_towards_target():
    g = Grid.empty(50, 50)
    first = Room.at(1, 1, 3, 3)
    write_room(first, g)
    rooms = [first]
    place_rooms(g, PMRandom.from_seed(8), DEFAULT_CATALOG, GeneratorConfig(room_count=4), rooms)
    assert len(rooms) == 4
    assert rooms[0] == first

def test_exhaustion_raises_and_keeps_consistent_state():
    g, rooms = Grid.empty(7, 7), []
    cfg = GeneratorConfig(room_count=3, max_attempts_per_room=50)
    with pytest.raises(GenerationIncompleteError) as exc:
        place_rooms(g, PMRandom.from_seed(11), TINY, cfg, rooms)
    assert exc.value.placed == len(rooms) == 1
    assert exc.value.target == 3
    # the one accepted room is fully carved, nothing else is
    carved = sum(1 for x in range(7) for y in range(7) if g.get(x, y) != VOID)
    assert carved == rooms[0].width * rooms[0].height

def test_exhaustion_shrinks_when_asked(caplog):
    g, rooms = Grid.empty(7, 7), []
    cfg = GeneratorConfig(room_count=3, max_attempts_per_room=50, on_exhaustion="shrink")
    with caplog.at_level(logging.WARNING, logger="dungeongen.mapgen.generator"):
        report = place_rooms(g, PMRandom.from_seed(11), TINY, cfg, rooms)
    assert not report.complete
    assert report.placed == len(rooms) == 1
    assert "budget exhausted" in caplog.text
