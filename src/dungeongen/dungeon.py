# src/dungeongen/dungeon.py
# Public surface: owns the RNG, catalog, grid and room list for one map.

import logging
from typing import List, Optional, Tuple

from .catalog import DEFAULT_CATALOG, RoomSizeCatalog
from .config import DEFAULT_CONFIG, GeneratorConfig
from .errors import AlreadyGeneratedError, GenerationIncompleteError, PlacementError
from .grid import Grid, Snapshot
from .mapgen.carve import write_room
from .mapgen.generator import PlacementReport, place_rooms
from .mapgen.placement import check_dimensions, is_free
from .rng import PMRandom
from .rooms import Room

logger = logging.getLogger(__name__)


class DungeonMap:
    """
    A width x height dungeon filled with non-overlapping rooms.

    Construction validates everything that could make generation impossible
    (grid too small, catalog too large, bad config) so that generate() itself
    only ever fails by running out of its attempt budget.

        m = DungeonMap(50, 50, seed=42)
        m.generate()
        m.grid[y][x]   # 0 void, 1 wall, 2 walkable
        m.rooms        # acceptance order
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: Optional[int] = None,
        *,
        catalog: Optional[RoomSizeCatalog] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._config = config if config is not None else DEFAULT_CONFIG
        self._config.validate()
        check_dimensions(width, height, self._catalog)

        self._rng = PMRandom.from_seed(seed)
        self._grid = Grid.empty(width, height)
        self._rooms: List[Room] = []
        self._report: Optional[PlacementReport] = None
        logger.debug("New %dx%d map, seed=%d", width, height, self._rng.seed)

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def seed(self) -> int:
        """The seed in use; drawn from system entropy when none was given."""
        return self._rng.seed

    @property
    def catalog(self) -> RoomSizeCatalog:
        return self._catalog

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def grid(self) -> Snapshot:
        return self._grid.snapshot()

    @property
    def report(self) -> Optional[PlacementReport]:
        return self._report

    @property
    def is_generated(self) -> bool:
        return self._report is not None

    def tile_at(self, x: int, y: int) -> int:
        if not self._grid.in_bounds(x, y):
            raise IndexError(f"({x},{y}) is outside the {self.width}x{self.height} grid")
        return self._grid.get(x, y)

    def is_free(self, room: Room) -> bool:
        return is_free(room, self._grid)

    def carve(self, room: Room) -> None:
        """Validate and carve a single room, recording it in the room list."""
        if self._report is not None:
            raise AlreadyGeneratedError("map is final once generated; build a new DungeonMap")
        if not is_free(room, self._grid):
            raise PlacementError(f"room {room} is out of bounds or overlaps existing geometry")
        self._rooms.append(room)
        write_room(room, self._grid)

    def generate(self) -> PlacementReport:
        if self._report is not None:
            raise AlreadyGeneratedError("map has already been generated; build a new DungeonMap")
        try:
            self._report = place_rooms(self._grid, self._rng, self._catalog, self._config, self._rooms)
        except GenerationIncompleteError as e:
            # Rooms carved so far stay; the map cannot be generated again.
            self._report = PlacementReport(placed=e.placed, target=e.target,
                                           attempts=e.attempts, rejections=e.rejections)
            raise
        return self._report
