# src/dungeongen/mapgen/generator.py
# Placement engine: rejection-sample rooms until the target count is reached.

import logging
from dataclasses import dataclass
from typing import List

from ..catalog import RoomSizeCatalog
from ..config import GeneratorConfig
from ..errors import GenerationIncompleteError
from ..grid import Grid
from ..rng import PMRandom
from ..rooms import Room
from .carve import write_room
from .placement import is_free
from .sampling import sample_room

logger = logging.getLogger(__name__)


@dataclass
class PlacementReport:
    placed: int
    target: int
    attempts: int    # candidates sampled in total
    rejections: int  # candidates discarded by is_free

    @property
    def complete(self) -> bool:
        return self.placed >= self.target


def place_rooms(
    grid: Grid,
    rng: PMRandom,
    catalog: RoomSizeCatalog,
    config: GeneratorConfig,
    rooms: List[Room],
) -> PlacementReport:
    """
    Append accepted rooms to `rooms` and carve each into `grid` until
    config.room_count rooms exist.

    The rejection counter resets on every accepted room; running out of
    config.max_attempts_per_room in a row triggers config.on_exhaustion.
    A room is either rejected untouched or carved in full.
    """
    target = config.room_count
    attempts = rejections = streak = 0

    while len(rooms) < target:
        if streak >= config.max_attempts_per_room:
            if config.on_exhaustion == "raise":
                raise GenerationIncompleteError(len(rooms), target, attempts, rejections)
            logger.warning(
                "Attempt budget exhausted after %d rejections; keeping %d of %d rooms",
                streak, len(rooms), target,
            )
            break

        room = sample_room(rng, catalog, grid.width, grid.height)
        attempts += 1
        if not is_free(room, grid):
            rejections += 1
            streak += 1
            continue

        rooms.append(room)
        write_room(room, grid)
        streak = 0
        logger.debug(
            "Room %d: %s %dx%d at (%d,%d)",
            len(rooms), room.category.name.lower(), room.width, room.height, room.x, room.y,
        )

    report = PlacementReport(placed=len(rooms), target=target,
                             attempts=attempts, rejections=rejections)
    logger.info(
        "Placed %d/%d rooms on %dx%d grid (%d candidates, %d rejected)",
        report.placed, report.target, grid.width, grid.height, attempts, rejections,
    )
    return report
