# src/dungeongen/errors.py
# Every error the generator raises derives from DungeonError.


class DungeonError(Exception):
    """Base class for dungeon generation errors."""


class DungeonConfigError(DungeonError, ValueError):
    """Grid dimensions, catalog or config can never produce a valid map."""


class SamplingRangeError(DungeonConfigError):
    """A catalog maximum leaves an empty or negative origin draw range."""


class PlacementError(DungeonError, ValueError):
    """A room was handed to carve() without a free footprint."""


class AlreadyGeneratedError(DungeonError, RuntimeError):
    """generate() was called on a map that has already been generated."""


class GenerationIncompleteError(DungeonError, RuntimeError):
    """The attempt budget ran out before the target room count was reached."""

    def __init__(self, placed: int, target: int, attempts: int, rejections: int) -> None:
        self.placed = placed
        self.target = target
        self.attempts = attempts
        self.rejections = rejections
        super().__init__(
            f"placed {placed} of {target} rooms before the attempt budget ran out "
            f"({attempts} candidates, {rejections} rejected)"
        )
