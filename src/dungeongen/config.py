from dataclasses import dataclass

from .errors import DungeonConfigError

EXHAUSTION_POLICIES = ("raise", "shrink")

@dataclass(frozen=True)
class GeneratorConfig:
    # Rooms to place before generation is done.
    room_count: int = 10
    # Rejected candidates in a row allowed before giving up on the next room.
    max_attempts_per_room: int = 1000
    # "raise": GenerationIncompleteError; "shrink": keep what was placed.
    on_exhaustion: str = "raise"

    def validate(self) -> None:
        if self.room_count < 1:
            raise DungeonConfigError(f"room_count must be >= 1, got {self.room_count}")
        if self.max_attempts_per_room < 1:
            raise DungeonConfigError(
                f"max_attempts_per_room must be >= 1, got {self.max_attempts_per_room}"
            )
        if self.on_exhaustion not in EXHAUSTION_POLICIES:
            raise DungeonConfigError(
                f"on_exhaustion must be one of {EXHAUSTION_POLICIES}, got {self.on_exhaustion!r}"
            )

# Defaults used when the caller passes no config
DEFAULT_CONFIG = GeneratorConfig()
