from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, NamedTuple, Tuple

class Point(NamedTuple):
    x: int
    y: int

class Size(NamedTuple):
    width: int
    height: int

class RoomCategory(IntEnum):
    # Ordinal doubles as the catalog index.
    SMALL = 0
    MEDIUM = 1
    LARGE = 2
    HUGE = 3

@dataclass(frozen=True)
class Room:
    """
    A rectangular room: top-left origin, size and the category it was drawn from.
    The footprint covers origin.x..origin.x+width-1 and origin.y..origin.y+height-1.
    """
    origin: Point
    size: Size
    category: RoomCategory

    def __post_init__(self) -> None:
        if self.origin.x < 0 or self.origin.y < 0:
            raise ValueError(f"room origin must be non-negative, got {tuple(self.origin)}")
        if self.size.width < 1 or self.size.height < 1:
            raise ValueError(f"room size must be at least 1x1, got {tuple(self.size)}")

    @classmethod
    def at(cls, x: int, y: int, width: int, height: int,
           category: RoomCategory = RoomCategory.SMALL) -> "Room":
        return cls(Point(x, y), Size(width, height), RoomCategory(category))

    @property
    def x(self) -> int:
        return self.origin.x

    @property
    def y(self) -> int:
        return self.origin.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def right(self) -> int:
        # exclusive
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        # exclusive
        return self.origin.y + self.size.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield x, y

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def on_ring(self, x: int, y: int) -> bool:
        """True for footprint cells on the outer ring (these become walls)."""
        xoff, yoff = x - self.x, y - self.y
        return (xoff == 0 or xoff == self.width - 1
                or yoff == 0 or yoff == self.height - 1)

    def intersects(self, other: "Room") -> bool:
        return not (
            self.right <= other.x
            or other.right <= self.x
            or self.bottom <= other.y
            or other.bottom <= self.y
        )
