from dataclasses import dataclass
from typing import List, Tuple

from .tiles import VOID

Snapshot = Tuple[Tuple[int, ...], ...]

@dataclass
class Grid:
    width: int
    height: int
    buf: List[int]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        # Every cell starts as void; only carving writes anything else.
        return cls(width=width, height=height, buf=[VOID] * (width * height))

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def as_matrix(self) -> List[List[int]]:
        out = []
        for y in range(self.height):
            row = self.buf[y * self.width:(y + 1) * self.width]
            out.append(row)
        return out

    def snapshot(self) -> Snapshot:
        """Read-only copy, indexed snapshot[y][x]."""
        return tuple(tuple(row) for row in self.as_matrix())

    def count(self, tile: int) -> int:
        return self.buf.count(tile)
