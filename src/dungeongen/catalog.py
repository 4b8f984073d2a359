# src/dungeongen/catalog.py
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Tuple

from .errors import DungeonConfigError
from .rooms import RoomCategory

@dataclass(frozen=True)
class SizeBounds:
    min_width: int
    min_height: int
    max_width: int
    max_height: int

    def validate(self) -> None:
        if self.min_width < 1 or self.min_height < 1:
            raise DungeonConfigError(f"room minimum must be at least 1x1: {self}")
        if self.min_width > self.max_width or self.min_height > self.max_height:
            raise DungeonConfigError(f"room minimum exceeds maximum: {self}")

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.min_width, self.min_height, self.max_width, self.max_height)


# (min_width, min_height, max_width, max_height)
DEFAULT_SIZES: Dict[RoomCategory, SizeBounds] = {
    RoomCategory.SMALL:  SizeBounds(3, 3, 5, 5),
    RoomCategory.MEDIUM: SizeBounds(5, 5, 7, 7),
    RoomCategory.LARGE:  SizeBounds(7, 7, 9, 9),
    RoomCategory.HUGE:   SizeBounds(9, 9, 17, 17),
}


class RoomSizeCatalog:
    """
    Ordered, read-only table of room categories and their size bounds.
    The sampler draws an index into `categories`, so order is part of the
    reproducibility contract.
    """

    def __init__(self, sizes: Mapping[RoomCategory, SizeBounds]):
        if not sizes:
            raise DungeonConfigError("room size catalog is empty")
        ordered = sorted(sizes.items(), key=lambda kv: int(kv[0]))
        for _, bounds in ordered:
            bounds.validate()
        self._categories = tuple(RoomCategory(c) for c, _ in ordered)
        self._bounds = {RoomCategory(c): b for c, b in ordered}

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[RoomCategory]:
        return iter(self._categories)

    def __contains__(self, category) -> bool:
        return category in self._bounds

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.name.lower()}={self._bounds[c].as_tuple()}" for c in self._categories)
        return f"RoomSizeCatalog({inner})"

    @property
    def categories(self) -> Tuple[RoomCategory, ...]:
        return self._categories

    def category_at(self, index: int) -> RoomCategory:
        return self._categories[index]

    def size_for(self, category: RoomCategory) -> SizeBounds:
        return self._bounds[category]

    def smallest(self) -> Tuple[int, int]:
        """Smallest (width, height) any category can produce."""
        return (min(b.min_width for b in self._bounds.values()),
                min(b.min_height for b in self._bounds.values()))

    def largest(self) -> Tuple[int, int]:
        """Largest (width, height) any category can produce."""
        return (max(b.max_width for b in self._bounds.values()),
                max(b.max_height for b in self._bounds.values()))

    def fitting(self, width: int, height: int) -> "RoomSizeCatalog":
        """
        Copy restricted to categories whose maximum size leaves a non-empty origin
        draw range on a width x height grid. Raises DungeonConfigError when
        nothing fits.
        """
        kept = {c: b for c, b in self._bounds.items()
                if b.max_width < width and b.max_height < height}
        if not kept:
            raise DungeonConfigError(
                f"no room category fits a {width}x{height} grid (catalog {self!r})"
            )
        return RoomSizeCatalog(kept)


DEFAULT_CATALOG = RoomSizeCatalog(DEFAULT_SIZES)


def size_for(category: RoomCategory) -> SizeBounds:
    return DEFAULT_CATALOG.size_for(category)
