# src/dungeongen/mapgen/sampling.py
# Candidate room sampling. No geometry checks here; placement.py does those.

from ..catalog import RoomSizeCatalog
from ..errors import SamplingRangeError
from ..rng import PMRandom
from ..rooms import Point, Room, Size

def sample_room(rng: PMRandom, catalog: RoomSizeCatalog, width: int, height: int) -> Room:
    """
    Draw one candidate room. Draw order is fixed (category, width, height, x, y)
    since the sequence of draws is what makes a seed reproducible.
    Max bounds are inclusive, hence the +1 on the exclusive upper bound.
    """
    category = catalog.category_at(rng.next_in_range(0, len(catalog)))
    bounds = catalog.size_for(category)

    w = rng.next_in_range(bounds.min_width, bounds.max_width + 1)
    h = rng.next_in_range(bounds.min_height, bounds.max_height + 1)

    if width <= w or height <= h:
        raise SamplingRangeError(
            f"{category.name.lower()} room of {w}x{h} leaves no origin range on a "
            f"{width}x{height} grid"
        )

    x = rng.next_in_range(0, width - w)
    y = rng.next_in_range(0, height - h)
    return Room(Point(x, y), Size(w, h), category)
