"""Hold segmentation: sustained stick positions, travel frames dropped."""

from dataclasses import dataclass
from typing import List, Sequence

from ..core.coords import Coord, is_equal_coord


@dataclass(frozen=True)
class Hold:
    """A run of 2+ tolerance-equal consecutive frames (one targeting event)."""
    coord: Coord
    start_frame: int


def identify_holds(coords: Sequence[Sequence[float]]) -> List[Hold]:
    """
    Identify all holds in a coordinate sequence.

    Each maximal run of at least two equal frames becomes one Hold, recorded
    at its first frame. Single-frame transition samples are discarded.
    """
    holds = []
    n = len(coords)
    i = 0
    while i < n:
        start = i
        while i + 1 < n and is_equal_coord(coords[i], coords[i + 1]):
            i += 1
        if i > start:
            first = coords[start]
            holds.append(Hold(coord=Coord(first[0], first[1]), start_frame=start))
        i += 1
    return holds
