"""
Coordinate classification for fuzzing requirements.

The class of a coordinate decides how many axes are expected to jitter:

    ORIGIN, CARDINAL, RIM  -> exempt, never flagged
    DEADZONE               -> 1-D, jitter along the single nonzero axis
    NON_CARDINAL           -> 2-D, jitter on both axes
"""

import math
from enum import Enum
from typing import List, Optional, Sequence

from .coords import Key, float_equals


class CoordClass(Enum):
    """Fuzzing zone of a coordinate."""
    ORIGIN = 0        # (0, 0)
    CARDINAL = 1      # (+-1, 0) or (0, +-1)
    DEADZONE = 2      # exactly one axis zero, not cardinal
    NON_CARDINAL = 3  # both axes nonzero, below the rim
    RIM = 4           # both axes nonzero, magnitude >= rim threshold


EXEMPT_CLASSES = frozenset({CoordClass.ORIGIN, CoordClass.CARDINAL, CoordClass.RIM})

_DEADZONE_X_OFFSETS: List[Key] = [(-1, 0), (1, 0)]
_DEADZONE_Y_OFFSETS: List[Key] = [(0, -1), (0, 1)]
_GRID_OFFSETS: List[Key] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def classify_coord(coord: Sequence[float], rim_threshold: float = 0.975) -> CoordClass:
    """
    Classify a coordinate for fuzzing requirements.

    Args:
        coord: (x, y) stick position
        rim_threshold: Euclidean magnitude at or above which a coordinate
            with two nonzero axes is on the rim

    Returns:
        CoordClass
    """
    x, y = coord[0], coord[1]
    x_zero = float_equals(x, 0.0)
    y_zero = float_equals(y, 0.0)
    x_cardinal = float_equals(abs(x), 1.0)
    y_cardinal = float_equals(abs(y), 1.0)

    if x_zero and y_zero:
        return CoordClass.ORIGIN
    if (x_cardinal and y_zero) or (y_cardinal and x_zero):
        return CoordClass.CARDINAL
    if x_zero or y_zero:
        return CoordClass.DEADZONE
    if math.hypot(x, y) >= rim_threshold:
        return CoordClass.RIM
    return CoordClass.NON_CARDINAL


def neighbor_offsets_for(coord: Sequence[float], coord_class: Optional[CoordClass] = None) -> List[Key]:
    """
    Lattice offsets a fuzzed output of ``coord`` may land on.

    Deadzone coordinates jitter along their nonzero axis only; non-cardinal
    coordinates may land anywhere in the surrounding 3x3 grid.
    """
    if coord_class is None:
        coord_class = classify_coord(coord)

    if coord_class is CoordClass.DEADZONE:
        if float_equals(coord[1], 0.0):
            return list(_DEADZONE_X_OFFSETS)
        return list(_DEADZONE_Y_OFFSETS)
    if coord_class is CoordClass.NON_CARDINAL:
        return list(_GRID_OFFSETS)
    return []


def applicable_axes(coord: Sequence[float], coord_class: CoordClass):
    """
    Which axes of ``coord`` are expected to be fuzzed.

    Returns:
        (x_applicable, y_applicable)
    """
    if coord_class is CoordClass.DEADZONE:
        return not float_equals(coord[0], 0.0), not float_equals(coord[1], 0.0)
    if coord_class is CoordClass.NON_CARDINAL:
        return True, True
    return False, False
