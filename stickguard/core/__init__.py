"""
Core types shared by every check: coordinates, classification, results.
"""

from .coords import (
    UNIT,
    EPSILON,
    Coord,
    float_equals,
    is_equal_coord,
    coord_key,
    key_to_coord,
    as_coord_array,
    coords_from_dataframe,
    unique_coords,
    count_unique_coords,
    target_coords,
)
from .results import Violation, CheckResult
from .classify import (
    CoordClass,
    EXEMPT_CLASSES,
    classify_coord,
    neighbor_offsets_for,
    applicable_axes,
)

__all__ = [
    "UNIT",
    "EPSILON",
    "Coord",
    "float_equals",
    "is_equal_coord",
    "coord_key",
    "key_to_coord",
    "as_coord_array",
    "coords_from_dataframe",
    "unique_coords",
    "count_unique_coords",
    "target_coords",
    "Violation",
    "CheckResult",
    "CoordClass",
    "EXEMPT_CLASSES",
    "classify_coord",
    "neighbor_offsets_for",
    "applicable_axes",
]
