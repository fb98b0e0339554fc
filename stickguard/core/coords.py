"""
Stick coordinates and tolerance-based comparisons.

Coordinates are normalized to [-1, 1] on both axes. The underlying hardware
reports positions on a lattice with a step of 1/80, so every derived
structure compares coordinates either with an epsilon tolerance or on the
integer lattice (value / UNIT, rounded). Exact float comparison is never used.
"""

import numpy as np
import pandas as pd
from typing import Iterable, List, NamedTuple, Sequence, Tuple


# One raw coordinate unit in normalized space
UNIT = 1.0 / 80.0

# Tolerance for coordinate equality
EPSILON = 1e-4


class Coord(NamedTuple):
    """A control stick position."""
    x: float
    y: float


Key = Tuple[int, int]


def float_equals(a: float, b: float) -> bool:
    """Float equality with epsilon tolerance."""
    return abs(a - b) < EPSILON


def is_equal_coord(one: Sequence[float], other: Sequence[float]) -> bool:
    """Check if two coordinates are equal within tolerance."""
    return float_equals(one[0], other[0]) and float_equals(one[1], other[1])


def coord_key(coord: Sequence[float]) -> Key:
    """Integer lattice key of a coordinate (multiples of 1/80)."""
    return int(round(coord[0] / UNIT)), int(round(coord[1] / UNIT))


def key_to_coord(key: Key) -> Coord:
    """Normalized coordinate of a lattice key."""
    return Coord(key[0] * UNIT, key[1] * UNIT)


def as_coord_array(coords: Iterable[Sequence[float]]) -> np.ndarray:
    """
    Stack a coordinate sequence into an (N, 2) float array.

    An empty sequence yields an array of shape (0, 2).
    """
    arr = np.asarray(list(coords), dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2))
    return arr.reshape(-1, 2)


def coords_from_dataframe(df: pd.DataFrame, x_col: str = "x", y_col: str = "y") -> List[Coord]:
    """
    Convert decoded per-frame stick data to coordinates.

    Args:
        df: DataFrame with one row per frame
        x_col: Column holding the X axis
        y_col: Column holding the Y axis

    Returns:
        List of Coord in frame order

    Raises:
        KeyError: if either column is missing
    """
    missing = [c for c in (x_col, y_col) if c not in df.columns]
    if missing:
        raise KeyError(f"Missing stick columns: {missing}")
    values = df[[x_col, y_col]].to_numpy(dtype=float)
    return [Coord(float(x), float(y)) for x, y in values]


def unique_coords(coords: Iterable[Sequence[float]]) -> List[Coord]:
    """Distinct coordinates in first-seen order (tolerance-based)."""
    unique: List[Coord] = []
    for coord in coords:
        if not any(is_equal_coord(coord, seen) for seen in unique):
            unique.append(Coord(coord[0], coord[1]))
    return unique


def count_unique_coords(coords: Iterable[Sequence[float]]) -> int:
    return len(unique_coords(coords))


def target_coords(coords: Sequence[Sequence[float]]) -> List[Coord]:
    """
    Distinct coordinates the stick dwelt on for 2+ consecutive frames.

    Single-frame travel positions are dropped.
    """
    targets: List[Coord] = []
    for prev, cur in zip(coords, coords[1:]):
        if is_equal_coord(prev, cur) and not any(is_equal_coord(cur, t) for t in targets):
            targets.append(Coord(cur[0], cur[1]))
    return targets
