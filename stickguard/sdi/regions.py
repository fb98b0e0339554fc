"""
SDI region classification.

The stick plane is split into a central deadzone, four diagonals, four
cardinals and an intermediate tilt zone:

    deadzone  |x| <= 0.2875 and |y| <= 0.2875
    diagonal  both axes past 0.2875 (matching signs) and magnitude >= 0.7
    cardinal  one axis at or past 0.7
    tilt      everything else
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

import numpy as np

from ..core.coords import as_coord_array
from ..utils.config import SDIConfig


class SDIRegion(Enum):
    """Directional input regions."""
    DZ = 0    # Deadzone
    NE = 1
    SE = 2
    SW = 3
    NW = 4
    N = 5
    E = 6
    S = 7
    W = 8
    TILT = 9  # Between deadzone and full directions


DIAGONALS: FrozenSet[SDIRegion] = frozenset({SDIRegion.NE, SDIRegion.SE, SDIRegion.SW, SDIRegion.NW})
CARDINALS: FrozenSet[SDIRegion] = frozenset({SDIRegion.N, SDIRegion.E, SDIRegion.S, SDIRegion.W})

# Neighbors around the gate
_ADJACENT: Dict[SDIRegion, FrozenSet[SDIRegion]] = {
    SDIRegion.N: frozenset({SDIRegion.NW, SDIRegion.NE}),
    SDIRegion.NE: frozenset({SDIRegion.N, SDIRegion.E}),
    SDIRegion.E: frozenset({SDIRegion.NE, SDIRegion.SE}),
    SDIRegion.SE: frozenset({SDIRegion.E, SDIRegion.S}),
    SDIRegion.S: frozenset({SDIRegion.SE, SDIRegion.SW}),
    SDIRegion.SW: frozenset({SDIRegion.S, SDIRegion.W}),
    SDIRegion.W: frozenset({SDIRegion.SW, SDIRegion.NW}),
    SDIRegion.NW: frozenset({SDIRegion.W, SDIRegion.N}),
}

# Neighboring diagonals, skipping the cardinal between them
_DIAGONAL_ADJACENT: Dict[SDIRegion, FrozenSet[SDIRegion]] = {
    SDIRegion.NE: frozenset({SDIRegion.NW, SDIRegion.SE}),
    SDIRegion.NW: frozenset({SDIRegion.NE, SDIRegion.SW}),
    SDIRegion.SW: frozenset({SDIRegion.SE, SDIRegion.NW}),
    SDIRegion.SE: frozenset({SDIRegion.NE, SDIRegion.SW}),
}

_BY_VALUE = {region.value: region for region in SDIRegion}


def get_sdi_region(x: float, y: float, config: Optional[SDIConfig] = None) -> SDIRegion:
    """Classify a single stick position into an SDI region."""
    config = config or SDIConfig()
    dz = config.deadzone_threshold
    full = config.direction_threshold

    if abs(x) <= dz and abs(y) <= dz:
        return SDIRegion.DZ

    magnitude = np.hypot(x, y)
    if magnitude >= full:
        if x >= dz and y >= dz:
            return SDIRegion.NE
        if x >= dz and y <= -dz:
            return SDIRegion.SE
        if x <= -dz and y <= -dz:
            return SDIRegion.SW
        if x <= -dz and y >= dz:
            return SDIRegion.NW

    if y >= full:
        return SDIRegion.N
    if x >= full:
        return SDIRegion.E
    if y <= -full:
        return SDIRegion.S
    if x <= -full:
        return SDIRegion.W

    return SDIRegion.TILT


def classify_regions(coords: Sequence[Sequence[float]], config: Optional[SDIConfig] = None) -> List[SDIRegion]:
    """Vectorized region classification of a whole coordinate sequence."""
    config = config or SDIConfig()
    arr = as_coord_array(coords)
    if len(arr) == 0:
        return []

    dz = config.deadzone_threshold
    full = config.direction_threshold
    x, y = arr[:, 0], arr[:, 1]
    diag = np.hypot(x, y) >= full

    conditions = [
        (np.abs(x) <= dz) & (np.abs(y) <= dz),
        (x >= dz) & (y >= dz) & diag,
        (x >= dz) & (y <= -dz) & diag,
        (x <= -dz) & (y <= -dz) & diag,
        (x <= -dz) & (y >= dz) & diag,
        y >= full,
        x >= full,
        y <= -full,
        x <= -full,
    ]
    choices = [
        SDIRegion.DZ.value,
        SDIRegion.NE.value,
        SDIRegion.SE.value,
        SDIRegion.SW.value,
        SDIRegion.NW.value,
        SDIRegion.N.value,
        SDIRegion.E.value,
        SDIRegion.S.value,
        SDIRegion.W.value,
    ]
    codes = np.select(conditions, choices, default=SDIRegion.TILT.value)
    return [_BY_VALUE[int(code)] for code in codes]


def is_region_adjacent(region_a: SDIRegion, region_b: SDIRegion) -> bool:
    """Check if two regions are directly adjacent around the gate."""
    return region_b in _ADJACENT.get(region_a, frozenset())


def is_diagonal_adjacent(region_a: SDIRegion, region_b: SDIRegion) -> bool:
    """Check if two diagonal regions are adjacent (skipping cardinals)."""
    return region_b in _DIAGONAL_ADJACENT.get(region_a, frozenset())
