"""
Controller archetype detection (box vs. analog).

A box (digital, button-based) controller reaches only a coarse set of stick
positions, so it touches far fewer distinct rim coordinates than an analog
stick swept around its gate. Several checks only apply to one archetype; the
archetype is computed once per player and passed explicitly to those checks.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from .core.coords import UNIT, as_coord_array
from .utils.config import ControllerConfig

logger = logging.getLogger(__name__)


class ControllerType(Enum):
    """Controller archetype."""
    BOX = "box"
    ANALOG = "analog"


def count_rim_coords(coords: Sequence[Sequence[float]], tolerance: float = 0.0125) -> int:
    """
    Count distinct coordinates on the rim of the stick gate.

    A coordinate is on the rim when its distance from center, pushed outward
    by ``tolerance`` on each axis, reaches 1.0. Distinct positions are counted
    on the 1/80 lattice.
    """
    arr = as_coord_array(coords)
    if len(arr) == 0:
        return 0

    distance = np.hypot(np.abs(arr[:, 0]) + tolerance, np.abs(arr[:, 1]) + tolerance)
    rim = arr[distance >= 1.0]
    if len(rim) == 0:
        return 0

    keys = np.rint(rim / UNIT).astype(np.int64)
    return int(np.unique(keys, axis=0).shape[0])


def rim_coverage(coords: Sequence[Sequence[float]], config: Optional[ControllerConfig] = None) -> float:
    """
    Fraction of reachable rim positions hit, inflated for short sessions.

    Shorter sessions naturally under-sample the rim, so the ratio is boosted
    by the fraction of a full game that is missing.
    """
    config = config or ControllerConfig()

    rim_count = count_rim_coords(coords, config.rim_tolerance)
    proportion = rim_count / config.rim_coord_max

    n_frames = len(coords)
    if n_frames < config.full_game_frames:
        boost = 1.0 + (config.full_game_frames - n_frames) / config.full_game_frames
        proportion *= boost

    return proportion


def controller_for_coverage(coverage: float, config: Optional[ControllerConfig] = None) -> ControllerType:
    """Archetype for an already computed rim coverage."""
    config = config or ControllerConfig()
    return ControllerType.BOX if coverage < config.box_threshold else ControllerType.ANALOG


def classify_controller(
    coords: Sequence[Sequence[float]],
    config: Optional[ControllerConfig] = None,
) -> ControllerType:
    """Decide the controller archetype from rim coverage."""
    config = config or ControllerConfig()
    coverage = rim_coverage(coords, config)
    controller = controller_for_coverage(coverage, config)
    logger.debug(f"Rim coverage {coverage:.3f} over {len(coords)} frames -> {controller.value}")
    return controller


def is_box_controller(coords: Sequence[Sequence[float]], config: Optional[ControllerConfig] = None) -> bool:
    """True if the player appears to use a box (digital) controller."""
    return classify_controller(coords, config) is ControllerType.BOX
