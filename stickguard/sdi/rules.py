"""
Illegal SDI (smash directional influence) pattern detection.

Three independent sliding-window rules catch macro-like direction changes
faster than a human on a box controller is allowed to produce:

    Rule 1: tapping the same direction out of the deadzone again within
            4 frames (with no travel frames in between)
    Rule 2: cardinal <-> adjacent diagonal alternation, twice within 4 frames
    Rule 3: diagonal -> adjacent diagonal -> back, within 4 frames

Each rule scans from every qualifying frame, so overlapping windows may
report the same physical event more than once.
"""

import logging
from typing import List, Optional, Sequence

from ..controller import is_box_controller
from ..core.coords import Coord, count_unique_coords
from ..core.results import CheckResult, Violation
from ..utils.config import ControllerConfig, SDIConfig
from .regions import CARDINALS, DIAGONALS, SDIRegion, classify_regions, is_diagonal_adjacent, is_region_adjacent

logger = logging.getLogger(__name__)


def _evidence(coords: Sequence[Sequence[float]], start: int, length: int) -> List[Coord]:
    return [Coord(c[0], c[1]) for c in coords[start:start + length]]


def fails_sdi_rule_one(coords: Sequence[Sequence[float]], config: Optional[SDIConfig] = None) -> List[Violation]:
    """
    Rule 1: rapidly tapping the same direction and returning to neutral
    faster than once every 5.5 frames.

    From every deadzone frame, look ahead for entries into the first
    non-deadzone, non-tilt region reached. An entry counts only after the
    deadzone was touched again and after at most 3 consecutive tilt frames.
    Two entries within 4 frames whose window holds at most 2 distinct
    coordinates (no travel frames) is a violation.
    """
    config = config or SDIConfig()
    regions = classify_regions(coords, config)
    n = len(regions)
    violations = []

    for i, region in enumerate(regions):
        if region is not SDIRegion.DZ:
            continue

        last_region = SDIRegion.DZ
        first_sdi_region = None
        last_sdi_frame = -1000
        consecutive_tilt = 0
        touched_dz = True

        for j in range(1, config.rule_one_lookahead + 1):
            if i + j >= n:
                break
            current = regions[i + j]

            if current is SDIRegion.DZ:
                touched_dz = True

            if current is SDIRegion.TILT:
                consecutive_tilt += 1
            elif current is not SDIRegion.DZ and first_sdi_region is None:
                first_sdi_region = current

            if (
                touched_dz
                and last_region in (SDIRegion.DZ, SDIRegion.TILT)
                and current is first_sdi_region
                and consecutive_tilt <= config.rule_one_max_tilt_frames
            ):
                frame = i + j
                if frame <= last_sdi_frame + config.rule_one_min_gap:
                    # Travel frames in the window make the taps legitimate
                    if count_unique_coords(coords[i:i + j]) <= config.rule_one_max_unique_coords:
                        violations.append(Violation(
                            i,
                            "Failed SDI rule #1",
                            _evidence(coords, i, config.rule_one_evidence_frames),
                        ))
                last_sdi_frame = frame
                touched_dz = False

            last_region = current
            if current is not SDIRegion.TILT:
                consecutive_tilt = 0

    return violations


def fails_sdi_rule_two(coords: Sequence[Sequence[float]], config: Optional[SDIConfig] = None) -> List[Violation]:
    """
    Rule 2: rapidly tapping the same diagonal and returning to an adjacent
    cardinal faster than once every 5.5 frames.
    """
    config = config or SDIConfig()
    regions = classify_regions(coords, config)
    n = len(regions)
    violations = []

    for i, start in enumerate(regions):
        if start not in CARDINALS:
            continue

        sdi_count = 0
        diagonal = None

        for j in range(1, config.pingpong_lookahead + 1):
            if i + j >= n:
                break
            current = regions[i + j]
            if current is regions[i + j - 1]:
                continue

            if current in DIAGONALS and is_region_adjacent(start, current):
                if diagonal is None or diagonal is current:
                    diagonal = current
                    sdi_count += 1

        if sdi_count >= 2:
            violations.append(Violation(
                i,
                "Failed SDI rule #2",
                _evidence(coords, i, config.pingpong_evidence_frames),
            ))

    return violations


def fails_sdi_rule_three(coords: Sequence[Sequence[float]], config: Optional[SDIConfig] = None) -> List[Violation]:
    """Rule 3: alternating between adjacent diagonals."""
    config = config or SDIConfig()
    regions = classify_regions(coords, config)
    n = len(regions)
    violations = []

    for i, origin in enumerate(regions):
        if origin not in DIAGONALS:
            continue

        hit_adjacent = False
        for j in range(i + 1, min(i + config.pingpong_lookahead, n - 1) + 1):
            if is_diagonal_adjacent(regions[j], origin):
                hit_adjacent = True

            if hit_adjacent and regions[j] is origin:
                violations.append(Violation(
                    i,
                    "Failed SDI rule #3",
                    _evidence(coords, i, config.pingpong_evidence_frames),
                ))
                break

    return violations


def check(
    coords: Sequence[Sequence[float]],
    is_box: Optional[bool] = None,
    config: Optional[SDIConfig] = None,
    controller_config: Optional[ControllerConfig] = None,
) -> CheckResult:
    """
    Check for illegal SDI patterns. Only applies to box controllers.

    Args:
        coords: Per-frame stick positions
        is_box: Controller archetype; detected from ``coords`` when None
        config: SDI thresholds (defaults if None)
        controller_config: Used only when ``is_box`` must be detected
    """
    if is_box is None:
        is_box = is_box_controller(coords, controller_config)
    if not is_box:
        return CheckResult.passing()

    violations = []
    violations.extend(fails_sdi_rule_one(coords, config))
    violations.extend(fails_sdi_rule_two(coords, config))
    violations.extend(fails_sdi_rule_three(coords, config))

    if violations:
        logger.debug(f"SDI check found {len(violations)} violations")
    return CheckResult.from_violations(violations)
