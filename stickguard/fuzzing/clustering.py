"""
Target clustering for fuzz analysis.

Groups holds into inferred targets (the stick positions the player meant to
reach) and measures how far each hold landed from its target.

Algorithm (local-maxima clustering over the sparse 1/80 lattice):
    1. Count holds per lattice key
    2. Candidate targets: keys whose count is not exceeded by any neighbor
       (ties favor target status). Exempt classes never qualify.
    3. Claims: every target claims itself and its occurring neighbors. A key
       claimed by 2+ targets is contested and dropped for all claimants.
    4. Cluster size: targets whose unambiguous hold total is 1 are dropped
       (a lone hold always sits at delta 0)
    5. Emit one FuzzEvent per hold on an unambiguous, surviving key
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..core.classify import EXEMPT_CLASSES, applicable_axes, classify_coord, neighbor_offsets_for
from ..core.coords import Key, coord_key, key_to_coord
from ..utils.config import FuzzConfig
from .holds import Hold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FuzzEvent:
    """One hold assigned to its inferred target."""
    dx: int  # -1, 0 or +1 lattice units
    dy: int
    x_applicable: bool  # X axis is expected to be fuzzed
    y_applicable: bool
    target_key: Key


def find_candidate_targets(key_counts: Dict[Key, int], rim_threshold: float) -> List[Key]:
    """Keys that are the local hold-count mode among their neighbors."""
    targets = []
    for key, count in key_counts.items():
        coord = key_to_coord(key)
        coord_class = classify_coord(coord, rim_threshold)
        if coord_class in EXEMPT_CLASSES:
            continue

        offsets = neighbor_offsets_for(coord, coord_class)
        if all(key_counts.get((key[0] + ox, key[1] + oy), 0) <= count for ox, oy in offsets):
            targets.append(key)
    return targets


def resolve_claims(
    targets: Sequence[Key],
    key_counts: Dict[Key, int],
    rim_threshold: float,
) -> Dict[Key, List[Key]]:
    """Map each occurring key to the targets claiming it."""
    claimants: Dict[Key, List[Key]] = defaultdict(list)
    for tkey in targets:
        coord = key_to_coord(tkey)
        offsets = neighbor_offsets_for(coord, classify_coord(coord, rim_threshold))
        for ox, oy in [(0, 0)] + offsets:
            nkey = (tkey[0] + ox, tkey[1] + oy)
            if nkey in key_counts:
                claimants[nkey].append(tkey)
    return dict(claimants)


def cluster_and_compute_deltas(
    holds: Sequence[Hold],
    config: Optional[FuzzConfig] = None,
) -> List[FuzzEvent]:
    """
    Cluster holds into targets and compute per-hold fuzz deltas.

    Only holds on keys unambiguously owned by a fuzzable target produce
    events; contested keys are excluded for every claimant.

    Args:
        holds: Holds in frame order
        config: Fuzzing thresholds (defaults if None)

    Returns:
        FuzzEvents in hold order
    """
    config = config or FuzzConfig()
    rim_threshold = config.rim_magnitude_threshold

    hold_keys = [coord_key(hold.coord) for hold in holds]
    key_counts = Counter(hold_keys)

    targets = find_candidate_targets(key_counts, rim_threshold)
    claimants = resolve_claims(targets, key_counts, rim_threshold)

    cluster_size: Dict[Key, int] = defaultdict(int)
    contested = 0
    for key, owners in claimants.items():
        if len(owners) == 1:
            cluster_size[owners[0]] += key_counts[key]
        else:
            contested += 1

    logger.debug(
        f"{len(holds)} holds on {len(key_counts)} keys: "
        f"{len(targets)} candidate targets, {contested} contested keys"
    )

    events = []
    for key in hold_keys:
        owners = claimants.get(key)
        if owners is None or len(owners) != 1:
            continue

        target_key = owners[0]
        if cluster_size[target_key] < 2:
            continue

        dx = key[0] - target_key[0]
        dy = key[1] - target_key[1]
        if abs(dx) > 1 or abs(dy) > 1:
            logger.warning(f"Skipping out-of-range delta ({dx}, {dy}) from target {target_key}")
            continue

        target = key_to_coord(target_key)
        x_applicable, y_applicable = applicable_axes(target, classify_coord(target, rim_threshold))
        events.append(FuzzEvent(dx, dy, x_applicable, y_applicable, target_key))

    logger.debug(f"Emitted {len(events)} fuzz events")
    return events
