"""
Warm-up ("handwarmer") session detection.

Friendlies played before a set are not subject to review. A session counts
as a warm-up when it is shorter than a minute, or when the player leaves the
stick idle in the deadzone for more than ten seconds while present.
"""

import logging
from typing import Optional, Sequence

from .utils.config import HandwarmerConfig

logger = logging.getLogger(__name__)


def is_handwarmer(
    coords: Sequence[Sequence[float]],
    alive: Optional[Sequence[bool]] = None,
    config: Optional[HandwarmerConfig] = None,
) -> bool:
    """
    Detect whether a session is a warm-up.

    Args:
        coords: Per-frame stick positions for one player
        alive: Optional per-frame presence flags; absent frames reset the
            idle counter
        config: Thresholds (defaults if None)

    Returns:
        True for empty, short, or idle sessions
    """
    config = config or HandwarmerConfig()
    n = len(coords)
    if n == 0 or n < config.min_game_frames:
        return True

    dz = config.deadzone_threshold
    idle = 0
    for i, (x, y) in enumerate(coords):
        if alive is not None and not alive[i]:
            idle = 0
            continue

        if abs(x) < dz and abs(y) < dz:
            idle += 1
        else:
            idle = 0

        if idle > config.max_idle_frames:
            logger.debug(f"Idle in deadzone for {idle} frames at frame {i}")
            return True

    return False
