"""In-game timer rendering (MM:SS.CC) for violation frames."""

import math
from enum import Enum
from typing import Optional


class TimerType(Enum):
    NONE = 0
    DECREASING = 2
    INCREASING = 3


def frame_to_game_timer(
    frame: int,
    timer_type: TimerType,
    starting_timer_seconds: Optional[int] = None,
) -> str:
    """
    Convert a frame number to the timer shown on screen at that frame.

    Centiseconds are spread over the 60 frames of a second (0..99).

    Args:
        frame: Frame number (60 per second); pre-game frames are negative
        timer_type: How the in-game timer runs
        starting_timer_seconds: Required for decreasing timers

    Returns:
        "MM:SS.CC", "Unknown" for a decreasing timer without a start value,
        or "Infinite" when the game has no timer
    """
    if timer_type is TimerType.NONE:
        return "Infinite"

    if timer_type is TimerType.DECREASING:
        if starting_timer_seconds is None:
            return "Unknown"
        remainder = (60 - frame % 60) % 60
        centiseconds = math.ceil(remainder * 99 / 59)
        total_seconds = max(int(starting_timer_seconds - frame / 60), 0)
    else:
        # Timer has not started before frame 0
        frame = max(frame, 0)
        remainder = frame % 60
        centiseconds = math.floor(remainder * 99 / 59)
        total_seconds = frame // 60

    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}.{centiseconds:02d}"
