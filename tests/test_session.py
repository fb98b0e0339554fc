"""
Unit tests for warm-up detection and game timer rendering.

Run: pytest tests/ -v
"""

from stickguard.core import Coord
from stickguard.game_timer import TimerType, frame_to_game_timer
from stickguard.handwarmer import is_handwarmer
from stickguard.utils.config import HandwarmerConfig

MOVING = Coord(1.0, 0.0)
NEUTRAL = Coord(0.0, 0.0)


def session_with_idle(idle_frames, total=4000):
    """Full-length session with one idle block in the middle."""
    before = 1000
    return [MOVING] * before + [NEUTRAL] * idle_frames + [MOVING] * (total - before - idle_frames)


class TestHandwarmer:
    """Tests for warm-up session detection."""

    def test_empty_session(self):
        assert is_handwarmer([])

    def test_short_session(self):
        assert is_handwarmer([MOVING] * 3599)

    def test_full_active_session(self):
        assert not is_handwarmer([MOVING] * 3600)

    def test_long_idle_block(self):
        assert is_handwarmer(session_with_idle(601))

    def test_idle_block_at_limit(self):
        assert not is_handwarmer(session_with_idle(600))

    def test_deadzone_edge_is_not_idle(self):
        """Only strictly inside the deadzone counts as idle."""
        coords = [MOVING] * 1000 + [Coord(0.2875, 0.0)] * 1000 + [MOVING] * 2000
        assert not is_handwarmer(coords)

    def test_absent_frames_reset_idle_count(self):
        coords = session_with_idle(601)
        alive = [True] * len(coords)
        alive[1300] = False
        assert not is_handwarmer(coords, alive)

    def test_thresholds_configurable(self):
        config = HandwarmerConfig(min_game_frames=100, max_idle_frames=10)
        assert not is_handwarmer([MOVING] * 200, config=config)
        assert is_handwarmer([MOVING] * 100 + [NEUTRAL] * 11, config=config)


class TestGameTimer:
    """Tests for in-game timer rendering."""

    def test_decreasing_timer(self):
        assert frame_to_game_timer(4095, TimerType.DECREASING, 180) == "01:51.76"

    def test_decreasing_timer_at_zero(self):
        assert frame_to_game_timer(10800, TimerType.DECREASING, 180) == "00:00.00"

    def test_decreasing_timer_clamped(self):
        assert frame_to_game_timer(12000, TimerType.DECREASING, 180) == "00:00.00"

    def test_increasing_timer(self):
        assert frame_to_game_timer(2014, TimerType.INCREASING) == "00:33.57"
        assert frame_to_game_timer(0, TimerType.INCREASING) == "00:00.00"

    def test_increasing_timer_before_start(self):
        assert frame_to_game_timer(-30, TimerType.INCREASING) == "00:00.00"
        assert frame_to_game_timer(-123, TimerType.INCREASING) == "00:00.00"

    def test_decreasing_timer_before_start(self):
        assert frame_to_game_timer(-30, TimerType.DECREASING, 180) == "03:00.51"

    def test_unknown_and_infinite(self):
        assert frame_to_game_timer(100, TimerType.DECREASING, None) == "Unknown"
        assert frame_to_game_timer(100, TimerType.NONE) == "Infinite"
