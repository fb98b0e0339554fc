"""
Unit tests for SDI region classification and illegal SDI rules.

Run: pytest tests/ -v
"""

import numpy as np
import pytest

from stickguard.core import Coord
from stickguard.sdi import (
    SDIRegion,
    check,
    classify_regions,
    fails_sdi_rule_one,
    fails_sdi_rule_three,
    fails_sdi_rule_two,
    get_sdi_region,
    is_diagonal_adjacent,
    is_region_adjacent,
)
from stickguard.utils.config import SDIConfig


def xs(*values):
    """Horizontal-only coordinate sequence."""
    return [Coord(v, 0.0) for v in values]


NORTH = Coord(0.0, 1.0)
NE = Coord(0.8, 0.8)
NW = Coord(-0.8, 0.8)
SW = Coord(-0.8, -0.8)


class TestRegions:
    """Tests for region classification."""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (0.0, 0.0, SDIRegion.DZ),
            (0.2, 0.2, SDIRegion.DZ),
            (-0.2, -0.2, SDIRegion.DZ),
            (0.8, 0.8, SDIRegion.NE),
            (0.9, 0.7, SDIRegion.NE),
            (0.8, -0.8, SDIRegion.SE),
            (0.9, -0.7, SDIRegion.SE),
            (-0.8, -0.8, SDIRegion.SW),
            (-0.9, -0.7, SDIRegion.SW),
            (-0.8, 0.8, SDIRegion.NW),
            (-0.9, 0.7, SDIRegion.NW),
            (0.0, 0.8, SDIRegion.N),
            (0.2, 0.9, SDIRegion.N),
            (0.8, 0.0, SDIRegion.E),
            (0.9, 0.2, SDIRegion.E),
            (0.0, -0.8, SDIRegion.S),
            (0.2, -0.9, SDIRegion.S),
            (-0.8, 0.0, SDIRegion.W),
            (-0.9, 0.2, SDIRegion.W),
            (0.4, 0.4, SDIRegion.TILT),
            (-0.4, -0.4, SDIRegion.TILT),
            (0.2, -0.3, SDIRegion.TILT),
        ],
    )
    def test_region_sanity(self, x, y, expected):
        assert get_sdi_region(x, y) is expected

    def test_region_boundaries(self):
        """Deadzone edge at 0.2875, full direction at 0.7."""
        assert get_sdi_region(0.0, 0.0) is SDIRegion.DZ
        assert get_sdi_region(0.2876, 0.0) is SDIRegion.TILT
        assert get_sdi_region(0.0, 0.2876) is SDIRegion.TILT
        assert get_sdi_region(-0.2876, 0.0) is SDIRegion.TILT
        assert get_sdi_region(0.0, -0.2876) is SDIRegion.TILT

        assert get_sdi_region(0.7, 0.7) is SDIRegion.NE
        assert get_sdi_region(-0.7, 0.7) is SDIRegion.NW
        assert get_sdi_region(0.7, -0.7) is SDIRegion.SE
        assert get_sdi_region(-0.7, -0.7) is SDIRegion.SW

        assert get_sdi_region(0.7, 0.0) is SDIRegion.E
        assert get_sdi_region(0.0, 0.7) is SDIRegion.N
        assert get_sdi_region(-0.7, 0.0) is SDIRegion.W
        assert get_sdi_region(0.0, -0.7) is SDIRegion.S

    def test_vectorized_matches_scalar(self):
        grid = np.linspace(-1.0, 1.0, 41)
        coords = [(x, y) for x in grid for y in grid]
        regions = classify_regions(coords)

        assert len(regions) == len(coords)
        for (x, y), region in zip(coords, regions):
            assert region is get_sdi_region(x, y)

    def test_classify_regions_empty(self):
        assert classify_regions([]) == []

    def test_region_adjacency(self):
        assert is_region_adjacent(SDIRegion.N, SDIRegion.NE)
        assert is_region_adjacent(SDIRegion.N, SDIRegion.NW)
        assert not is_region_adjacent(SDIRegion.N, SDIRegion.S)
        assert not is_region_adjacent(SDIRegion.DZ, SDIRegion.N)
        assert not is_region_adjacent(SDIRegion.TILT, SDIRegion.NE)

    def test_diagonal_adjacency(self):
        assert is_diagonal_adjacent(SDIRegion.NE, SDIRegion.NW)
        assert is_diagonal_adjacent(SDIRegion.NE, SDIRegion.SE)
        assert not is_diagonal_adjacent(SDIRegion.NE, SDIRegion.SW)
        assert not is_diagonal_adjacent(SDIRegion.SE, SDIRegion.NW)
        assert not is_diagonal_adjacent(SDIRegion.SE, SDIRegion.SE)
        assert not is_diagonal_adjacent(SDIRegion.SE, SDIRegion.DZ)
        assert not is_diagonal_adjacent(SDIRegion.N, SDIRegion.NE)
        assert is_diagonal_adjacent(SDIRegion.SE, SDIRegion.SW)
        assert is_diagonal_adjacent(SDIRegion.NW, SDIRegion.NE)
        assert is_diagonal_adjacent(SDIRegion.SW, SDIRegion.SE)


class TestRuleOne:
    """Rapid deadzone-anchored tapping."""

    def test_no_movement(self):
        assert fails_sdi_rule_one(xs(0, 0, 0, 0, 0, 0)) == []

    def test_rapid_tapping_violates(self):
        violations = fails_sdi_rule_one(xs(0, 1, 0, 1, 0, 1))

        assert len(violations) >= 1
        assert violations[0].metric == 0
        assert violations[0].reason == "Failed SDI rule #1"
        assert len(violations[0].evidence) == 6

    def test_scan_from_every_deadzone_frame(self):
        """Overlapping windows each report the same taps."""
        violations = fails_sdi_rule_one(xs(0, 1, 0, 1, 0, 1))
        assert [v.metric for v in violations] == [0, 0, 2]

    def test_taps_four_frames_apart(self):
        violations = fails_sdi_rule_one(xs(0, 1, 0, 0, 0, 1))
        assert [v.metric for v in violations] == [0]

    def test_taps_five_frames_apart(self):
        assert fails_sdi_rule_one(xs(0, 1, 0, 0, 0, 0, 1)) == []

    def test_too_many_tilt_frames(self):
        coords = xs(0.0, 0.3, 0.32, 0.35, 0.4, 1.0, 0.0, 1.0)
        assert fails_sdi_rule_one(coords) == []

    def test_slow_taps_with_travel(self):
        coords = xs(0.0, 0.3, 0.35, 0.4, 1.0, 0.0, 0.35, 0.4, 1.0)
        assert fails_sdi_rule_one(coords) == []

    def test_travel_frames_exempt(self):
        coords = xs(0.0, 0.3, 1.0, 0.0, 0.3, 1.0)
        assert fails_sdi_rule_one(coords) == []

    def test_travel_after_taps_still_violates(self):
        coords = xs(0.0, 1.0, 0.0, 1.0, 0.3, 0.35, 0.4)
        assert len(fails_sdi_rule_one(coords)) >= 1

    def test_lookahead_configurable(self):
        config = SDIConfig(rule_one_lookahead=2)
        assert fails_sdi_rule_one(xs(0, 1, 0, 1), config) == []


class TestRuleTwo:
    """Cardinal <-> adjacent diagonal ping-pong."""

    def test_cardinal_diagonal_pingpong(self):
        coords = [NORTH, NE, NORTH, NE, NORTH]
        violations = fails_sdi_rule_two(coords)

        assert len(violations) == 1
        assert violations[0].metric == 0
        assert violations[0].reason == "Failed SDI rule #2"
        assert len(violations[0].evidence) == 5

    def test_held_diagonal_is_legal(self):
        coords = [NORTH, NORTH, NE, NE, NE]
        assert fails_sdi_rule_two(coords) == []

    def test_different_diagonals_do_not_count(self):
        coords = [NORTH, NE, NORTH, NW]
        assert fails_sdi_rule_two(coords) == []

    def test_second_entry_outside_window(self):
        coords = [NORTH, NE, NORTH, NORTH, NORTH, NE]
        assert fails_sdi_rule_two(coords) == []

    def test_window_anchored_at_later_cardinal(self):
        coords = [NORTH, NORTH, NE, NORTH, NORTH, NE]
        assert [v.metric for v in fails_sdi_rule_two(coords)] == [1]


class TestRuleThree:
    """Diagonal <-> adjacent diagonal ping-pong."""

    def test_adjacent_diagonal_and_back(self):
        coords = [NE, NW, NE]
        violations = fails_sdi_rule_three(coords)

        assert len(violations) == 1
        assert violations[0].metric == 0
        assert violations[0].reason == "Failed SDI rule #3"
        assert len(violations[0].evidence) == 3

    def test_opposite_diagonal_is_not_adjacent(self):
        assert fails_sdi_rule_three([NE, SW, NE]) == []

    def test_return_outside_window(self):
        coords = [NE, NW, NW, NW, NW, NE]
        assert fails_sdi_rule_three(coords) == []


class TestCheck:
    """Tests for the gated SDI check."""

    def test_box_controller_fails(self):
        result = check(xs(0, 1, 0, 1, 0, 1), is_box=True)
        assert result.failed
        assert all(v.reason == "Failed SDI rule #1" for v in result.violations)

    def test_analog_controller_passes(self):
        result = check(xs(0, 1, 0, 1, 0, 1), is_box=False)
        assert result.passed
        assert result.violations == []

    def test_detects_controller_when_not_given(self):
        """A short sequence touching one rim position is a box controller."""
        assert check(xs(0, 1, 0, 1, 0, 1)).failed

    def test_rules_concatenated_in_order(self):
        coords = xs(0, 1, 0, 1) + [NE, NW, NE]
        result = check(coords, is_box=True)
        reasons = [v.reason for v in result.violations]
        assert reasons == sorted(reasons)
        assert "Failed SDI rule #3" in reasons

    def test_empty_passes(self):
        assert check([], is_box=True).passed
