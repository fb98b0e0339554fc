"""
Player-level orchestration.

Runs every check that applies to one player's stick data. The controller
archetype is detected once and handed explicitly to the gated checks:

    Input Fuzzing  box controllers only
    Illegal SDI    box controllers only
    Control Stick Visualization  always (never fails)

Example:
    from stickguard import analyze_player

    report = analyze_player(coords)
    if report.failed:
        print(report.to_dict())
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from . import fuzzing, sdi
from .controller import ControllerType, controller_for_coverage, rim_coverage
from .core.coords import Coord, coords_from_dataframe
from .core.results import CheckResult, Violation
from .fuzzing.scoring import FuzzAnalysis
from .handwarmer import is_handwarmer
from .utils.config import DetectionConfig

logger = logging.getLogger(__name__)

CHECK_NAMES = [
    "Illegal SDI",
    "Input Fuzzing",
    "Control Stick Visualization",
]


def list_checks() -> List[str]:
    """Names of the checks run by :func:`analyze_player`."""
    return list(CHECK_NAMES)


def control_stick_viz(coords: Sequence[Sequence[float]]) -> CheckResult:
    """Package every coordinate as evidence for visualization. Never fails."""
    evidence = [Coord(c[0], c[1]) for c in coords]
    return CheckResult(failed=False, violations=[Violation(0.0, "Control Stick Viz", evidence)])


@dataclass
class PlayerReport:
    """All check results for a single player."""

    controller: ControllerType
    rim_coverage: float
    is_handwarmer: bool
    input_fuzzing: Optional[FuzzAnalysis]  # None = not applicable
    sdi: Optional[CheckResult]
    control_stick_viz: CheckResult

    @property
    def failed(self) -> bool:
        if self.input_fuzzing is not None and not self.input_fuzzing.passed:
            return True
        return self.sdi is not None and self.sdi.failed

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "controller": self.controller.value,
            "rim_coverage": float(self.rim_coverage),
            "is_handwarmer": self.is_handwarmer,
            "failed": self.failed,
            "input_fuzzing": self.input_fuzzing.to_dict() if self.input_fuzzing else None,
            "sdi": self.sdi.to_dict() if self.sdi else None,
            "control_stick_viz": self.control_stick_viz.to_dict(),
        }


def analyze_player(
    coords: Sequence[Sequence[float]],
    alive: Optional[Sequence[bool]] = None,
    config: Optional[DetectionConfig] = None,
) -> PlayerReport:
    """
    Run all applicable checks on one player's stick coordinates.

    Args:
        coords: Per-frame stick positions
        alive: Optional per-frame presence flags (handwarmer detection only)
        config: Detection thresholds (defaults if None)

    Returns:
        PlayerReport
    """
    config = config or DetectionConfig()

    coverage = rim_coverage(coords, config.controller)
    controller = controller_for_coverage(coverage, config.controller)
    is_box = controller is ControllerType.BOX

    fuzz_result = fuzzing.analyze(coords, config.fuzzing) if is_box else None
    sdi_result = sdi.check(coords, is_box=is_box, config=config.sdi) if is_box else None

    report = PlayerReport(
        controller=controller,
        rim_coverage=coverage,
        is_handwarmer=is_handwarmer(coords, alive, config.handwarmer),
        input_fuzzing=fuzz_result,
        sdi=sdi_result,
        control_stick_viz=control_stick_viz(coords),
    )

    logger.info(
        f"Analyzed {len(coords)} frames: controller={controller.value}, "
        f"handwarmer={report.is_handwarmer}, failed={report.failed}"
    )
    return report


def run_player_checks(
    df: pd.DataFrame,
    x_col: str = "x",
    y_col: str = "y",
    alive_col: Optional[str] = None,
    config: Optional[DetectionConfig] = None,
) -> PlayerReport:
    """
    Run all applicable checks on a decoded per-frame DataFrame.

    Args:
        df: DataFrame with one row per frame
        x_col: Stick X column
        y_col: Stick Y column
        alive_col: Optional boolean presence column
        config: Detection thresholds (defaults if None)

    Returns:
        PlayerReport
    """
    coords = coords_from_dataframe(df, x_col, y_col)
    alive = df[alive_col].astype(bool).tolist() if alive_col is not None else None
    return analyze_player(coords, alive=alive, config=config)
