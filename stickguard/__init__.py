"""
stickguard - Analog-stick input integrity checks for competitive play

Decides whether a recorded sequence of per-frame control stick positions is
consistent with a legitimate controller, for tournament integrity review.

Features:
    - Controller archetype: box (digital) vs. analog, from rim coverage
    - Input fuzzing: hold segmentation, target clustering with contested-key
      exclusion, log-likelihood-ratio verdict with chi-squared diagnostics
    - Illegal SDI: 10-region state machine with three macro-pattern rules
    - Warm-up session detection and in-game timer rendering for reports

Quick Start:
    from stickguard import analyze_player

    report = analyze_player(coords)   # coords: [(x, y), ...] per frame
    if report.failed:
        print(report.to_dict())

Example - Single Check:
    from stickguard import fuzzing, is_box_controller

    if is_box_controller(coords):
        analysis = fuzzing.analyze(coords)
        print(f"LLR={analysis.llr_score:.3f} passed={analysis.passed}")

Example - Tuned Thresholds:
    from stickguard import analyze_player, load_detection_config

    config = load_detection_config("tournament.yaml")
    report = analyze_player(coords, config=config)
"""

__version__ = "0.1.0"

# Core types
from .core import Coord, Violation, CheckResult, CoordClass, classify_coord

# Controller archetype
from .controller import ControllerType, classify_controller, is_box_controller, rim_coverage

# Checks
from . import fuzzing
from . import sdi
from .fuzzing import FuzzAnalysis
from .sdi import SDIRegion, get_sdi_region

# Session helpers
from .handwarmer import is_handwarmer
from .game_timer import TimerType, frame_to_game_timer

# Orchestration
from .pipeline import PlayerReport, analyze_player, run_player_checks, list_checks

# Configuration
from .utils.config import DetectionConfig, load_detection_config

__all__ = [
    # Version
    "__version__",
    # Core
    "Coord",
    "Violation",
    "CheckResult",
    "CoordClass",
    "classify_coord",
    # Controller
    "ControllerType",
    "classify_controller",
    "is_box_controller",
    "rim_coverage",
    # Checks
    "fuzzing",
    "sdi",
    "FuzzAnalysis",
    "SDIRegion",
    "get_sdi_region",
    # Session
    "is_handwarmer",
    "TimerType",
    "frame_to_game_timer",
    # Orchestration
    "PlayerReport",
    "analyze_player",
    "run_player_checks",
    "list_checks",
    # Configuration
    "DetectionConfig",
    "load_detection_config",
]
