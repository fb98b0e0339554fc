"""
Statistical scoring of input fuzzing.

Box controllers are required to randomize their output by +-1 lattice unit
around each target. Under proper fuzzing a hold lands on its target about
half the time and on each neighbor a quarter of the time; an unfuzzed
controller lands on the target nearly every time.

Hypotheses (per applicable axis observation):
    H_fuzz:    P(d=0) = 0.50, P(d=+-1) = 0.25
    H_nofuzz:  P(d=0) = 0.95, P(d=+-1) = 0.025

The mean log-likelihood ratio ln(P(d|H_fuzz) / P(d|H_nofuzz)) decides the
verdict. A chi-squared goodness-of-fit test against {0.25, 0.50, 0.25} is
reported alongside but never fails a player on its own.
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from scipy import stats

from ..core.coords import Key, key_to_coord
from ..core.results import CheckResult, Violation
from ..utils.config import FuzzConfig
from .clustering import FuzzEvent, cluster_and_compute_deltas
from .holds import identify_holds

logger = logging.getLogger(__name__)

# [n_minus, n_zero, n_plus]
DeltaCounts = Tuple[int, int, int]

EXPECTED_FRACTIONS = (0.25, 0.50, 0.25)


def llr_weights(config: Optional[FuzzConfig] = None) -> Tuple[float, float]:
    """
    Per-observation log-likelihood ratios.

    Returns:
        (llr for delta=0, llr for delta=+-1)
    """
    config = config or FuzzConfig()
    p0_fuzz, p0_nofuzz = config.p_zero_fuzz, config.p_zero_nofuzz
    p1_fuzz = (1.0 - p0_fuzz) / 2.0
    p1_nofuzz = (1.0 - p0_nofuzz) / 2.0
    return math.log(p0_fuzz / p0_nofuzz), math.log(p1_fuzz / p1_nofuzz)


def accumulate_deltas(events: Sequence[FuzzEvent]) -> Tuple[DeltaCounts, DeltaCounts]:
    """
    Accumulate axis-applicable deltas into per-axis distributions.

    Returns:
        (x_counts, y_counts), each [n_minus, n_zero, n_plus]
    """
    x_counts = [0, 0, 0]
    y_counts = [0, 0, 0]
    for event in events:
        if event.x_applicable and -1 <= event.dx <= 1:
            x_counts[event.dx + 1] += 1
        if event.y_applicable and -1 <= event.dy <= 1:
            y_counts[event.dy + 1] += 1
    return tuple(x_counts), tuple(y_counts)


def compute_llr(
    x_counts: Sequence[int],
    y_counts: Sequence[int],
    config: Optional[FuzzConfig] = None,
) -> float:
    """
    Normalized log-likelihood ratio over both axes.

    Positive = evidence of proper fuzzing, negative = evidence of
    deterministic output, 0.0 when there are no observations.
    """
    llr_zero, llr_one = llr_weights(config)

    total_score = 0.0
    total_obs = 0
    for counts in (x_counts, y_counts):
        n = sum(counts)
        if n == 0:
            continue
        total_score += counts[1] * llr_zero
        total_score += (counts[0] + counts[2]) * llr_one
        total_obs += n

    if total_obs == 0:
        return 0.0
    return total_score / total_obs


def chi_sq_survival_df2(x: float) -> float:
    """
    Survival function of the chi-squared distribution with 2 degrees of
    freedom: P(X > x) = exp(-x/2).
    """
    if x <= 0.0:
        return 1.0
    return math.exp(-x / 2.0)


def chi_squared_test(counts: Sequence[int], min_events: int = 20) -> Optional[float]:
    """
    Goodness-of-fit p-value for one axis against {0.25, 0.50, 0.25}.

    Args:
        counts: [n_minus, n_zero, n_plus]
        min_events: Minimum observations for the test to be meaningful

    Returns:
        p-value, or None if fewer than ``min_events`` observations
    """
    n = sum(counts)
    if n < min_events:
        return None

    expected = [frac * n for frac in EXPECTED_FRACTIONS]
    statistic = stats.chisquare(list(counts), f_exp=expected).statistic
    return chi_sq_survival_df2(float(statistic))


@dataclass
class FuzzAnalysis:
    """Full statistical analysis of input fuzzing compliance."""

    passed: bool
    llr_score: float  # Mean LLR per observation
    p_value_x: Optional[float]  # None = insufficient data
    p_value_y: Optional[float]
    total_fuzz_events: int
    observed_x: DeltaCounts
    observed_y: DeltaCounts
    violations: List[Violation] = field(default_factory=list)

    def to_check_result(self) -> CheckResult:
        if self.passed:
            return CheckResult.passing()
        return CheckResult.failing(self.violations)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "passed": self.passed,
            "llr_score": float(self.llr_score),
            "p_value_x": self.p_value_x,
            "p_value_y": self.p_value_y,
            "total_fuzz_events": self.total_fuzz_events,
            "observed_x": list(self.observed_x),
            "observed_y": list(self.observed_y),
            "violations": [v.to_dict() for v in self.violations],
        }


def _pct(count: int, total: int) -> float:
    return 0.0 if total == 0 else count / total * 100.0


def _axis_line(axis: str, counts: DeltaCounts) -> str:
    total = sum(counts)
    return (
        f"\n  {axis}-axis: {_pct(counts[1], total):.1f}% unchanged, "
        f"{_pct(counts[2], total):.1f}% +1, {_pct(counts[0], total):.1f}% -1 "
        f"(expected ~50% / ~25% / ~25%)"
    )


def build_violations(
    events: Sequence[FuzzEvent],
    llr_score: float,
    config: Optional[FuzzConfig] = None,
) -> List[Violation]:
    """
    Summary violation plus one breakdown per target, worst LLR first.
    """
    total_llr = llr_score * len(events)
    log10_odds = -total_llr * math.log10(math.e)

    violations = [Violation(llr_score, f"1 in 10^{log10_odds:.0f} odds of occurring by chance")]

    per_target: Dict[Key, List[FuzzEvent]] = defaultdict(list)
    for event in events:
        per_target[event.target_key].append(event)

    scored = []
    for tkey, tevents in per_target.items():
        tx, ty = accumulate_deltas(tevents)
        scored.append((compute_llr(tx, ty, config), tkey, tevents, tx, ty))
    scored.sort(key=lambda item: item[0])

    for target_llr, tkey, tevents, tx, ty in scored:
        target = key_to_coord(tkey)
        n = len(tevents)
        reason = f"Target coordinate ({target.x:.4f}, {target.y:.4f}), {n} transition{'' if n == 1 else 's'}:"
        if sum(tx) > 0:
            reason += _axis_line("X", tx)
        if sum(ty) > 0:
            reason += _axis_line("Y", ty)
        violations.append(Violation(target_llr, reason, [target]))

    return violations


def analyze(coords: Sequence[Sequence[float]], config: Optional[FuzzConfig] = None) -> FuzzAnalysis:
    """
    Analyze a coordinate sequence for input fuzzing.

    Args:
        coords: Per-frame stick positions
        config: Fuzzing thresholds (defaults if None)

    Returns:
        FuzzAnalysis. Fewer than ``min_events_for_llr`` events is a pass.
    """
    config = config or FuzzConfig()

    holds = identify_holds(coords)
    events = cluster_and_compute_deltas(holds, config)
    x_counts, y_counts = accumulate_deltas(events)
    total_events = len(events)

    llr_score = compute_llr(x_counts, y_counts, config)
    p_value_x = chi_squared_test(x_counts, config.min_events_for_chi_sq)
    p_value_y = chi_squared_test(y_counts, config.min_events_for_chi_sq)

    if total_events < config.min_events_for_llr:
        passed, violations = True, []
    elif llr_score < 0.0:
        passed, violations = False, build_violations(events, llr_score, config)
    else:
        passed, violations = True, []

    logger.debug(
        f"Fuzz analysis: {len(holds)} holds, {total_events} events, "
        f"LLR={llr_score:.3f}, passed={passed}"
    )

    return FuzzAnalysis(
        passed=passed,
        llr_score=llr_score,
        p_value_x=p_value_x,
        p_value_y=p_value_y,
        total_fuzz_events=total_events,
        observed_x=x_counts,
        observed_y=y_counts,
        violations=violations,
    )


def check(coords: Sequence[Sequence[float]], config: Optional[FuzzConfig] = None) -> CheckResult:
    """Check for missing input fuzzing."""
    return analyze(coords, config).to_check_result()
