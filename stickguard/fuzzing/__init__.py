"""
Input fuzzing detection.

Pipeline:
    coordinates -> holds -> targets/FuzzEvents -> LLR verdict

Example:
    from stickguard.fuzzing import analyze

    analysis = analyze(coords)
    if not analysis.passed:
        for violation in analysis.violations:
            print(violation.reason)
"""

from .holds import Hold, identify_holds
from .clustering import FuzzEvent, cluster_and_compute_deltas
from .scoring import (
    DeltaCounts,
    FuzzAnalysis,
    accumulate_deltas,
    compute_llr,
    chi_squared_test,
    chi_sq_survival_df2,
    analyze,
    check,
)

__all__ = [
    "Hold",
    "identify_holds",
    "FuzzEvent",
    "cluster_and_compute_deltas",
    "DeltaCounts",
    "FuzzAnalysis",
    "accumulate_deltas",
    "compute_llr",
    "chi_squared_test",
    "chi_sq_survival_df2",
    "analyze",
    "check",
]
