"""Check verdicts and the evidence attached to them."""

from dataclasses import dataclass, field
from typing import List, Sequence

from .coords import Coord


@dataclass
class Violation:
    """A single rule violation."""
    metric: float  # Usually a frame index or a score
    reason: str
    evidence: List[Coord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "metric": float(self.metric),
            "reason": self.reason,
            "evidence": [{"x": float(c[0]), "y": float(c[1])} for c in self.evidence],
        }


@dataclass
class CheckResult:
    """Result of running a check. ``failed`` is True when a violation was detected."""
    failed: bool
    violations: List[Violation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failed

    @classmethod
    def passing(cls) -> "CheckResult":
        return cls(failed=False)

    @classmethod
    def failing(cls, violations: Sequence[Violation]) -> "CheckResult":
        return cls(failed=True, violations=list(violations))

    @classmethod
    def from_violations(cls, violations: Sequence[Violation]) -> "CheckResult":
        """Fail iff any violation was found."""
        if violations:
            return cls.failing(violations)
        return cls.passing()

    def to_dict(self) -> dict:
        return {
            "failed": self.failed,
            "violations": [v.to_dict() for v in self.violations],
        }
