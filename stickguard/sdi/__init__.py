"""
Directional input (SDI) region state machine and illegal pattern rules.
"""

from .regions import (
    SDIRegion,
    DIAGONALS,
    CARDINALS,
    get_sdi_region,
    classify_regions,
    is_region_adjacent,
    is_diagonal_adjacent,
)
from .rules import (
    fails_sdi_rule_one,
    fails_sdi_rule_two,
    fails_sdi_rule_three,
    check,
)

__all__ = [
    "SDIRegion",
    "DIAGONALS",
    "CARDINALS",
    "get_sdi_region",
    "classify_regions",
    "is_region_adjacent",
    "is_diagonal_adjacent",
    "fails_sdi_rule_one",
    "fails_sdi_rule_two",
    "fails_sdi_rule_three",
    "check",
]
