"""ERA-percentile pitcher grades.

The primary scale runs 1-22 (22 best). The legacy import path falls back to
an older 1-15 scale when a binary record carries no grade of its own; the
two ladders come from different calibrations and are kept separate.
"""

from collections.abc import Sequence
from typing import Final

MAX_PITCHER_GRADE: Final = 22
LEGACY_MAX_PITCHER_GRADE: Final = 15

# Pools too small to rank against map to an average pitcher.
NEUTRAL_PERCENTILE: Final = 0.49

# (percentile upper bound exclusive, grade); lower percentile = better ERA.
GRADE_LADDER: Final[tuple[tuple[float, int], ...]] = (
    (0.005, MAX_PITCHER_GRADE),
    (0.010, 21),
    (0.015, 20),
    (0.020, 19),
    (0.025, 18),
    (0.030, 17),
    (0.040, 16),
    (0.07, 15),
    (0.10, 14),
    (0.15, 13),
    (0.22, 12),
    (0.30, 11),
    (0.40, 10),
    (0.50, 9),
    (0.60, 8),
    (0.70, 7),
    (0.80, 6),
    (0.87, 5),
    (0.93, 4),
    (0.97, 3),
    (0.99, 2),
    (1.00, 1),
)

LEGACY_GRADE_LADDER: Final[tuple[tuple[float, int], ...]] = (
    (0.02, LEGACY_MAX_PITCHER_GRADE),
    (0.05, 14),
    (0.09, 13),
    (0.14, 12),
    (0.20, 11),
    (0.27, 10),
    (0.35, 9),
    (0.44, 8),
    (0.54, 7),
    (0.64, 6),
    (0.74, 5),
    (0.83, 4),
    (0.91, 3),
    (0.97, 2),
    (1.00, 1),
)


def era_percentile(pitcher_era: float, all_eras: Sequence[float]) -> float:
    """Fraction of the pool with a strictly lower ERA (0 = best in pool)."""
    if len(all_eras) <= 1:
        return NEUTRAL_PERCENTILE
    better = sum(1 for era in all_eras if era < pitcher_era)
    return better / len(all_eras)


def _ladder_grade(percentile: float, ladder: tuple[tuple[float, int], ...]) -> int:
    for max_percentile, grade in ladder:
        if percentile < max_percentile:
            return grade
    return 1


def percentile_to_grade(percentile: float) -> int:
    return _ladder_grade(percentile, GRADE_LADDER)


def legacy_percentile_to_grade(percentile: float) -> int:
    return _ladder_grade(percentile, LEGACY_GRADE_LADDER)


def compute_pitcher_grade(pitcher_era: float, all_eras: Sequence[float]) -> int:
    return percentile_to_grade(era_percentile(pitcher_era, all_eras))


def compute_legacy_pitcher_grade(pitcher_era: float, all_eras: Sequence[float]) -> int:
    return legacy_percentile_to_grade(era_percentile(pitcher_era, all_eras))
