import math
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class PowerTier:
    max_iso: float  # exclusive
    card_value: int
    label: str


# Every value sits inside the grade-gate range so a draw of position 24
# always goes through the pitcher grade check.
POWER_TIERS: Final[tuple[PowerTier, ...]] = (
    PowerTier(0.050, 15, "No power"),
    PowerTier(0.080, 15, "Minimal power"),
    PowerTier(0.110, 16, "Below average"),
    PowerTier(0.150, 17, "Average power"),
    PowerTier(0.190, 18, "Above average"),
    PowerTier(0.230, 19, "Good power"),
    PowerTier(0.280, 20, "Very good"),
    PowerTier(math.inf, 21, "Excellent power"),
)


def compute_power_rating(iso: float) -> int:
    for tier in POWER_TIERS:
        if iso < tier.max_iso:
            return tier.card_value
    return POWER_TIERS[-1].card_value


def power_label(card_value: int) -> str:
    for tier in POWER_TIERS:
        if tier.card_value == card_value:
            return tier.label
    return "Unknown"
