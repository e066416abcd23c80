"""Slot allocation: per-PA rates to integer slot counts over the 26 variable positions."""

import logging
import math
from dataclasses import dataclass
from typing import Final

from statcard.cards.rates import PlayerRates
from statcard.cards.structural import VARIABLE_COUNT
from statcard.domain.card import Archetype
from statcard.domain.outcome import OutcomeCategory
from statcard.simulation.fallback import direct_outcome

logger = logging.getLogger(__name__)

# One variable slot is always left for an out.
MAX_NON_OUT_SLOTS: Final = VARIABLE_COUNT - 1

# (steal_rate upper bound, speed slots); steals per PA.
SPEED_STEPS: Final = ((0.01, 0), (0.03, 1), (0.06, 2), (math.inf, 3))

# Single-quality splits (high, mid) by BABIP; low takes the remainder.
SINGLES_SPLIT_DEFAULT: Final = (0.30, 0.45)
SINGLES_SPLIT_HIGH_BABIP: Final = (0.40, 0.40)
SINGLES_SPLIT_GOOD_BABIP: Final = (0.35, 0.40)
SINGLES_SPLIT_LOW_BABIP: Final = (0.20, 0.45)


@dataclass(frozen=True)
class SlotAllocation:
    walks: int = 0
    strikeouts: int = 0
    home_runs: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    speed: int = 0
    outs: int = VARIABLE_COUNT

    @property
    def non_outs(self) -> int:
        return self.walks + self.strikeouts + self.home_runs + self.singles + self.doubles + self.triples + self.speed

    @property
    def total(self) -> int:
        return self.non_outs + self.outs


@dataclass(frozen=True)
class ArchetypeHitContribution:
    home_runs: int = 0
    doubles: int = 0
    triples: int = 0
    singles: int = 0


def round_half_up(value: float) -> int:
    """Round half away from zero (Python's round() would round half to even)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def archetype_hit_contributions(archetype: Archetype) -> ArchetypeHitContribution:
    """Count the hits the archetype bytes produce when drawn as outcomes."""
    home_runs = doubles = triples = singles = 0
    for value in archetype.values:
        outcome = direct_outcome(value)
        if outcome in (OutcomeCategory.HOME_RUN, OutcomeCategory.HOME_RUN_VARIANT):
            home_runs += 1
        elif outcome is OutcomeCategory.DOUBLE:
            doubles += 1
        elif outcome is OutcomeCategory.TRIPLE:
            triples += 1
        elif outcome in (OutcomeCategory.SINGLE_CLEAN, OutcomeCategory.SINGLE_ADVANCE):
            singles += 1
    return ArchetypeHitContribution(home_runs=home_runs, doubles=doubles, triples=triples, singles=singles)


def speed_slots(steal_rate: float) -> int:
    for bound, slots in SPEED_STEPS:
        if steal_rate < bound:
            return slots
    return SPEED_STEPS[-1][1]


def compute_slot_allocation(rates: PlayerRates, archetype: Archetype) -> SlotAllocation:
    """Allocate the 26 variable card positions among outcome types.

    Raw counts are ``rate * 26`` less whatever the archetype bytes already
    contribute, rounded half-up. If the non-out total leaves no room for an
    out, the non-speed raw counts are rescaled by ``25 / total`` and
    re-rounded.
    """
    contrib = archetype_hit_contributions(archetype)
    raw = {
        "walks": rates.walk_rate * VARIABLE_COUNT,
        "strikeouts": rates.strikeout_rate * VARIABLE_COUNT,
        "home_runs": max(0.0, rates.home_run_rate * VARIABLE_COUNT - contrib.home_runs),
        "singles": max(0.0, rates.single_rate * VARIABLE_COUNT - contrib.singles),
        "doubles": max(0.0, rates.double_rate * VARIABLE_COUNT - contrib.doubles),
        "triples": max(0.0, rates.triple_rate * VARIABLE_COUNT - contrib.triples),
    }
    counts = {name: round_half_up(value) for name, value in raw.items()}

    if counts["walks"] == 0 and rates.walk_rate > 0:
        counts["walks"] = 1
    if counts["strikeouts"] == 0 and rates.strikeout_rate > 0:
        counts["strikeouts"] = 1

    speed = speed_slots(rates.steal_rate)
    total = sum(counts.values()) + speed

    # Re-rounding after one rescale can still land above the cap.
    passes = 0
    while total > MAX_NON_OUT_SLOTS:
        passes += 1
        scale = MAX_NON_OUT_SLOTS / total
        raw = {name: value * scale for name, value in raw.items()}
        counts = {name: round_half_up(value) for name, value in raw.items()}
        total = sum(counts.values()) + speed
    if passes > 1:
        logger.debug("Overflow rescale took %d passes (non-outs=%d)", passes, total)

    return SlotAllocation(
        walks=counts["walks"],
        strikeouts=counts["strikeouts"],
        home_runs=counts["home_runs"],
        singles=counts["singles"],
        doubles=counts["doubles"],
        triples=counts["triples"],
        speed=speed,
        outs=VARIABLE_COUNT - total,
    )


def split_singles_tiers(total_singles: int, babip: float) -> tuple[int, int, int]:
    """Split singles into (high, mid, low) quality tiers using BABIP as a prior.

    The three tiers always sum to ``total_singles``.
    """
    if total_singles <= 0:
        return (0, 0, 0)

    if babip > 0.320:
        high_pct, mid_pct = SINGLES_SPLIT_HIGH_BABIP
    elif babip > 0.300:
        high_pct, mid_pct = SINGLES_SPLIT_GOOD_BABIP
    elif babip < 0.260:
        high_pct, mid_pct = SINGLES_SPLIT_LOW_BABIP
    else:
        high_pct, mid_pct = SINGLES_SPLIT_DEFAULT

    high = round_half_up(total_singles * high_pct)
    mid = min(round_half_up(total_singles * mid_pct), total_singles - high)
    low = max(0, total_singles - high - mid)
    return (high, mid, low)
