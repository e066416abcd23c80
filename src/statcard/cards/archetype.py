"""Archetype classification for card bytes 33-34.

Rules are evaluated in order and the first match wins, so a 30-HR hitter who
also steals 25 bases is a power archetype, never a speed one.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import Archetype, ArchetypeKind, Position
from statcard.domain.player_season import BattingHand

logger = logging.getLogger(__name__)

# Thresholds calibrated against the imported legacy card distribution
# (best F1 for power detection: HR >= 18 or ISO >= .170).
POWER_HR_THRESHOLD: Final = 18
POWER_ISO_THRESHOLD: Final = 0.170
SPEED_SB_THRESHOLD: Final = 20
SPEED_SUCCESS_RATE_THRESHOLD: Final = 0.75
CONTACT_SPEED_BA_THRESHOLD: Final = 0.280
CONTACT_SPEED_SB_THRESHOLD: Final = 10
ELITE_FIELDING_PCT: Final = 0.985
UTILITY_MIN_POSITIONS: Final = 3
UTILITY_BA_CEILING: Final = 0.250

PREMIUM_DEFENSE_POSITIONS: Final[frozenset[str]] = frozenset({"C", "SS", "2B", "3B", "CF"})

PITCHER = Archetype(0, 6, ArchetypeKind.PITCHER)
POWER_PLATOON = Archetype(1, 1, ArchetypeKind.POWER_PLATOON)
POWER = Archetype(1, 0, ArchetypeKind.POWER)
SPEED = Archetype(6, 0, ArchetypeKind.SPEED)
CONTACT_SPEED = Archetype(0, 2, ArchetypeKind.CONTACT_SPEED)
DEFENSE = Archetype(8, 0, ArchetypeKind.DEFENSE)
UTILITY = Archetype(5, 0, ArchetypeKind.UTILITY)
STANDARD_LEFT = Archetype(0, 1, ArchetypeKind.STANDARD)
STANDARD_RIGHT = Archetype(7, 0, ArchetypeKind.STANDARD)


@dataclass(frozen=True)
class ArchetypeInputs:
    stats: BattingStats
    batting_hand: BattingHand
    is_pitcher: bool
    primary_position: Position
    sb_success_rate: float
    is_elite_defense: bool
    eligible_position_count: int

    @property
    def left_or_switch(self) -> bool:
        return self.batting_hand in ("L", "S")


def _is_power(i: ArchetypeInputs) -> bool:
    return i.stats.hr >= POWER_HR_THRESHOLD or i.stats.iso >= POWER_ISO_THRESHOLD


def _is_speed(i: ArchetypeInputs) -> bool:
    return i.stats.sb >= SPEED_SB_THRESHOLD or i.sb_success_rate >= SPEED_SUCCESS_RATE_THRESHOLD


def _is_contact_speed(i: ArchetypeInputs) -> bool:
    return i.stats.avg >= CONTACT_SPEED_BA_THRESHOLD and i.stats.sb >= CONTACT_SPEED_SB_THRESHOLD


def _is_defense(i: ArchetypeInputs) -> bool:
    return i.is_elite_defense and i.primary_position in PREMIUM_DEFENSE_POSITIONS


def _is_utility(i: ArchetypeInputs) -> bool:
    return i.eligible_position_count >= UTILITY_MIN_POSITIONS and i.stats.avg < UTILITY_BA_CEILING


ARCHETYPE_RULES: Final[tuple[tuple[Callable[[ArchetypeInputs], bool], Callable[[ArchetypeInputs], Archetype]], ...]] = (
    (lambda i: i.is_pitcher, lambda i: PITCHER),
    (_is_power, lambda i: POWER_PLATOON if i.left_or_switch else POWER),
    (_is_speed, lambda i: SPEED),
    (_is_contact_speed, lambda i: CONTACT_SPEED),
    (_is_defense, lambda i: DEFENSE),
    (_is_utility, lambda i: UTILITY),
    (lambda i: True, lambda i: STANDARD_LEFT if i.left_or_switch else STANDARD_RIGHT),
)


def classify(inputs: ArchetypeInputs) -> Archetype:
    for predicate, resolve in ARCHETYPE_RULES:
        if predicate(inputs):
            return resolve(inputs)
    return STANDARD_LEFT if inputs.left_or_switch else STANDARD_RIGHT


def determine_archetype(
    stats: BattingStats,
    batting_hand: BattingHand,
    is_pitcher: bool,
    primary_position: Position,
    sb_success_rate: float,
    is_elite_defense: bool,
    eligible_position_count: int,
) -> Archetype:
    archetype = classify(
        ArchetypeInputs(
            stats=stats,
            batting_hand=batting_hand,
            is_pitcher=is_pitcher,
            primary_position=primary_position,
            sb_success_rate=sb_success_rate,
            is_elite_defense=is_elite_defense,
            eligible_position_count=eligible_position_count,
        )
    )
    logger.debug("Archetype %s (%d, %d)", archetype.kind, archetype.byte33, archetype.byte34)
    return archetype


def is_elite_fielder(fielding_pct: float, primary_position: Position) -> bool:
    if primary_position not in PREMIUM_DEFENSE_POSITIONS:
        return False
    return fielding_pct >= ELITE_FIELDING_PCT
