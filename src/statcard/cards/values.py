"""Card value codes written by the generator.

Each code was matched to an outcome by correlating imported legacy cards
against the players' real season lines.
"""

from typing import Final

WALK: Final = 13
STRIKEOUT: Final = 14
HOME_RUN: Final = 1
HOME_RUN_ALT1: Final = 5
HOME_RUN_ALT2: Final = 37
HOME_RUN_ALT3: Final = 41
SINGLE_HIGH: Final = 7
SINGLE_MID: Final = 8
SINGLE_LOW: Final = 9
DOUBLE: Final = 0
TRIPLE_1: Final = 10
TRIPLE_2: Final = 11
SB_OPPORTUNITY: Final = 21
SPEED_1: Final = 23
SPEED_2: Final = 36
OUT_GROUND: Final = 30
OUT_CONTACT: Final = 26
OUT_NONWALK: Final = 31
OUT_FLY: Final = 24
NO_POWER: Final = 13

# Variant lists: allocations larger than the list repeat the last entry.
HOME_RUN_VALUES: Final = (HOME_RUN, HOME_RUN_ALT1, HOME_RUN_ALT2, HOME_RUN_ALT3)
TRIPLE_VALUES: Final = (TRIPLE_1, TRIPLE_2)
SPEED_VALUES: Final = (SB_OPPORTUNITY, SPEED_1, SPEED_2)
OUT_CYCLE: Final = (OUT_GROUND, OUT_CONTACT, OUT_NONWALK, OUT_FLY)

# Values drawn at these codes are settled by the downstream grade gate.
GRADE_GATE_LOW: Final = 15
GRADE_GATE_HIGH: Final = 23


def is_grade_gated(value: int) -> bool:
    return GRADE_GATE_LOW <= value <= GRADE_GATE_HIGH
