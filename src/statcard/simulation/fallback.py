"""Direct card-value to outcome mapping.

Used when the outcome-table lookup cannot resolve a draw after repeated
attempts, and by the card generator to tell which archetype bytes count as
hits. Codes with no entry (structural constants, unused values) resolve to a
ground out.
"""

from types import MappingProxyType

from statcard.domain.outcome import OutcomeCategory

CARD_VALUE_TO_OUTCOME: MappingProxyType[int, OutcomeCategory] = MappingProxyType(
    {
        0: OutcomeCategory.DOUBLE,
        1: OutcomeCategory.HOME_RUN,
        5: OutcomeCategory.HOME_RUN_VARIANT,
        7: OutcomeCategory.SINGLE_CLEAN,
        8: OutcomeCategory.SINGLE_CLEAN,
        9: OutcomeCategory.SINGLE_ADVANCE,
        10: OutcomeCategory.TRIPLE,
        11: OutcomeCategory.TRIPLE,
        13: OutcomeCategory.WALK,
        14: OutcomeCategory.STRIKEOUT_SWINGING,
        21: OutcomeCategory.STOLEN_BASE_OPP,
        22: OutcomeCategory.FLY_OUT,
        23: OutcomeCategory.STOLEN_BASE_OPP,
        24: OutcomeCategory.LINE_OUT,
        26: OutcomeCategory.GROUND_OUT,
        30: OutcomeCategory.GROUND_OUT_ADVANCE,
        31: OutcomeCategory.FLY_OUT,
        36: OutcomeCategory.STOLEN_BASE_OPP,
        37: OutcomeCategory.HOME_RUN_VARIANT,
        40: OutcomeCategory.REACHED_ON_ERROR,
        41: OutcomeCategory.HOME_RUN_VARIANT,
        42: OutcomeCategory.SPECIAL_EVENT,
    }
)

DEFAULT_OUTCOME = OutcomeCategory.GROUND_OUT


def is_card_value_mapped(card_value: int) -> bool:
    return card_value in CARD_VALUE_TO_OUTCOME


def direct_outcome(card_value: int) -> OutcomeCategory:
    return CARD_VALUE_TO_OUTCOME.get(card_value, DEFAULT_OUTCOME)
