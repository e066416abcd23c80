"""Platoon handling for batter/pitcher handedness matchups.

``apply_platoon_adjustment`` is the card-substitution form applied just before
a draw. ``platoon_grade_adjustment`` is the grade-layer form, where a
same-handed pitcher gets a grade bump instead.
"""

from typing import Final

from statcard.cards import values
from statcard.cards.structural import is_structural_position
from statcard.domain.card import Card, CardValue
from statcard.domain.player_season import BattingHand, ThrowingHand

OUT_VALUES: Final[frozenset[CardValue]] = frozenset(values.OUT_CYCLE)
HIT_VALUE: Final = values.SINGLE_MID
STRIKEOUT_VALUE: Final = values.STRIKEOUT
CONTACT_VALUE: Final = values.SINGLE_LOW


def has_platoon_advantage(batter_hand: BattingHand, pitcher_hand: ThrowingHand) -> bool:
    if batter_hand == "S":
        return True
    return batter_hand != pitcher_hand


def _replace_first(card: list[CardValue], targets: frozenset[CardValue], replacement: CardValue) -> None:
    for position, value in enumerate(card):
        if not is_structural_position(position) and value in targets:
            card[position] = replacement
            return


def apply_platoon_adjustment(card: Card, batter_hand: BattingHand, pitcher_hand: ThrowingHand) -> Card:
    """Return a new card with the platoon substitution applied.

    On an advantage the first out-coded slot becomes a single and the first
    strikeout becomes a weak-contact single. The input card is never modified.
    """
    adjusted = list(card)
    if has_platoon_advantage(batter_hand, pitcher_hand):
        _replace_first(adjusted, OUT_VALUES, HIT_VALUE)
        _replace_first(adjusted, frozenset({STRIKEOUT_VALUE}), CONTACT_VALUE)
    return tuple(adjusted)


def platoon_grade_adjustment(batter_hand: BattingHand, pitcher_hand: ThrowingHand, platoon_value: int) -> int:
    """Grade bump a pitcher gets against a same-handed batter; 0 otherwise."""
    if batter_hand == "S":
        return 0
    return platoon_value if batter_hand == pitcher_hand else 0
