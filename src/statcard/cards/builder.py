from statcard.cards.structural import apply_structural_constants, is_structural_position
from statcard.domain.card import ARCHETYPE_POSITIONS, CARD_LENGTH, POWER_POSITION, Archetype, Card, CardValue

UNFILLED = -1


class StructuralWriteError(Exception):
    """Raised when a stage tries to overwrite a structural constant."""


class IncompleteCardError(Exception):
    """Raised when a card is finalized with slots still unfilled."""


class CardBuilder:
    """Owns a mutable card buffer until ``build()`` freezes it into a tuple.

    The buffer starts with every slot unfilled and the structural constants
    applied. After ``build()`` the builder refuses further writes.
    """

    def __init__(self) -> None:
        self._buffer: list[CardValue] = apply_structural_constants([UNFILLED] * CARD_LENGTH)
        self._built = False

    def __getitem__(self, position: int) -> CardValue:
        return self._buffer[position]

    def write(self, position: int, value: CardValue) -> None:
        if self._built:
            raise RuntimeError("card already built")
        if is_structural_position(position):
            raise StructuralWriteError(f"position {position} is a structural constant")
        self._buffer[position] = value

    def set_archetype(self, archetype: Archetype) -> None:
        for position, value in zip(ARCHETYPE_POSITIONS, archetype.values, strict=True):
            self.write(position, value)

    def set_power(self, power_rating: int) -> None:
        self.write(POWER_POSITION, power_rating)

    def unfilled_positions(self) -> list[int]:
        return [i for i, v in enumerate(self._buffer) if v == UNFILLED]

    def build(self) -> Card:
        missing = self.unfilled_positions()
        if missing:
            raise IncompleteCardError(f"unfilled card positions: {missing}")
        self._built = True
        return tuple(self._buffer)
