"""Structural constants of the 35-slot card.

Nine positions carry the same value regardless of player on 99%+ of imported
legacy records. They are never drawn as outcomes and no later stage may
overwrite them.
"""

from types import MappingProxyType

from statcard.domain.card import CARD_LENGTH, CardValue

STRUCTURAL_VALUES: MappingProxyType[int, CardValue] = MappingProxyType(
    {
        1: 30,
        3: 28,
        6: 27,
        11: 26,
        13: 31,
        18: 29,
        23: 25,
        25: 32,
        32: 35,
    }
)

STRUCTURAL_POSITIONS: tuple[int, ...] = tuple(sorted(STRUCTURAL_VALUES))

VARIABLE_POSITIONS: tuple[int, ...] = tuple(i for i in range(CARD_LENGTH) if i not in STRUCTURAL_VALUES)

VARIABLE_COUNT = len(VARIABLE_POSITIONS)


def apply_structural_constants(buffer: list[CardValue]) -> list[CardValue]:
    """Write the nine structural values into ``buffer`` in place and return it."""
    for position, value in STRUCTURAL_VALUES.items():
        buffer[position] = value
    return buffer


def is_structural_position(position: int) -> bool:
    return position in STRUCTURAL_VALUES


def variable_positions() -> list[int]:
    """The 26 non-structural positions, ascending."""
    return list(VARIABLE_POSITIONS)
