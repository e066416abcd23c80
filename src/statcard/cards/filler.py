from collections.abc import Iterator, Sequence
from itertools import cycle

from statcard.cards import values
from statcard.cards.allocation import SlotAllocation, split_singles_tiers
from statcard.cards.builder import CardBuilder
from statcard.cards.structural import VARIABLE_POSITIONS
from statcard.domain.card import CardValue


def _variants(options: Sequence[CardValue], count: int) -> Iterator[CardValue]:
    for i in range(count):
        yield options[min(i, len(options) - 1)]


def _planned_values(allocation: SlotAllocation, babip: float) -> Iterator[CardValue]:
    high, mid, low = split_singles_tiers(allocation.singles, babip)
    yield from [values.WALK] * allocation.walks
    yield from [values.STRIKEOUT] * allocation.strikeouts
    yield from _variants(values.HOME_RUN_VALUES, allocation.home_runs)
    yield from [values.SINGLE_HIGH] * high
    yield from [values.SINGLE_MID] * mid
    yield from [values.SINGLE_LOW] * low
    yield from [values.DOUBLE] * allocation.doubles
    yield from _variants(values.TRIPLE_VALUES, allocation.triples)
    yield from _variants(values.SPEED_VALUES, allocation.speed)


def fill_variable_positions(builder: CardBuilder, allocation: SlotAllocation, babip: float) -> CardBuilder:
    """Write allocated outcome values over the 26 variable positions in ascending order.

    Stage order is walks, strikeouts, home runs, singles (high, mid, low),
    doubles, triples, speed. Every position left over cycles through the four
    out codes, so no variable slot stays unfilled.
    """
    positions = iter(VARIABLE_POSITIONS)
    # Planned values go first in zip so an exhausted plan never swallows a position.
    for value, position in zip(_planned_values(allocation, babip), positions, strict=False):
        builder.write(position, value)
    outs = cycle(values.OUT_CYCLE)
    for position in positions:
        builder.write(position, next(outs))
    return builder
