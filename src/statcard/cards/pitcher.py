"""Pitcher-specific card pieces: the batting card pitchers carry and their pitching attributes."""

from collections.abc import Sequence
from typing import Final

from statcard.cards import values
from statcard.cards.archetype import PITCHER
from statcard.cards.builder import CardBuilder
from statcard.cards.pitcher_grade import NEUTRAL_PERCENTILE, compute_pitcher_grade, percentile_to_grade
from statcard.cards.structural import VARIABLE_POSITIONS
from statcard.domain.card import Card, PitcherAttributes, PitcherRole, PlayerCard
from statcard.domain.pitching_stats import PitchingStats

PITCHER_WALK_COUNT: Final = 14
PITCHER_STRIKEOUT_COUNT: Final = 4
CLOSER_SAVES: Final = 10
STARTER_GS_SHARE: Final = 0.50


def generate_pitcher_batting_card() -> Card:
    """Build the fixed batting card every pitcher carries.

    Walks are spread with a fixed stride rather than packed at the front, as on
    legacy pitcher cards, then strikeouts take the first gaps and the out
    cycle fills the rest.
    """
    count = len(VARIABLE_POSITIONS)
    placed: list[int | None] = [None] * count

    stride = count / PITCHER_WALK_COUNT
    for i in range(PITCHER_WALK_COUNT):
        placed[int(i * stride) % count] = values.WALK

    strikeouts = 0
    for i in range(count):
        if strikeouts == PITCHER_STRIKEOUT_COUNT:
            break
        if placed[i] is None:
            placed[i] = values.STRIKEOUT
            strikeouts += 1

    out_index = 0
    for i in range(count):
        if placed[i] is None:
            placed[i] = values.OUT_CYCLE[out_index % len(values.OUT_CYCLE)]
            out_index += 1

    builder = CardBuilder()
    for position, value in zip(VARIABLE_POSITIONS, placed, strict=True):
        builder.write(position, value if value is not None else values.OUT_GROUND)
    builder.set_archetype(PITCHER)
    builder.set_power(values.NO_POWER)
    return builder.build()


def determine_pitcher_role(stats: PitchingStats) -> PitcherRole:
    if stats.g == 0:
        return "RP"
    if stats.sv >= CLOSER_SAVES:
        return "CL"
    if stats.gs / stats.g >= STARTER_GS_SHARE:
        return "SP"
    return "RP"


def compute_stamina(stats: PitchingStats) -> float:
    """Average decimal innings per appearance."""
    if stats.g == 0:
        return 0.0
    return stats.decimal_ip / stats.g


def determine_usage_flags(stats: PitchingStats) -> tuple[str, ...]:
    innings = stats.decimal_ip
    if innings == 0:
        return ()

    flags: list[str] = []
    k9 = 9 * stats.so / innings
    if k9 > 9.0:
        flags.append("strikeout")

    # No batted-ball splits in the season line: HR/9 and WHIP stand in for GB/FB.
    hr9 = 9 * stats.hr / innings
    if hr9 < 0.5 and stats.whip > 1.2:
        flags.append("groundball")
    elif hr9 > 1.2:
        flags.append("flyball")
    return tuple(flags)


def build_pitcher_attributes(stats: PitchingStats, all_pitcher_eras: Sequence[float]) -> PitcherAttributes:
    innings = stats.decimal_ip
    return PitcherAttributes(
        role=determine_pitcher_role(stats),
        grade=compute_pitcher_grade(stats.era, all_pitcher_eras),
        stamina=compute_stamina(stats),
        era=stats.era,
        whip=stats.whip,
        k9=9 * stats.so / innings if innings > 0 else 0.0,
        bb9=9 * stats.bb / innings if innings > 0 else 0.0,
        hr9=9 * stats.hr / innings if innings > 0 else 0.0,
        usage_flags=determine_usage_flags(stats),
    )


def default_pitcher_card(season: int = 0) -> PlayerCard:
    """A league-average replacement starter for rotations with no real pitcher."""
    return PlayerCard(
        player_id="default_pitcher",
        name_first="Replacement",
        name_last="Pitcher",
        season=season,
        batting_hand="R",
        throwing_hand="R",
        primary_position="SP",
        eligible_positions=("SP",),
        is_pitcher=True,
        card=generate_pitcher_batting_card(),
        power_rating=values.NO_POWER,
        archetype=PITCHER,
        pitching=PitcherAttributes(
            role="SP",
            grade=percentile_to_grade(NEUTRAL_PERCENTILE),
            stamina=6.0,
            era=4.50,
            whip=1.35,
            k9=6.0,
            bb9=3.0,
            hr9=1.0,
        ),
    )
