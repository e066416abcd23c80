"""Card generation pipeline: one PlayerSeason in, one PlayerCard out."""

import logging
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from statcard.cards import values
from statcard.cards.allocation import SlotAllocation, compute_slot_allocation
from statcard.cards.archetype import determine_archetype, is_elite_fielder
from statcard.cards.attributes import (
    compute_arm,
    compute_contact_rate,
    compute_discipline,
    compute_fielding_pct,
    compute_range,
    compute_speed,
    determine_eligible_positions,
    determine_primary_position,
)
from statcard.cards.builder import CardBuilder
from statcard.cards.filler import fill_variable_positions
from statcard.cards.pitcher import build_pitcher_attributes, generate_pitcher_batting_card
from statcard.cards.power import compute_power_rating
from statcard.cards.rates import DEFAULT_BABIP, compute_player_rates, compute_sb_success_rate
from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import Archetype, Card, PlayerCard
from statcard.domain.player_season import PlayerSeason

logger = logging.getLogger(__name__)


def qualifying_pitcher_eras(pool: Sequence[PlayerSeason], min_outs: int = 1) -> list[float]:
    """ERAs of every qualifying pitcher in the batch, for percentile grading."""
    return [
        entry.pitching.era
        for entry in pool
        if entry.qualifies_as_pitcher and entry.pitching is not None and entry.pitching.decimal_ip * 3 >= min_outs
    ]


def _batter_card(stats: BattingStats, archetype: Archetype) -> tuple[Card, int]:
    rates = compute_player_rates(stats)
    allocation = compute_slot_allocation(rates, archetype)
    builder = fill_variable_positions(CardBuilder(), allocation, rates.babip)
    builder.set_archetype(archetype)
    power_rating = compute_power_rating(rates.iso)
    builder.set_power(power_rating)
    return builder.build(), power_rating


def _empty_card(archetype: Archetype) -> tuple[Card, int]:
    builder = fill_variable_positions(CardBuilder(), SlotAllocation(), DEFAULT_BABIP)
    builder.set_archetype(archetype)
    power_rating = compute_power_rating(0.0)
    builder.set_power(power_rating)
    return builder.build(), power_rating


def generate_card(entry: PlayerSeason, all_pitcher_eras: Sequence[float] = ()) -> PlayerCard:
    primary = determine_primary_position(entry)
    eligible = determine_eligible_positions(entry, primary)
    fielding_pct = compute_fielding_pct(entry.fielding)
    batting = entry.batting

    archetype = determine_archetype(
        batting if batting is not None else BattingStats(),
        entry.batting_hand,
        entry.is_pitcher,
        primary,
        compute_sb_success_rate(batting) if batting is not None else 0.0,
        is_elite_fielder(fielding_pct, primary),
        len(eligible),
    )

    if entry.is_pitcher:
        card, power_rating = generate_pitcher_batting_card(), values.NO_POWER
    elif batting is not None:
        card, power_rating = _batter_card(batting, archetype)
    else:
        logger.warning("No batting line for %s (%d); using an all-out card", entry.player_id, entry.season)
        card, power_rating = _empty_card(archetype)

    pitching = None
    if entry.qualifies_as_pitcher and entry.pitching is not None:
        pitching = build_pitcher_attributes(entry.pitching, all_pitcher_eras)

    return PlayerCard(
        player_id=entry.player_id,
        name_first=entry.name_first,
        name_last=entry.name_last,
        season=entry.season,
        batting_hand=entry.batting_hand,
        throwing_hand=entry.throwing_hand,
        primary_position=primary,
        eligible_positions=eligible,
        is_pitcher=entry.is_pitcher,
        card=card,
        power_rating=power_rating,
        archetype=archetype,
        speed=compute_speed(batting),
        power=batting.iso if batting is not None else 0.0,
        discipline=compute_discipline(batting),
        contact_rate=compute_contact_rate(batting),
        fielding_pct=fielding_pct,
        range=compute_range(entry.fielding),
        arm=compute_arm(entry.fielding),
        pitching=pitching,
    )


def generate_all_cards(
    pool: Sequence[PlayerSeason],
    *,
    workers: int = 1,
    min_pitcher_outs: int = 1,
) -> list[PlayerCard]:
    """Generate cards for a whole batch.

    The ERA pool is computed before any card is built; with ``workers > 1``
    the per-player work runs on a process pool. Output order matches ``pool``.
    """
    eras = tuple(qualifying_pitcher_eras(pool, min_pitcher_outs))
    build = partial(generate_card, all_pitcher_eras=eras)

    if workers > 1 and len(pool) > 1:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            cards = list(executor.map(build, pool, chunksize=max(1, len(pool) // (workers * 4))))
    else:
        cards = [build(entry) for entry in pool]

    logger.info("Generated %d cards (%d pitchers in ERA pool)", len(cards), len(eras))
    return cards
