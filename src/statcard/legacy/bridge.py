"""Import legacy binary seasons as PlayerCards.

The 35 card bytes are used verbatim: archetype bytes 33/34 and the power slot
at 24 are read off the card, never re-derived. Only the derived attributes
and pitcher attributes are computed here.
"""

import dataclasses
import logging
import re
from collections.abc import Sequence
from typing import Final, cast

from statcard.cards import archetype as archetypes
from statcard.cards.attributes import compute_contact_rate, compute_discipline, compute_speed
from statcard.cards.pitcher import build_pitcher_attributes, default_pitcher_card
from statcard.cards.pitcher_grade import LEGACY_MAX_PITCHER_GRADE, compute_legacy_pitcher_grade
from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import ARCHETYPE_POSITIONS, POWER_POSITION, Archetype, PitcherAttributes, PlayerCard, Position
from statcard.domain.pitching_stats import PitchingStats
from statcard.domain.player_season import ThrowingHand
from statcard.legacy.records import LegacyBattingStats, LegacyPitchingStats, LegacyPlayerRecord

logger = logging.getLogger(__name__)

LEGACY_SEASON_DIRS: Final = {
    1921: "1921S.WDD",
    1943: "1943S.WDD",
    1971: "1971S.WDD",
}

# Pitcher position strings look like "L 14     Z": throwing hand, then grade.
_PITCHER_PATTERN: Final = re.compile(r"^([LR])\s+(\d+)")
_USAGE_LETTERS: Final = frozenset({"W", "X", "Y", "Z"})
_POSITION_TOKENS: Final[dict[str, Position]] = {
    "C": "C",
    "1B": "1B",
    "2B": "2B",
    "3B": "3B",
    "SS": "SS",
    "LF": "LF",
    "CF": "CF",
    "RF": "RF",
    "OF": "CF",
    "DH": "DH",
}

_KNOWN_ARCHETYPES: Final = {
    a.values: a
    for a in (
        archetypes.PITCHER,
        archetypes.POWER_PLATOON,
        archetypes.POWER,
        archetypes.SPEED,
        archetypes.CONTACT_SPEED,
        archetypes.DEFENSE,
        archetypes.UTILITY,
        archetypes.STANDARD_LEFT,
        archetypes.STANDARD_RIGHT,
    )
}


def legacy_season_years() -> list[int]:
    return sorted(LEGACY_SEASON_DIRS)


def legacy_years_in_range(year_start: int, year_end: int) -> list[int]:
    return [y for y in legacy_season_years() if year_start <= y <= year_end]


def is_legacy_pitcher(position_string: str) -> bool:
    return _PITCHER_PATTERN.match(position_string.strip()) is not None


def parse_pitcher_grade(position_string: str) -> int | None:
    """The grade printed in a pitcher's position string, or None when missing or off the 1-15 scale."""
    match = _PITCHER_PATTERN.match(position_string.strip())
    if match is None:
        return None
    grade = int(match.group(2))
    return grade if 1 <= grade <= LEGACY_MAX_PITCHER_GRADE else None


def parse_usage_letters(position_string: str) -> tuple[str, ...]:
    return tuple(token for token in position_string.split() if token in _USAGE_LETTERS)


def parse_positions(position_string: str) -> tuple[Position, ...]:
    positions: list[Position] = []
    for token in position_string.split():
        position = _POSITION_TOKENS.get(token.upper())
        if position is not None and position not in positions:
            positions.append(position)
    return tuple(positions)


def archetype_from_card(card: Sequence[int]) -> Archetype:
    pair = (card[ARCHETYPE_POSITIONS[0]], card[ARCHETYPE_POSITIONS[1]])
    known = _KNOWN_ARCHETYPES.get(pair)
    return known if known is not None else Archetype(*pair)


def to_batting_stats(stats: LegacyBattingStats) -> BattingStats:
    return BattingStats(
        g=stats.g,
        ab=stats.ab,
        r=stats.r,
        h=stats.h,
        doubles=stats.doubles,
        triples=stats.triples,
        hr=stats.hr,
        rbi=stats.rbi,
        sb=stats.sb,
        bb=stats.bb,
        so=stats.so,
        hbp=stats.hbp,
    )


def to_pitching_stats(stats: LegacyPitchingStats) -> PitchingStats:
    full, partial = divmod(stats.outs, 3)
    return PitchingStats(
        w=stats.w,
        l=stats.l,
        g=stats.g,
        gs=stats.gs,
        cg=stats.cg,
        sho=stats.sho,
        sv=stats.sv,
        ip=full + partial / 10,
        h=stats.h,
        r=stats.r,
        er=stats.er,
        hr=stats.hra,
        bb=stats.bb,
        so=stats.so,
    )


def _legacy_pitcher_attributes(
    record: LegacyPlayerRecord,
    pitching: LegacyPitchingStats | None,
    all_pitcher_eras: Sequence[float],
) -> PitcherAttributes:
    letters = parse_usage_letters(record.position_string)
    listed_grade = parse_pitcher_grade(record.position_string)

    if pitching is None:
        fallback = default_pitcher_card().pitching
        assert fallback is not None
        grade = listed_grade if listed_grade is not None else fallback.grade
        return dataclasses.replace(fallback, grade=grade, usage_flags=letters)

    attrs = build_pitcher_attributes(to_pitching_stats(pitching), all_pitcher_eras)
    grade = listed_grade
    if grade is None:
        grade = compute_legacy_pitcher_grade(pitching.era, all_pitcher_eras)
    return dataclasses.replace(attrs, grade=grade, era=pitching.era, usage_flags=attrs.usage_flags + letters)


def generate_card_from_legacy(
    record: LegacyPlayerRecord,
    batting: LegacyBattingStats | None,
    pitching: LegacyPitchingStats | None,
    season: int,
    all_pitcher_eras: Sequence[float] = (),
) -> PlayerCard:
    is_pitcher = is_legacy_pitcher(record.position_string)
    stats = to_batting_stats(batting) if batting is not None else None

    pitcher_attrs: PitcherAttributes | None = None
    throwing_hand: ThrowingHand = "R"
    if is_pitcher:
        pitcher_attrs = _legacy_pitcher_attributes(record, pitching, all_pitcher_eras)
        throwing_hand = cast("ThrowingHand", record.position_string.strip()[0])
        primary: Position = pitcher_attrs.role
        eligible: tuple[Position, ...] = (primary,)
    else:
        eligible = parse_positions(record.position_string) or ("DH",)
        primary = eligible[0]

    return PlayerCard(
        player_id=f"bbw_{season}_{record.index}",
        name_first=record.first_name,
        name_last=record.last_name.title(),
        season=season,
        batting_hand="R",
        throwing_hand=throwing_hand,
        primary_position=primary,
        eligible_positions=eligible,
        is_pitcher=is_pitcher,
        card=tuple(record.card),
        power_rating=record.card[POWER_POSITION],
        archetype=archetype_from_card(record.card),
        speed=compute_speed(stats),
        power=stats.iso if stats is not None else 0.0,
        discipline=compute_discipline(stats),
        contact_rate=compute_contact_rate(stats),
        pitching=pitcher_attrs,
    )


def run_legacy_pipeline(
    players: Sequence[LegacyPlayerRecord],
    batting: Sequence[LegacyBattingStats],
    pitching: Sequence[LegacyPitchingStats],
    season: int,
) -> list[PlayerCard]:
    """Convert a whole legacy season.

    Batting records line up 1:1 with players. Pitching records exist only for
    pitchers and are assigned in file order: the Nth pitcher in PLAYERS.DAT
    gets the Nth PSTAT record.
    """
    eras = [p.era for p in pitching if p.outs > 0]
    cards: list[PlayerCard] = []
    pstat_index = 0
    for i, record in enumerate(players):
        pitcher_stats = None
        if is_legacy_pitcher(record.position_string) and pstat_index < len(pitching):
            pitcher_stats = pitching[pstat_index]
            pstat_index += 1
        batting_stats = batting[i] if i < len(batting) else None
        cards.append(generate_card_from_legacy(record, batting_stats, pitcher_stats, season, eras))

    logger.info("Imported %d legacy cards for %d (%d pitching records used)", len(cards), season, pstat_index)
    return cards
