"""Derived player attributes carried on the card alongside the slot array.

All ratings are on a 0-1 scale.
"""

from collections.abc import Sequence
from typing import Final, cast

from statcard.cards.pitcher import CLOSER_SAVES, STARTER_GS_SHARE
from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import Position
from statcard.domain.fielding import FieldingRecord
from statcard.domain.pitching_stats import PitchingStats
from statcard.domain.player_season import PlayerSeason

ELIGIBLE_MIN_GAMES: Final = 5
SB_VOLUME_CAP: Final = 50
RANGE_ASSISTS_PER_GAME: Final = 5.0
ARM_METRIC_PER_GAME: Final = 8.0

_FIELD_POSITIONS: Final[frozenset[str]] = frozenset({"C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH"})


def _as_position(raw: str) -> Position:
    # Aggregated outfield rows ("OF") count as center field.
    if raw == "OF":
        return "CF"
    if raw == "P":
        return "RP"
    return cast("Position", raw) if raw in _FIELD_POSITIONS else "DH"


def _pitcher_position(stats: PitchingStats) -> Position:
    # Starters outrank closers here; PitcherAttributes.role checks saves first.
    if stats.g == 0:
        return "RP"
    if stats.gs / stats.g >= STARTER_GS_SHARE:
        return "SP"
    if stats.sv >= CLOSER_SAVES:
        return "CL"
    return "RP"


def determine_primary_position(entry: PlayerSeason) -> Position:
    if entry.is_pitcher and entry.pitching is not None:
        return _pitcher_position(entry.pitching)
    if not entry.fielding:
        return "DH"

    best_games = 0
    primary: Position = "DH"
    for record in entry.fielding:
        if record.g > best_games:
            best_games = record.g
            primary = _as_position(record.position)
    return primary


def determine_eligible_positions(entry: PlayerSeason, primary: Position) -> tuple[Position, ...]:
    positions: list[Position] = [primary]
    for record in entry.fielding:
        position = _as_position(record.position)
        if record.g >= ELIGIBLE_MIN_GAMES and position not in positions:
            positions.append(position)
    return tuple(positions)


def compute_fielding_pct(records: Sequence[FieldingRecord]) -> float:
    po = sum(r.po for r in records)
    a = sum(r.a for r in records)
    e = sum(r.e for r in records)
    chances = po + a + e
    return (po + a) / chances if chances > 0 else 0.0


def compute_range(records: Sequence[FieldingRecord]) -> float:
    games = sum(r.g for r in records)
    if games == 0:
        return 0.0
    assists_per_game = sum(r.a for r in records) / games
    return min(1.0, assists_per_game / RANGE_ASSISTS_PER_GAME)


def compute_arm(records: Sequence[FieldingRecord]) -> float:
    """Outfield assists and infield double plays, double plays weighted twice."""
    games = sum(r.g for r in records)
    if games == 0:
        return 0.0
    metric = (sum(r.a for r in records) + 2 * sum(r.dp for r in records)) / games
    return min(1.0, metric / ARM_METRIC_PER_GAME)


def compute_speed(stats: BattingStats | None) -> float:
    if stats is None or stats.pa == 0:
        return 0.0
    attempts = stats.sb + stats.cs
    success = stats.sb / attempts if attempts > 0 else 0.0
    volume = min(1.0, stats.sb / SB_VOLUME_CAP)
    triples = min(1.0, stats.triples / stats.pa * 20)
    return min(1.0, success * 0.4 + volume * 0.4 + triples * 0.2)


def compute_discipline(stats: BattingStats | None) -> float:
    if stats is None:
        return 0.0
    if stats.so == 0:
        return 1.0 if stats.bb > 0 else 0.0
    return min(1.0, stats.bb / stats.so)


def compute_contact_rate(stats: BattingStats | None) -> float:
    if stats is None or stats.pa == 0:
        return 0.0
    return max(0.0, 1 - stats.so / stats.pa)
