import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from statcard.domain.errors import LegacyFormatError
from statcard.domain.result import Err, Ok, Result
from statcard.legacy.records import (
    NSTAT_RECORD_SIZE,
    PLAYERS_RECORD_SIZE,
    PSTAT_RECORD_SIZE,
    LegacyBattingStats,
    LegacyPitchingStats,
    LegacyPlayerRecord,
    parse_nstat,
    parse_players,
    parse_pstat,
)

logger = logging.getLogger(__name__)

PLAYERS_FILE: Final = "PLAYERS.DAT"
NSTAT_FILE: Final = "NSTAT.DAT"
PSTAT_FILE: Final = "PSTAT.DAT"


@dataclass(frozen=True)
class LegacySeason:
    players: list[LegacyPlayerRecord]
    batting: list[LegacyBattingStats]
    pitching: list[LegacyPitchingStats]


def _read(directory: Path, file_name: str, record_size: int, *, required: bool) -> bytes | LegacyFormatError:
    path = directory / file_name
    if not path.exists():
        if required:
            return LegacyFormatError(f"Missing {file_name} in {directory}", file_name, record_size)
        logger.debug("%s not present in %s", file_name, directory)
        return b""
    data = path.read_bytes()
    if len(data) % record_size != 0:
        return LegacyFormatError(
            f"{file_name} size {len(data)} is not a multiple of {record_size}", file_name, record_size
        )
    return data


def load_legacy_season(directory: Path) -> Result[LegacySeason, LegacyFormatError]:
    """Read PLAYERS.DAT plus the optional NSTAT.DAT and PSTAT.DAT from a season directory."""
    players = _read(directory, PLAYERS_FILE, PLAYERS_RECORD_SIZE, required=True)
    if isinstance(players, LegacyFormatError):
        return Err(players)
    batting = _read(directory, NSTAT_FILE, NSTAT_RECORD_SIZE, required=False)
    if isinstance(batting, LegacyFormatError):
        return Err(batting)
    pitching = _read(directory, PSTAT_FILE, PSTAT_RECORD_SIZE, required=False)
    if isinstance(pitching, LegacyFormatError):
        return Err(pitching)

    season = LegacySeason(
        players=parse_players(players),
        batting=parse_nstat(batting),
        pitching=parse_pstat(pitching),
    )
    logger.debug(
        "Loaded %s: %d players, %d batting, %d pitching records",
        directory,
        len(season.players),
        len(season.batting),
        len(season.pitching),
    )
    return Ok(season)
