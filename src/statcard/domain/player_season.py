from dataclasses import dataclass, field
from typing import Literal

from statcard.domain.batting_stats import BattingStats
from statcard.domain.fielding import FieldingRecord
from statcard.domain.pitching_stats import PitchingStats

type BattingHand = Literal["L", "R", "S"]
type ThrowingHand = Literal["L", "R"]


@dataclass(frozen=True)
class PlayerSeason:
    """One player's aggregated season, as supplied by the ingestion layer."""

    player_id: str
    name_first: str
    name_last: str
    season: int
    batting_hand: BattingHand = "R"
    throwing_hand: ThrowingHand = "R"
    batting: BattingStats | None = None
    pitching: PitchingStats | None = None
    fielding: tuple[FieldingRecord, ...] = field(default_factory=tuple)
    qualifies_as_batter: bool = True
    qualifies_as_pitcher: bool = False

    @property
    def is_pitcher(self) -> bool:
        return self.qualifies_as_pitcher and not self.qualifies_as_batter

    @property
    def is_two_way(self) -> bool:
        return self.qualifies_as_pitcher and self.qualifies_as_batter
