from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from statcard.domain.player_season import BattingHand, ThrowingHand

CARD_LENGTH = 35
POWER_POSITION = 24
ARCHETYPE_POSITIONS = (33, 34)

# A card value is a small outcome code in 0..42.
type CardValue = int
type Card = tuple[CardValue, ...]

type Position = Literal["C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH", "SP", "RP", "CL"]
type PitcherRole = Literal["SP", "RP", "CL"]


class ArchetypeKind(StrEnum):
    PITCHER = "pitcher"
    POWER_PLATOON = "power_platoon"
    POWER = "power"
    SPEED = "speed"
    CONTACT_SPEED = "contact_speed"
    DEFENSE = "defense"
    UTILITY = "utility"
    STANDARD = "standard"


@dataclass(frozen=True)
class Archetype:
    """Player archetype stored in card bytes 33 and 34."""

    byte33: int
    byte34: int
    kind: ArchetypeKind = ArchetypeKind.STANDARD

    @property
    def values(self) -> tuple[int, int]:
        return (self.byte33, self.byte34)


@dataclass(frozen=True)
class PitcherAttributes:
    role: PitcherRole
    grade: int
    stamina: float
    era: float
    whip: float
    k9: float
    bb9: float
    hr9: float
    usage_flags: tuple[str, ...] = ()

    @property
    def is_reliever(self) -> bool:
        return self.role in ("RP", "CL")


@dataclass(frozen=True)
class PlayerCard:
    player_id: str
    name_first: str
    name_last: str
    season: int
    batting_hand: BattingHand
    throwing_hand: ThrowingHand
    primary_position: Position
    eligible_positions: tuple[Position, ...]
    is_pitcher: bool
    card: Card
    power_rating: int
    archetype: Archetype
    speed: float = 0.0
    power: float = 0.0
    discipline: float = 0.0
    contact_rate: float = 0.0
    fielding_pct: float = 0.0
    range: float = 0.0
    arm: float = 0.0
    pitching: PitcherAttributes | None = None

    @property
    def name(self) -> str:
        return f"{self.name_first} {self.name_last}"
