"""JSON serializers for card generator inputs and outputs.

Usage:
    serializer = PlayerCardSerializer()
    text = serializer.serialize(cards)
    cards = serializer.deserialize(text)
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import Archetype, ArchetypeKind, PitcherAttributes, PlayerCard
from statcard.domain.errors import InputError
from statcard.domain.fielding import FieldingRecord
from statcard.domain.pitching_stats import PitchingStats
from statcard.domain.player_season import PlayerSeason
from statcard.domain.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Sequence


class DataclassListSerializer[T]:
    """Serializer for lists of frozen dataclasses.

    JSON round-trips tuples as lists; fields named in ``tuple_fields`` are
    converted back on load. Subclasses rebuild nested dataclasses in
    ``_from_dict``.
    """

    def __init__(self, dataclass_type: type[T], *, tuple_fields: tuple[str, ...] = ()) -> None:
        if not is_dataclass(dataclass_type):  # pyright: ignore[reportUnnecessaryComparison]
            raise TypeError(f"{dataclass_type} is not a dataclass")
        self._dataclass_type = dataclass_type
        self._field_names = {f.name for f in fields(dataclass_type)}
        self._tuple_fields = tuple_fields

    def serialize(self, value: Sequence[T]) -> str:
        return json.dumps([self._to_dict(item) for item in value], indent=2)

    def deserialize(self, data: str) -> list[T]:
        raw_list = json.loads(data)
        if not isinstance(raw_list, list):
            raise ValueError("expected a JSON list")
        return [self._from_dict(item) for item in raw_list]

    def _to_dict(self, obj: T) -> dict[str, Any]:
        if not is_dataclass(obj):
            raise TypeError(f"{obj} is not a dataclass instance")
        return asdict(obj)  # type: ignore[arg-type]

    def _from_dict(self, data: dict[str, Any]) -> T:
        # Unknown keys (e.g. derived properties written by other tools) are dropped.
        kwargs = {k: v for k, v in data.items() if k in self._field_names}
        for field_name in self._tuple_fields:
            if isinstance(kwargs.get(field_name), list):
                kwargs[field_name] = tuple(kwargs[field_name])
        return self._dataclass_type(**kwargs)


class PlayerSeasonSerializer(DataclassListSerializer[PlayerSeason]):
    def __init__(self) -> None:
        super().__init__(PlayerSeason)

    def _from_dict(self, data: dict[str, Any]) -> PlayerSeason:
        data = dict(data)
        if data.get("batting") is not None:
            data["batting"] = BattingStats(**data["batting"])
        if data.get("pitching") is not None:
            data["pitching"] = PitchingStats(**data["pitching"])
        data["fielding"] = tuple(FieldingRecord(**f) for f in data.get("fielding", ()))
        return super()._from_dict(data)


class PlayerCardSerializer(DataclassListSerializer[PlayerCard]):
    def __init__(self) -> None:
        super().__init__(PlayerCard, tuple_fields=("card", "eligible_positions"))

    def _from_dict(self, data: dict[str, Any]) -> PlayerCard:
        data = dict(data)
        archetype = data["archetype"]
        data["archetype"] = Archetype(
            byte33=archetype["byte33"],
            byte34=archetype["byte34"],
            kind=ArchetypeKind(archetype.get("kind", ArchetypeKind.STANDARD)),
        )
        if data.get("pitching") is not None:
            pitching = dict(data["pitching"])
            pitching["usage_flags"] = tuple(pitching.get("usage_flags", ()))
            data["pitching"] = PitcherAttributes(**pitching)
        return super()._from_dict(data)


def read_player_seasons(path: Path) -> Result[list[PlayerSeason], InputError]:
    try:
        text = path.read_text()
    except OSError as e:
        return Err(InputError(f"Cannot read {path}: {e}", str(path)))
    try:
        return Ok(PlayerSeasonSerializer().deserialize(text))
    except (ValueError, TypeError, KeyError) as e:
        return Err(InputError(f"Malformed player seasons in {path}: {e}", str(path)))


def read_player_cards(path: Path) -> Result[list[PlayerCard], InputError]:
    try:
        text = path.read_text()
    except OSError as e:
        return Err(InputError(f"Cannot read {path}: {e}", str(path)))
    try:
        return Ok(PlayerCardSerializer().deserialize(text))
    except (ValueError, TypeError, KeyError) as e:
        return Err(InputError(f"Malformed player cards in {path}: {e}", str(path)))
