import json
from pathlib import Path

import pytest

from statcard.cards.generator import generate_card
from statcard.cards.pitcher import default_pitcher_card
from statcard.domain.batting_stats import BattingStats
from statcard.domain.card import ArchetypeKind
from statcard.domain.fielding import FieldingRecord
from statcard.domain.pitching_stats import PitchingStats
from statcard.domain.player_season import PlayerSeason
from statcard.domain.result import Err, Ok
from statcard.serialization import (
    DataclassListSerializer,
    PlayerCardSerializer,
    PlayerSeasonSerializer,
    read_player_cards,
    read_player_seasons,
)


def _make_season() -> PlayerSeason:
    return PlayerSeason(
        player_id="aaronha01",
        name_first="Hank",
        name_last="Aaron",
        season=1971,
        batting_hand="R",
        batting=BattingStats(g=139, ab=495, h=162, doubles=22, triples=3, hr=47, bb=71, so=58, sb=1, cs=1),
        pitching=None,
        fielding=(FieldingRecord("1B", g=71, po=600, a=40, e=4), FieldingRecord("RF", g=60, po=100, a=5, e=2)),
    )


class TestDataclassListSerializer:
    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError):
            DataclassListSerializer(int)

    def test_rejects_non_list_payload(self) -> None:
        with pytest.raises(ValueError):
            PlayerSeasonSerializer().deserialize('{"player_id": "x"}')


class TestPlayerSeasonSerializer:
    def test_round_trip(self) -> None:
        serializer = PlayerSeasonSerializer()
        season = _make_season()
        assert serializer.deserialize(serializer.serialize([season])) == [season]

    def test_pitching_restored(self) -> None:
        serializer = PlayerSeasonSerializer()
        season = PlayerSeason(
            player_id="p",
            name_first="A",
            name_last="B",
            season=1971,
            pitching=PitchingStats(g=30, gs=30, ip=200.1, er=70),
            qualifies_as_batter=False,
            qualifies_as_pitcher=True,
        )
        (restored,) = serializer.deserialize(serializer.serialize([season]))
        assert isinstance(restored.pitching, PitchingStats)
        assert restored.batting is None

    def test_minimal_input(self) -> None:
        (season,) = PlayerSeasonSerializer().deserialize(
            json.dumps([{"player_id": "x", "name_first": "A", "name_last": "B", "season": 1921}])
        )
        assert season.fielding == ()
        assert season.batting is None


class TestPlayerCardSerializer:
    def test_batter_round_trip(self) -> None:
        serializer = PlayerCardSerializer()
        card = generate_card(_make_season())
        (restored,) = serializer.deserialize(serializer.serialize([card]))
        assert restored == card
        assert isinstance(restored.card, tuple)
        assert restored.archetype.kind is ArchetypeKind.POWER

    def test_pitcher_round_trip(self) -> None:
        serializer = PlayerCardSerializer()
        card = default_pitcher_card(1971)
        (restored,) = serializer.deserialize(serializer.serialize([card]))
        assert restored == card
        assert restored.pitching is not None
        assert isinstance(restored.pitching.usage_flags, tuple)


class TestReadFiles:
    def test_read_player_seasons(self, tmp_path: Path) -> None:
        path = tmp_path / "seasons.json"
        path.write_text(PlayerSeasonSerializer().serialize([_make_season()]))
        result = read_player_seasons(path)
        assert isinstance(result, Ok)
        assert result.value[0].player_id == "aaronha01"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = read_player_seasons(tmp_path / "nope.json")
        assert isinstance(result, Err)
        assert result.error.source_path.endswith("nope.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = read_player_cards(path)
        assert isinstance(result, Err)
        assert "Malformed" in result.error.message
