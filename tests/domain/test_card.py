from statcard.cards.pitcher import default_pitcher_card
from statcard.domain.card import Archetype, ArchetypeKind, PitcherAttributes
from statcard.domain.player_season import PlayerSeason


class TestArchetype:
    def test_values(self) -> None:
        assert Archetype(6, 0, ArchetypeKind.SPEED).values == (6, 0)

    def test_default_kind(self) -> None:
        assert Archetype(3, 3).kind is ArchetypeKind.STANDARD


class TestPitcherAttributes:
    def test_is_reliever(self) -> None:
        base = {"grade": 9, "stamina": 1.0, "era": 3.0, "whip": 1.2, "k9": 8.0, "bb9": 3.0, "hr9": 1.0}
        assert PitcherAttributes(role="CL", **base).is_reliever  # type: ignore[arg-type]
        assert PitcherAttributes(role="RP", **base).is_reliever  # type: ignore[arg-type]
        assert not PitcherAttributes(role="SP", **base).is_reliever  # type: ignore[arg-type]


class TestPlayerCard:
    def test_name(self) -> None:
        assert default_pitcher_card().name == "Replacement Pitcher"


class TestPlayerSeason:
    def test_pitcher_flags(self) -> None:
        pure = PlayerSeason("p", "A", "B", 1971, qualifies_as_batter=False, qualifies_as_pitcher=True)
        two_way = PlayerSeason("t", "A", "B", 1971, qualifies_as_batter=True, qualifies_as_pitcher=True)
        batter = PlayerSeason("b", "A", "B", 1971)
        assert pure.is_pitcher and not pure.is_two_way
        assert two_way.is_two_way and not two_way.is_pitcher
        assert not batter.is_pitcher and not batter.is_two_way
