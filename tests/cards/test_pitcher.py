import pytest

from statcard.cards import values
from statcard.cards.pitcher import (
    build_pitcher_attributes,
    compute_stamina,
    default_pitcher_card,
    determine_pitcher_role,
    determine_usage_flags,
    generate_pitcher_batting_card,
)
from statcard.cards.structural import STRUCTURAL_VALUES, VARIABLE_POSITIONS
from statcard.domain.pitching_stats import PitchingStats


def _make_pitching(**overrides: float) -> PitchingStats:
    defaults: dict[str, float] = {"g": 32, "gs": 32, "ip": 200.0, "h": 180, "er": 80, "hr": 20, "bb": 60, "so": 180}
    defaults.update(overrides)
    return PitchingStats(**defaults)  # type: ignore[arg-type]


class TestPitcherBattingCard:
    def test_counts(self) -> None:
        card = generate_pitcher_batting_card()
        variable = [card[p] for p in VARIABLE_POSITIONS if p not in (24, 33, 34)]
        assert len(card) == 35
        assert card.count(values.WALK) >= 13
        assert variable.count(values.STRIKEOUT) == 4

    def test_archetype_and_power(self) -> None:
        card = generate_pitcher_batting_card()
        assert (card[33], card[34]) == (0, 6)
        assert card[24] == values.NO_POWER

    def test_structural_constants(self) -> None:
        card = generate_pitcher_batting_card()
        for position, value in STRUCTURAL_VALUES.items():
            assert card[position] == value

    def test_walks_spread_out(self) -> None:
        card = generate_pitcher_batting_card()
        assert card[0] == values.WALK
        assert card[4] != values.WALK

    def test_deterministic(self) -> None:
        assert generate_pitcher_batting_card() == generate_pitcher_batting_card()


class TestPitcherRole:
    def test_starter(self) -> None:
        assert determine_pitcher_role(_make_pitching()) == "SP"

    def test_closer(self) -> None:
        assert determine_pitcher_role(_make_pitching(g=60, gs=0, sv=30)) == "CL"

    def test_reliever(self) -> None:
        assert determine_pitcher_role(_make_pitching(g=60, gs=2)) == "RP"

    def test_no_games(self) -> None:
        assert determine_pitcher_role(PitchingStats()) == "RP"


class TestStaminaAndFlags:
    def test_stamina_uses_decimal_innings(self) -> None:
        assert compute_stamina(_make_pitching(g=3, ip=20.1)) == pytest.approx((20 + 1 / 3) / 3)

    def test_stamina_zero_games(self) -> None:
        assert compute_stamina(PitchingStats()) == 0.0

    def test_strikeout_flag(self) -> None:
        assert "strikeout" in determine_usage_flags(_make_pitching(so=250))

    def test_groundball_flag(self) -> None:
        assert "groundball" in determine_usage_flags(_make_pitching(hr=5, h=220, bb=70))

    def test_flyball_flag(self) -> None:
        assert "flyball" in determine_usage_flags(_make_pitching(hr=35))

    def test_no_innings(self) -> None:
        assert determine_usage_flags(PitchingStats()) == ()


class TestBuildPitcherAttributes:
    def test_fields(self) -> None:
        attrs = build_pitcher_attributes(_make_pitching(), [2.0, 3.0, 4.0, 5.0])
        assert attrs.role == "SP"
        assert attrs.era == pytest.approx(3.6)
        assert attrs.whip == pytest.approx(1.2)
        assert attrs.k9 == pytest.approx(8.1)
        assert attrs.bb9 == pytest.approx(2.7)
        assert attrs.hr9 == pytest.approx(0.9)
        assert 1 <= attrs.grade <= 22
        assert not attrs.is_reliever

    def test_zero_innings(self) -> None:
        attrs = build_pitcher_attributes(PitchingStats(g=1), [])
        assert attrs.era == 0.0
        assert attrs.k9 == 0.0


class TestDefaultPitcherCard:
    def test_replacement_starter(self) -> None:
        card = default_pitcher_card(1971)
        assert card.is_pitcher
        assert card.season == 1971
        assert card.primary_position == "SP"
        assert card.pitching is not None
        assert card.pitching.grade == 9
        assert len(card.card) == 35
