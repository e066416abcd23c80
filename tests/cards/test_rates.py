import pytest

from statcard.cards.rates import DEFAULT_BABIP, compute_babip, compute_player_rates, compute_sb_success_rate
from statcard.domain.batting_stats import BattingStats


def _make_stats(**overrides: int) -> BattingStats:
    defaults: dict[str, int] = {
        "g": 150,
        "ab": 500,
        "h": 150,
        "doubles": 30,
        "triples": 2,
        "hr": 20,
        "bb": 60,
        "so": 90,
        "sb": 5,
    }
    defaults.update(overrides)
    return BattingStats(**defaults)


class TestComputePlayerRates:
    def test_rates_per_plate_appearance(self) -> None:
        rates = compute_player_rates(_make_stats())
        assert rates.pa == 560
        assert rates.walk_rate == pytest.approx(60 / 560)
        assert rates.strikeout_rate == pytest.approx(90 / 560)
        assert rates.home_run_rate == pytest.approx(20 / 560)
        assert rates.single_rate == pytest.approx(98 / 560)
        assert rates.double_rate == pytest.approx(30 / 560)
        assert rates.triple_rate == pytest.approx(2 / 560)
        assert rates.steal_rate == pytest.approx(5 / 560)

    def test_iso(self) -> None:
        rates = compute_player_rates(_make_stats())
        assert rates.iso == pytest.approx(0.188)

    def test_zero_pa_gives_zero_rates(self) -> None:
        rates = compute_player_rates(BattingStats())
        assert rates.pa == 0
        assert rates.walk_rate == 0.0
        assert rates.single_rate == 0.0
        assert rates.iso == 0.0
        assert rates.babip == DEFAULT_BABIP

    def test_negative_singles_clamped(self) -> None:
        rates = compute_player_rates(_make_stats(h=10, doubles=8, triples=2, hr=5))
        assert rates.single_rate == 0.0

    def test_extra_rates(self) -> None:
        rates = compute_player_rates(_make_stats(hbp=5, sf=4, sh=1, gdp=10))
        assert rates.pa == 570
        assert rates.hbp_rate == pytest.approx(5 / 570)
        assert rates.sf_rate == pytest.approx(4 / 570)
        assert rates.sh_rate == pytest.approx(1 / 570)
        assert rates.gdp_rate == pytest.approx(10 / 570)


class TestBabip:
    def test_formula(self) -> None:
        assert compute_babip(_make_stats()) == pytest.approx(130 / 390)

    def test_default_when_undefined(self) -> None:
        assert compute_babip(_make_stats(ab=10, so=10, hr=0)) == DEFAULT_BABIP


class TestSbSuccessRate:
    def test_no_attempts(self) -> None:
        assert compute_sb_success_rate(_make_stats(sb=0, cs=0)) == 0.0

    def test_ratio(self) -> None:
        assert compute_sb_success_rate(_make_stats(sb=30, cs=10)) == pytest.approx(0.75)
