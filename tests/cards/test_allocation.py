import itertools

import pytest

from statcard.cards.allocation import (
    SlotAllocation,
    archetype_hit_contributions,
    compute_slot_allocation,
    round_half_up,
    speed_slots,
    split_singles_tiers,
)
from statcard.cards.archetype import PITCHER, POWER, STANDARD_LEFT, STANDARD_RIGHT
from statcard.domain.card import Archetype
from statcard.cards.rates import PlayerRates, compute_player_rates
from statcard.domain.batting_stats import BattingStats


def _make_rates(**overrides: float) -> PlayerRates:
    defaults: dict[str, float] = {
        "pa": 600,
        "walk_rate": 0.0,
        "strikeout_rate": 0.0,
        "home_run_rate": 0.0,
        "single_rate": 0.0,
        "double_rate": 0.0,
        "triple_rate": 0.0,
        "hbp_rate": 0.0,
        "sf_rate": 0.0,
        "sh_rate": 0.0,
        "gdp_rate": 0.0,
        "steal_rate": 0.0,
        "sb_success_rate": 0.0,
        "iso": 0.0,
        "babip": 0.300,
    }
    defaults.update(overrides)
    return PlayerRates(**defaults)  # type: ignore[arg-type]


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0), (-0.5, -1), (-1.4, -1)],
    )
    def test_rounds_half_away_from_zero(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestSpeedSlots:
    @pytest.mark.parametrize(
        ("steal_rate", "expected"),
        [(0.0, 0), (0.009, 0), (0.01, 1), (0.029, 1), (0.03, 2), (0.059, 2), (0.06, 3), (0.5, 3)],
    )
    def test_steps(self, steal_rate: float, expected: int) -> None:
        assert speed_slots(steal_rate) == expected


class TestArchetypeHitContributions:
    def test_power(self) -> None:
        contrib = archetype_hit_contributions(POWER)
        assert (contrib.home_runs, contrib.doubles, contrib.singles) == (1, 1, 0)

    def test_standard_right(self) -> None:
        contrib = archetype_hit_contributions(STANDARD_RIGHT)
        assert (contrib.home_runs, contrib.doubles, contrib.singles) == (0, 1, 1)

    def test_pitcher_second_byte_is_not_a_hit(self) -> None:
        contrib = archetype_hit_contributions(PITCHER)
        assert (contrib.home_runs, contrib.doubles, contrib.singles) == (0, 1, 0)

    def test_triple_byte_counts_as_triple(self) -> None:
        contrib = archetype_hit_contributions(Archetype(10, 0))
        assert (contrib.home_runs, contrib.doubles, contrib.triples, contrib.singles) == (0, 1, 1, 0)


class TestComputeSlotAllocation:
    def test_typical_power_hitter(self) -> None:
        stats = BattingStats(ab=500, h=150, doubles=30, triples=2, hr=20, bb=60, so=90, sb=5)
        allocation = compute_slot_allocation(compute_player_rates(stats), POWER)
        assert allocation == SlotAllocation(
            walks=3, strikeouts=4, home_runs=0, singles=5, doubles=0, triples=0, speed=0, outs=14
        )

    def test_empty_rates_are_all_outs(self) -> None:
        allocation = compute_slot_allocation(_make_rates(), STANDARD_LEFT)
        assert allocation == SlotAllocation()
        assert allocation.outs == 26

    def test_minimum_one_walk_and_strikeout(self) -> None:
        allocation = compute_slot_allocation(_make_rates(walk_rate=0.01, strikeout_rate=0.01), STANDARD_LEFT)
        assert allocation.walks == 1
        assert allocation.strikeouts == 1

    def test_archetype_triple_reduces_triples(self) -> None:
        allocation = compute_slot_allocation(_make_rates(triple_rate=1.4 / 26), Archetype(10, 0))
        assert allocation.triples == 0
        assert compute_slot_allocation(_make_rates(triple_rate=1.4 / 26), STANDARD_LEFT).triples == 1

    def test_archetype_contribution_never_negative(self) -> None:
        allocation = compute_slot_allocation(_make_rates(home_run_rate=0.001, double_rate=0.001), POWER)
        assert allocation.home_runs == 0
        assert allocation.doubles == 0

    def test_speed_slots_added(self) -> None:
        allocation = compute_slot_allocation(_make_rates(steal_rate=0.07), STANDARD_LEFT)
        assert allocation.speed == 3
        assert allocation.outs == 23

    def test_overflow_rescaled_below_cap(self) -> None:
        allocation = compute_slot_allocation(
            _make_rates(walk_rate=0.5, strikeout_rate=0.5, single_rate=0.5), STANDARD_LEFT
        )
        assert allocation.non_outs <= 25
        assert allocation.outs >= 1
        assert allocation.walks == allocation.strikeouts == 8

    def test_overflow_scales_by_whole_total_including_speed(self) -> None:
        # 13 walks + 10 singles + 3 speed = 26; scaling by 25/26 keeps the 13th walk.
        allocation = compute_slot_allocation(
            _make_rates(walk_rate=13.04 / 26, single_rate=9.6 / 26, steal_rate=0.07), STANDARD_LEFT
        )
        assert allocation == SlotAllocation(
            walks=13, strikeouts=0, home_runs=0, singles=9, doubles=0, triples=0, speed=3, outs=1
        )

    def test_overflow_keeps_speed(self) -> None:
        allocation = compute_slot_allocation(
            _make_rates(walk_rate=0.6, strikeout_rate=0.6, steal_rate=0.2), STANDARD_LEFT
        )
        assert allocation.speed == 3
        assert allocation.outs >= 1

    def test_sum_and_free_out_over_grid(self) -> None:
        levels = (0.0, 0.04, 0.2, 0.5, 1.0)
        for walk, strikeout, single, hr, steal in itertools.product(levels, repeat=5):
            rates = _make_rates(
                walk_rate=walk, strikeout_rate=strikeout, single_rate=single, home_run_rate=hr, steal_rate=steal
            )
            allocation = compute_slot_allocation(rates, STANDARD_RIGHT)
            assert allocation.total == 26
            assert allocation.outs >= 1
            assert min(
                allocation.walks,
                allocation.strikeouts,
                allocation.home_runs,
                allocation.singles,
                allocation.doubles,
                allocation.triples,
            ) >= 0


class TestSplitSinglesTiers:
    def test_zero(self) -> None:
        assert split_singles_tiers(0, 0.350) == (0, 0, 0)

    def test_high_babip(self) -> None:
        assert split_singles_tiers(5, 0.333) == (2, 2, 1)

    def test_low_babip(self) -> None:
        assert split_singles_tiers(5, 0.250) == (1, 2, 2)

    def test_single_single_falls_to_low(self) -> None:
        assert split_singles_tiers(1, 0.330) == (0, 0, 1)

    def test_tiers_sum_to_total(self) -> None:
        for total in range(0, 26):
            for babip in (0.200, 0.259, 0.280, 0.310, 0.400):
                high, mid, low = split_singles_tiers(total, babip)
                assert high + mid + low == total
                assert min(high, mid, low) >= 0
