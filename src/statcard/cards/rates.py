from dataclasses import dataclass

from statcard.domain.batting_stats import BattingStats

DEFAULT_BABIP = 0.300


@dataclass(frozen=True)
class PlayerRates:
    """Per-plate-appearance rates for one player-season."""

    pa: int
    walk_rate: float
    strikeout_rate: float
    home_run_rate: float
    single_rate: float
    double_rate: float
    triple_rate: float
    hbp_rate: float
    sf_rate: float
    sh_rate: float
    gdp_rate: float
    steal_rate: float
    sb_success_rate: float
    iso: float
    babip: float


def _per_pa(count: int, pa: int) -> float:
    return count / pa if pa > 0 else 0.0


def compute_babip(stats: BattingStats) -> float:
    """BABIP = (H - HR) / (AB - SO - HR + SF); league-typical .300 when undefined."""
    denom = stats.ab - stats.so - stats.hr + stats.sf
    if denom <= 0:
        return DEFAULT_BABIP
    return (stats.h - stats.hr) / denom


def compute_sb_success_rate(stats: BattingStats) -> float:
    attempts = stats.sb + stats.cs
    return stats.sb / attempts if attempts > 0 else 0.0


def compute_player_rates(stats: BattingStats) -> PlayerRates:
    pa = stats.pa
    return PlayerRates(
        pa=pa,
        walk_rate=_per_pa(stats.bb, pa),
        strikeout_rate=_per_pa(stats.so, pa),
        home_run_rate=_per_pa(stats.hr, pa),
        # Bad source data can report fewer hits than extra-base hits
        single_rate=_per_pa(max(0, stats.singles), pa),
        double_rate=_per_pa(stats.doubles, pa),
        triple_rate=_per_pa(stats.triples, pa),
        hbp_rate=_per_pa(stats.hbp, pa),
        sf_rate=_per_pa(stats.sf, pa),
        sh_rate=_per_pa(stats.sh, pa),
        gdp_rate=_per_pa(stats.gdp, pa),
        steal_rate=_per_pa(stats.sb, pa),
        sb_success_rate=compute_sb_success_rate(stats),
        iso=stats.iso if pa > 0 else 0.0,
        babip=compute_babip(stats),
    )
