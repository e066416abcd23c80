from dataclasses import dataclass


@dataclass(frozen=True)
class BattingStats:
    """Aggregated season batting line (all stints combined)."""

    g: int = 0
    ab: int = 0
    r: int = 0
    h: int = 0
    doubles: int = 0
    triples: int = 0
    hr: int = 0
    rbi: int = 0
    sb: int = 0
    cs: int = 0
    bb: int = 0
    so: int = 0
    ibb: int = 0
    hbp: int = 0
    sh: int = 0
    sf: int = 0
    gdp: int = 0

    @property
    def pa(self) -> int:
        return self.ab + self.bb + self.hbp + self.sh + self.sf

    @property
    def singles(self) -> int:
        return self.h - self.doubles - self.triples - self.hr

    @property
    def avg(self) -> float:
        return self.h / self.ab if self.ab > 0 else 0.0

    @property
    def obp(self) -> float:
        denom = self.ab + self.bb + self.hbp + self.sf
        return (self.h + self.bb + self.hbp) / denom if denom > 0 else 0.0

    @property
    def slg(self) -> float:
        if self.ab <= 0:
            return 0.0
        total_bases = self.singles + 2 * self.doubles + 3 * self.triples + 4 * self.hr
        return total_bases / self.ab

    @property
    def ops(self) -> float:
        return self.obp + self.slg

    @property
    def iso(self) -> float:
        return self.slg - self.avg
