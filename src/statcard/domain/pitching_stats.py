import math
from dataclasses import dataclass


def innings_to_decimal(ip: float) -> float:
    """Convert baseball-notation innings (6.2 = six and two thirds) to decimal innings."""
    full = math.floor(ip)
    partial_outs = round((ip - full) * 10)
    return full + partial_outs / 3


@dataclass(frozen=True)
class PitchingStats:
    """Aggregated season pitching line. ``ip`` uses baseball notation."""

    w: int = 0
    l: int = 0  # noqa: E741
    g: int = 0
    gs: int = 0
    cg: int = 0
    sho: int = 0
    sv: int = 0
    ip: float = 0.0
    h: int = 0
    r: int = 0
    er: int = 0
    hr: int = 0
    bb: int = 0
    so: int = 0
    hbp: int = 0

    @property
    def decimal_ip(self) -> float:
        return innings_to_decimal(self.ip)

    @property
    def era(self) -> float:
        innings = self.decimal_ip
        return 9 * self.er / innings if innings > 0 else 0.0

    @property
    def whip(self) -> float:
        innings = self.decimal_ip
        return (self.bb + self.h) / innings if innings > 0 else 0.0
