from dataclasses import dataclass


@dataclass(frozen=True)
class FieldingRecord:
    position: str
    g: int = 0
    gs: int = 0
    inn_outs: int = 0
    po: int = 0
    a: int = 0
    e: int = 0
    dp: int = 0
