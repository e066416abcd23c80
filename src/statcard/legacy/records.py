"""Byte layouts of the legacy season files (PLAYERS.DAT, NSTAT.DAT, PSTAT.DAT).

Only the fields the import bridge needs are decoded. Player records keep
their raw bytes so a record can be written back out byte-for-byte.
"""

import struct
from dataclasses import dataclass, field
from typing import Final

from statcard.domain.card import CARD_LENGTH, Card

PLAYERS_RECORD_SIZE: Final = 146
NSTAT_RECORD_SIZE: Final = 32
PSTAT_RECORD_SIZE: Final = 22

LAST_NAME_OFFSET: Final = 0x00
FIRST_NAME_OFFSET: Final = 0x10
NAME_MAX_LENGTH: Final = 15
META_BLOCK_OFFSET: Final = 0x20
META_BLOCK_SIZE: Final = 32
CARD_BLOCK_OFFSET: Final = 0x40
EXTENDED_BLOCK_OFFSET: Final = 0x63
EXTENDED_BLOCK_SIZE: Final = 36
POSITION_STR_OFFSET: Final = 0x87
POSITION_STR_SIZE: Final = 11

# id, G, AB, R, H, RBI, SO, BB, HBP as uint16; 2B, 3B, HR, SB as uint8.
_NSTAT_STRUCT: Final = struct.Struct("<9H4B10x")
# outs, H, R, ER, BB, SO as uint16; W, L, SV, G, GS, HRA, CG, SHO as uint8.
_PSTAT_STRUCT: Final = struct.Struct("<6H8B2x")


@dataclass(frozen=True)
class LegacyPlayerRecord:
    index: int
    last_name: str
    first_name: str
    card: Card
    position_string: str
    meta_block: bytes = bytes(META_BLOCK_SIZE)
    extended_block: bytes = bytes(EXTENDED_BLOCK_SIZE)
    raw: bytes = field(default=b"", repr=False, compare=False)


@dataclass(frozen=True)
class LegacyBattingStats:
    index: int
    id: int
    g: int
    ab: int
    r: int
    h: int
    rbi: int
    so: int
    bb: int
    hbp: int
    doubles: int
    triples: int
    hr: int
    sb: int


@dataclass(frozen=True)
class LegacyPitchingStats:
    index: int
    outs: int
    h: int
    r: int
    er: int
    bb: int
    so: int
    w: int
    l: int  # noqa: E741
    sv: int
    g: int
    gs: int
    hra: int
    cg: int
    sho: int

    @property
    def era(self) -> float:
        return self.er * 27 / self.outs if self.outs > 0 else 0.0


def _check_size(data: bytes, record_size: int, file_name: str) -> int:
    if len(data) % record_size != 0:
        msg = f"{file_name} size {len(data)} is not a multiple of {record_size}"
        raise ValueError(msg)
    return len(data) // record_size


def _read_pascal_string(data: bytes, offset: int, max_length: int) -> str:
    length = min(data[offset], max_length)
    return data[offset + 1 : offset + 1 + length].decode("ascii", errors="replace").strip()


def _read_fixed_string(data: bytes, offset: int, length: int) -> str:
    chunk = data[offset : offset + length].split(b"\x00", 1)[0]
    return chunk.decode("ascii", errors="replace").strip()


def _write_pascal_string(value: str, max_length: int) -> bytes:
    encoded = value.encode("ascii")[:max_length]
    return bytes([len(encoded)]) + encoded.ljust(max_length, b" ")


def decode_player_record(data: bytes, index: int = 0) -> LegacyPlayerRecord:
    if len(data) != PLAYERS_RECORD_SIZE:
        msg = f"player record must be {PLAYERS_RECORD_SIZE} bytes, got {len(data)}"
        raise ValueError(msg)
    return LegacyPlayerRecord(
        index=index,
        last_name=_read_pascal_string(data, LAST_NAME_OFFSET, NAME_MAX_LENGTH),
        first_name=_read_pascal_string(data, FIRST_NAME_OFFSET, NAME_MAX_LENGTH),
        card=tuple(data[CARD_BLOCK_OFFSET : CARD_BLOCK_OFFSET + CARD_LENGTH]),
        position_string=_read_fixed_string(data, POSITION_STR_OFFSET, POSITION_STR_SIZE),
        meta_block=bytes(data[META_BLOCK_OFFSET : META_BLOCK_OFFSET + META_BLOCK_SIZE]),
        extended_block=bytes(data[EXTENDED_BLOCK_OFFSET : EXTENDED_BLOCK_OFFSET + EXTENDED_BLOCK_SIZE]),
        raw=bytes(data),
    )


def encode_card(card: Card) -> bytes:
    if len(card) != CARD_LENGTH:
        msg = f"card must have {CARD_LENGTH} slots, got {len(card)}"
        raise ValueError(msg)
    return bytes(card)


def encode_player_record(record: LegacyPlayerRecord) -> bytes:
    """Serialize a record; the card block always comes from ``record.card``.

    Records decoded from a file reuse their raw bytes for everything else, so
    an unmodified record re-encodes to exactly the bytes it was read from.
    """
    if record.raw:
        base = bytearray(record.raw)
    else:
        base = bytearray(PLAYERS_RECORD_SIZE)
        base[LAST_NAME_OFFSET : LAST_NAME_OFFSET + NAME_MAX_LENGTH + 1] = _write_pascal_string(
            record.last_name, NAME_MAX_LENGTH
        )
        base[FIRST_NAME_OFFSET : FIRST_NAME_OFFSET + NAME_MAX_LENGTH + 1] = _write_pascal_string(
            record.first_name, NAME_MAX_LENGTH
        )
        base[META_BLOCK_OFFSET : META_BLOCK_OFFSET + META_BLOCK_SIZE] = record.meta_block
        base[EXTENDED_BLOCK_OFFSET : EXTENDED_BLOCK_OFFSET + EXTENDED_BLOCK_SIZE] = record.extended_block
        position = record.position_string.encode("ascii")[:POSITION_STR_SIZE]
        base[POSITION_STR_OFFSET : POSITION_STR_OFFSET + POSITION_STR_SIZE] = position.ljust(POSITION_STR_SIZE, b"\x00")
    base[CARD_BLOCK_OFFSET : CARD_BLOCK_OFFSET + CARD_LENGTH] = encode_card(record.card)
    return bytes(base)


def parse_players(data: bytes) -> list[LegacyPlayerRecord]:
    count = _check_size(data, PLAYERS_RECORD_SIZE, "PLAYERS.DAT")
    return [
        decode_player_record(data[i * PLAYERS_RECORD_SIZE : (i + 1) * PLAYERS_RECORD_SIZE], index=i)
        for i in range(count)
    ]


def serialize_players(records: list[LegacyPlayerRecord]) -> bytes:
    return b"".join(encode_player_record(r) for r in records)


def parse_nstat(data: bytes) -> list[LegacyBattingStats]:
    _check_size(data, NSTAT_RECORD_SIZE, "NSTAT.DAT")
    return [
        LegacyBattingStats(
            index=i,
            id=row[0],
            g=row[1],
            ab=row[2],
            r=row[3],
            h=row[4],
            rbi=row[5],
            so=row[6],
            bb=row[7],
            hbp=row[8],
            doubles=row[9],
            triples=row[10],
            hr=row[11],
            sb=row[12],
        )
        for i, row in enumerate(_NSTAT_STRUCT.iter_unpack(data))
    ]


def parse_pstat(data: bytes) -> list[LegacyPitchingStats]:
    _check_size(data, PSTAT_RECORD_SIZE, "PSTAT.DAT")
    return [
        LegacyPitchingStats(
            index=i,
            outs=row[0],
            h=row[1],
            r=row[2],
            er=row[3],
            bb=row[4],
            so=row[5],
            w=row[6],
            l=row[7],
            sv=row[8],
            g=row[9],
            gs=row[10],
            hra=row[11],
            cg=row[12],
            sho=row[13],
        )
        for i, row in enumerate(_PSTAT_STRUCT.iter_unpack(data))
    ]


def pack_nstat(stats: LegacyBattingStats) -> bytes:
    return _NSTAT_STRUCT.pack(
        stats.id,
        stats.g,
        stats.ab,
        stats.r,
        stats.h,
        stats.rbi,
        stats.so,
        stats.bb,
        stats.hbp,
        stats.doubles,
        stats.triples,
        stats.hr,
        stats.sb,
    )


def pack_pstat(stats: LegacyPitchingStats) -> bytes:
    return _PSTAT_STRUCT.pack(
        stats.outs,
        stats.h,
        stats.r,
        stats.er,
        stats.bb,
        stats.so,
        stats.w,
        stats.l,
        stats.sv,
        stats.g,
        stats.gs,
        stats.hra,
        stats.cg,
        stats.sho,
    )
