"""Data records of the attack data file."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional

_FIXED = struct.Struct("<ciqiif")

FIXED_SIZE = _FIXED.size
"""Bytes taken by the removed flag, size field and fixed-width fields."""

SIZE_PREFIX = 5
"""Bytes before the part of a record that its size field counts."""

DELIMITER = b"|"

FIELDS = {
    "idAttack": "attack_id",
    "year": "year",
    "financialLoss": "financial_loss",
    "country": "country",
    "attackType": "attack_type",
    "targetIndustry": "target_industry",
    "defenseMechanism": "defense_mechanism",
}
"""Maps field names used in queries to record attributes."""

TEXT_FIELDS = ("country", "attackType", "targetIndustry", "defenseMechanism")

_CODES = {
    b"1": "country",
    b"2": "attack_type",
    b"3": "target_industry",
    b"4": "defense_mechanism",
}

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_int(text: str) -> int:
    match = _INT_PATTERN.match(text)
    if match is None:
        return 0
    value = max(-(2**63), min(2**63 - 1, int(match.group(1))))
    return (value + 2**31) % 2**32 - 2**31


def _parse_float(text: str) -> float:
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        return 0.0
    return _float32(float(match.group(1)))


def _read_field(stream: BinaryIO) -> bytes:
    """Read one CSV field, consuming the comma or newline that ends it."""
    chunk = bytearray()
    while True:
        char = stream.read(1)
        if char in (b"", b",", b"\n"):
            return bytes(chunk)
        chunk += char


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


@dataclass
class Record:
    """One attack record; -1 and None stand for empty fields."""

    attack_id: int = -1
    year: int = -1
    financial_loss: float = -1.0
    country: Optional[str] = None
    attack_type: Optional[str] = None
    target_industry: Optional[str] = None
    defense_mechanism: Optional[str] = None
    removed: str = "0"
    next_offset: int = -1

    @classmethod
    def from_csv(cls, stream: BinaryIO) -> Record:
        """Read one CSV line from a binary stream into a record."""
        values = []
        for parse in (_parse_int, _parse_int, _parse_float):
            raw = _read_field(stream)
            if raw:
                values.append(parse(raw.decode("latin-1")))
            else:
                values.append(-1 if parse is _parse_int else -1.0)
        texts = []
        for _ in range(4):
            raw = _read_field(stream)
            texts.append(_decode(raw) if raw else None)
        return cls(*values, *texts)

    def _text_fields(self):
        return [
            (code, getattr(self, attr))
            for code, attr in _CODES.items()
            if getattr(self, attr) is not None
        ]

    def record_size(self) -> int:
        """Return the value stored in the record's size field."""
        size = FIXED_SIZE - SIZE_PREFIX
        for _, value in self._text_fields():
            size += len(_encode(value)) + 2
        return size

    def pack(self) -> bytes:
        """Return the record as it is stored on disk."""
        parts = [
            _FIXED.pack(
                self.removed.encode("ascii"),
                self.record_size(),
                self.next_offset,
                self.attack_id,
                self.year,
                self.financial_loss,
            )
        ]
        for code, value in self._text_fields():
            parts.append(code + _encode(value) + DELIMITER)
        return b"".join(parts)

    @classmethod
    def unpack(cls, data: bytes) -> Record:
        """Parse a record that starts at the first byte of data."""
        if len(data) < FIXED_SIZE:
            raise ValueError("data is too short to hold a record")
        removed, size, next_offset, attack_id, year, loss = _FIXED.unpack_from(data)
        end = SIZE_PREFIX + size
        if size < FIXED_SIZE - SIZE_PREFIX or len(data) < end:
            raise ValueError("record size does not fit the data")
        texts = {}
        pos = FIXED_SIZE
        while pos < end:
            code = data[pos : pos + 1]
            attr = _CODES.get(code)
            if attr is None:
                raise ValueError(f"unknown field code {code!r} at byte {pos}")
            close = data.find(DELIMITER, pos + 1, end)
            if close < 0:
                raise ValueError("unterminated variable-length field")
            texts[attr] = _decode(data[pos + 1 : close])
            pos = close + 1
        return cls(
            attack_id=attack_id,
            year=year,
            financial_loss=loss,
            removed=removed.decode("latin-1"),
            next_offset=next_offset,
            **texts,
        )

    def matches(self, field: str, value) -> bool:
        """Tell whether the named field holds the given value."""
        attr = FIELDS.get(field)
        if attr is None:
            raise ValueError(f"unknown field: {field}")
        current = getattr(self, attr)
        if field == "financialLoss":
            return _float32(current) == _float32(value)
        if field in TEXT_FIELDS:
            return current is not None and current == value
        return current == value