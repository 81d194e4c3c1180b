"""Header record of the attack data file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

_LAYOUT = struct.Struct("<cqqii23s27s28sc26sc38sc38sc67s")

HEADER_SIZE = _LAYOUT.size
"""Size in bytes of the header on disk; data records start right after it."""

NEXT_OFFSET_POS = 9
"""Byte position of the next-free-offset field inside the header."""

RECORD_COUNT_POS = 17
"""Byte position of the count of records that are not removed."""

DESCRIPTION_SIZES = (23, 27, 28, 26, 38, 38, 67)
"""Widths of the seven column descriptions, in CSV order."""


@dataclass
class FileHeader:
    """Fixed-size header at the start of a binary data file."""

    id_description: bytes
    year_description: bytes
    loss_description: bytes
    country_description: bytes
    type_description: bytes
    industry_description: bytes
    defense_description: bytes
    status: str = "1"
    top: int = -1
    next_offset: int = 0
    record_count: int = 0
    removed_count: int = 0
    country_code: str = "1"
    type_code: str = "2"
    industry_code: str = "3"
    defense_code: str = "4"

    @classmethod
    def from_csv(cls, stream: BinaryIO) -> FileHeader:
        """Build a header from the first line of a CSV opened in binary mode.

        Each column title is read with its fixed width and the separator
        that follows it is skipped.
        """
        descriptions = []
        for width in DESCRIPTION_SIZES:
            chunk = stream.read(width)
            if len(chunk) < width:
                raise ValueError("CSV header line is too short")
            descriptions.append(chunk)
            stream.read(1)
        return cls(*descriptions)

    def pack(self) -> bytes:
        """Return the header as it is stored on disk."""
        return _LAYOUT.pack(
            self.status.encode("ascii"),
            self.top,
            self.next_offset,
            self.record_count,
            self.removed_count,
            self.id_description,
            self.year_description,
            self.loss_description,
            self.country_code.encode("ascii"),
            self.country_description,
            self.type_code.encode("ascii"),
            self.type_description,
            self.industry_code.encode("ascii"),
            self.industry_description,
            self.defense_code.encode("ascii"),
            self.defense_description,
        )

    @classmethod
    def unpack(cls, data: bytes) -> FileHeader:
        """Parse a header from the first bytes of a data file."""
        if len(data) < HEADER_SIZE:
            raise ValueError("data is too short to hold a file header")
        (
            status,
            top,
            next_offset,
            record_count,
            removed_count,
            id_description,
            year_description,
            loss_description,
            country_code,
            country_description,
            type_code,
            type_description,
            industry_code,
            industry_description,
            defense_code,
            defense_description,
        ) = _LAYOUT.unpack_from(data)
        return cls(
            id_description=id_description,
            year_description=year_description,
            loss_description=loss_description,
            country_description=country_description,
            type_description=type_description,
            industry_description=industry_description,
            defense_description=defense_description,
            status=status.decode("latin-1"),
            top=top,
            next_offset=next_offset,
            record_count=record_count,
            removed_count=removed_count,
            country_code=country_code.decode("latin-1"),
            type_code=type_code.decode("latin-1"),
            industry_code=industry_code.decode("latin-1"),
            defense_code=defense_code.decode("latin-1"),
        )