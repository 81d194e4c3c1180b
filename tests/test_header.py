import io
import struct

import pytest

from attackrecords.header import (
    DESCRIPTION_SIZES,
    HEADER_SIZE,
    NEXT_OFFSET_POS,
    RECORD_COUNT_POS,
    FileHeader,
)

TITLES = [
    b"IDENTIFICADOR DO ATAQUE",
    b"ANO EM QUE O ATAQUE OCORREU",
    b"PREJUIZO CAUSADO PELO ATAQUE",
    b"PAIS ONDE OCORREU O ATAQUE",
    b"TIPO DE AMEACA A SEGURANCA CIBERNETICA",
    b"SETOR DA INDUSTRIA QUE SOFREU O ATAQUE",
    b"ESTRATEGIA DE DEFESA CIBERNETICA EMPREGADA PARA RESOLVER O PROBLEMA",
]


def _csv_header_line():
    return b",".join(TITLES) + b"\n"


def test_packed_header_is_276_bytes():
    header = FileHeader.from_csv(io.BytesIO(_csv_header_line()))
    packed = header.pack()
    assert len(packed) == 276
    assert HEADER_SIZE == len(packed)


def test_packed_descriptions_follow_fixed_fields_in_order():
    header = FileHeader.from_csv(io.BytesIO(_csv_header_line()))
    packed = header.pack()
    expected_tail = (
        TITLES[0]
        + TITLES[1]
        + TITLES[2]
        + b"1"
        + TITLES[3]
        + b"2"
        + TITLES[4]
        + b"3"
        + TITLES[5]
        + b"4"
        + TITLES[6]
    )
    assert packed[25:] == expected_tail
    assert [len(t) for t in TITLES] == list(DESCRIPTION_SIZES)


def test_from_csv_reads_titles_and_leaves_stream_at_next_line():
    stream = io.BytesIO(_csv_header_line() + b"1,2020,\n")
    header = FileHeader.from_csv(stream)
    assert header.id_description == TITLES[0]
    assert header.defense_description == TITLES[6]
    assert header.status == "1"
    assert header.top == -1
    assert header.record_count == 0
    assert stream.read() == b"1,2020,\n"


def test_pack_has_fixed_size_and_fields_at_offsets():
    header = FileHeader.from_csv(io.BytesIO(_csv_header_line()))
    header.next_offset = 300
    header.record_count = 7
    packed = header.pack()
    assert len(packed) == HEADER_SIZE
    assert packed[:1] == b"1"
    assert struct.unpack_from("<q", packed, 1)[0] == -1
    assert struct.unpack_from("<q", packed, NEXT_OFFSET_POS)[0] == 300
    assert struct.unpack_from("<i", packed, RECORD_COUNT_POS)[0] == 7
    assert b"1" + TITLES[3] in packed
    assert b"4" + TITLES[6] in packed


def test_pack_unpack_round_trip():
    header = FileHeader.from_csv(io.BytesIO(_csv_header_line()))
    header.status = "0"
    header.removed_count = 3
    assert FileHeader.unpack(header.pack()) == header


def test_from_csv_rejects_truncated_line():
    with pytest.raises(ValueError):
        FileHeader.from_csv(io.BytesIO(b"too short\n"))


def test_unpack_rejects_short_data():
    with pytest.raises(ValueError):
        FileHeader.unpack(b"1" * 10)