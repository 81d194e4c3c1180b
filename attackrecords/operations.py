"""Building, listing and searching binary attack data files."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

from .header import HEADER_SIZE, FileHeader
from .records import SIZE_PREFIX, TEXT_FIELDS, Record
from .scanner import InputScanner

FAILURE_MESSAGE = "Falha no processamento do arquivo."
NOT_FOUND = "Registro inexistente.\n\n"
SEPARATOR = "**********\n"
EMPTY_FIELD = "NADA CONSTA"

_PREFIX = struct.Struct("<ci")


class ProcessingError(Exception):
    """Raised when a file or a query cannot be processed."""

    def __init__(self, message: str = FAILURE_MESSAGE):
        super().__init__(message)


def checksum(path) -> float:
    """Return the sum of the file's bytes divided by 100."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ProcessingError() from exc
    return sum(data) / 100


def _csv_records(stream: BinaryIO) -> Iterator[Record]:
    while stream.read(1):
        stream.seek(-1, 1)
        yield Record.from_csv(stream)


def build_binary(csv_path, bin_path) -> float:
    """Convert a CSV file into a binary data file and return its checksum."""
    try:
        source = open(csv_path, "rb")
    except OSError as exc:
        raise ProcessingError() from exc
    with source:
        try:
            target = open(bin_path, "wb")
        except OSError as exc:
            raise ProcessingError() from exc
        with target:
            try:
                header = FileHeader.from_csv(source)
            except ValueError as exc:
                raise ProcessingError() from exc
            body = b"".join(record.pack() for record in _csv_records(source))
            count = 0
            source.seek(0)
            FileHeader.from_csv(source)
            count = sum(1 for _ in _csv_records(source))
            header.status = "1"
            header.record_count = count
            header.next_offset = HEADER_SIZE + len(body)
            target.write(header.pack())
            target.write(body)
    return checksum(bin_path)


def _load(bin_path) -> bytes:
    try:
        data = Path(bin_path).read_bytes()
    except OSError as exc:
        raise ProcessingError() from exc
    if len(data) < HEADER_SIZE:
        raise ProcessingError()
    return data


def _scan(data: bytes) -> Iterator[Record]:
    pos = HEADER_SIZE
    while pos < len(data):
        if len(data) < pos + SIZE_PREFIX:
            raise ProcessingError()
        removed, size = _PREFIX.unpack_from(data, pos)
        if size < 0:
            raise ProcessingError()
        end = pos + SIZE_PREFIX + size
        if removed == b"0":
            try:
                yield Record.unpack(data[pos:end])
            except ValueError as exc:
                raise ProcessingError() from exc
        pos = end


def iter_records(bin_path) -> Iterator[Record]:
    """Yield the records of a binary data file that are not removed."""
    yield from _scan(_load(bin_path))


def _number(value: int) -> str:
    return EMPTY_FIELD if value == -1 else str(value)


def _loss(value: float) -> str:
    return EMPTY_FIELD if value == -1 else f"{value:.2f}"


def _text(value) -> str:
    return EMPTY_FIELD if value is None else value


def format_record(record: Record) -> str:
    """Return the listing block for one record, blank line included."""
    lines = [
        f"IDENTIFICADOR DO ATAQUE: {_number(record.attack_id)}",
        f"ANO EM QUE O ATAQUE OCORREU: {_number(record.year)}",
        f"PAIS ONDE OCORREU O ATAQUE: {_text(record.country)}",
        f"SETOR DA INDUSTRIA QUE SOFREU O ATAQUE: {_text(record.target_industry)}",
        f"TIPO DE AMEACA A SEGURANCA CIBERNETICA: {_text(record.attack_type)}",
        f"PREJUIZO CAUSADO PELO ATAQUE: {_loss(record.financial_loss)}",
        "ESTRATEGIA DE DEFESA CIBERNETICA EMPREGADA PARA RESOLVER O PROBLEMA: "
        f"{_text(record.defense_mechanism)}",
    ]
    return "\n".join(lines) + "\n\n"


def print_records(bin_path, out: TextIO) -> None:
    """Write every record that is not removed to out."""
    data = _load(bin_path)
    if FileHeader.unpack(data).record_count == 0:
        out.write(NOT_FOUND + SEPARATOR)
        return
    for record in _scan(data):
        out.write(format_record(record))


def _read_int(scanner: InputScanner) -> int:
    try:
        return scanner.next_int()
    except (EOFError, ValueError) as exc:
        raise ProcessingError() from exc


def read_query(scanner: InputScanner) -> list[tuple[str, object]]:
    """Read a field count followed by that many field names and values."""
    query = []
    for _ in range(_read_int(scanner)):
        try:
            field = scanner.next_word()
            if field in ("idAttack", "year"):
                value = scanner.next_int()
            elif field == "financialLoss":
                value = scanner.next_float()
            elif field in TEXT_FIELDS:
                value = scanner.next_quoted()
            else:
                raise ProcessingError()
        except (EOFError, ValueError) as exc:
            raise ProcessingError() from exc
        query.append((field, value))
    return query


def search_records(bin_path, scanner: InputScanner, out: TextIO) -> None:
    """Run the searches read from scanner and write the matching records."""
    data = _load(bin_path)
    if FileHeader.unpack(data).record_count == 0:
        out.write(NOT_FOUND + SEPARATOR)
        return
    for _ in range(_read_int(scanner)):
        query = read_query(scanner)
        found = False
        for record in _scan(data):
            if all(record.matches(field, value) for field, value in query):
                out.write(format_record(record))
                found = True
        if not found:
            out.write(NOT_FOUND)
        out.write(SEPARATOR)