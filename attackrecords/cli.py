"""Command line entry point; the commands are read from standard input."""

from __future__ import annotations

import argparse
import sys

from .operations import (
    FAILURE_MESSAGE,
    ProcessingError,
    build_binary,
    print_records,
    search_records,
)
from .scanner import InputScanner


def main(argv=None) -> int:
    """Read a choice and file names from standard input and run it."""
    parser = argparse.ArgumentParser(
        prog="attackrecords",
        description=(
            "Build, list and search binary attack data files. "
            "The operation number and its arguments are read from standard input."
        ),
    )
    parser.parse_args(argv)

    scanner = InputScanner(sys.stdin)
    out = sys.stdout
    try:
        choice = scanner.next_int()
    except (EOFError, ValueError):
        choice = None

    try:
        if choice == 1:
            csv_path = scanner.next_word()
            bin_path = scanner.next_word()
            out.write(f"{build_binary(csv_path, bin_path):f}\n")
        elif choice == 2:
            print_records(scanner.next_word(), out)
        elif choice == 3:
            search_records(scanner.next_word(), scanner, out)
        else:
            out.write("Número inválido\n")
    except (ProcessingError, EOFError):
        out.write(FAILURE_MESSAGE + " ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())