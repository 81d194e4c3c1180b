"""Token reader for the commands typed on standard input."""

from __future__ import annotations

import math
import struct
from string import digits
from typing import TextIO


def _float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class InputScanner:
    """Reads words, numbers and quoted strings from a text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def _ungetc(self, char: str) -> None:
        if char:
            self._pending = char

    def _skip_space(self) -> str:
        char = self._getc()
        while char and char.isspace():
            char = self._getc()
        return char

    def _digits(self, char: str) -> tuple[str, str]:
        text = ""
        while char and char in digits:
            text += char
            char = self._getc()
        return text, char

    def next_word(self) -> str:
        """Return the next run of non-blank characters."""
        char = self._skip_space()
        if not char:
            raise EOFError("no more input")
        word = ""
        while char and not char.isspace():
            word += char
            char = self._getc()
        self._ungetc(char)
        return word

    def next_int(self) -> int:
        """Return the next decimal integer."""
        char = self._skip_space()
        if not char:
            raise EOFError("no more input")
        sign = ""
        if char in "+-":
            sign, char = char, self._getc()
        number, char = self._digits(char)
        self._ungetc(char)
        if not number:
            raise ValueError("expected an integer")
        return int(sign + number)

    def next_float(self) -> float:
        """Return the next decimal number, rounded to single precision."""
        char = self._skip_space()
        if not char:
            raise EOFError("no more input")
        text = ""
        if char in "+-":
            text, char = char, self._getc()
        whole, char = self._digits(char)
        text += whole
        if char == ".":
            fraction, char = self._digits(self._getc())
            text += "." + fraction
        if char in ("e", "E") and any(c in digits for c in text):
            text += char
            char = self._getc()
            if char in ("+", "-"):
                text += char
                char = self._getc()
            exponent, char = self._digits(char)
            text += exponent
        self._ungetc(char)
        try:
            return _float32(float(text))
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None

    def next_quoted(self) -> str:
        """Return a string given in double quotes, or "" for NULO.

        A word starting with N or n stands for an empty value; an unquoted
        word is returned as it is.
        """
        char = self._skip_space()
        if not char:
            return ""
        if char in ("N", "n"):
            for _ in range(3):
                self._getc()
            return ""
        if char == '"':
            text = ""
            char = self._getc()
            while char and char != '"':
                text += char
                char = self._getc()
            return text
        word = char
        char = self._getc()
        while char and not char.isspace():
            word += char
            char = self._getc()
        self._ungetc(char)
        return word