import io
import math

import pytest

from attackrecords.scanner import InputScanner


def _scanner(text):
    return InputScanner(io.StringIO(text))


def test_words_and_ints():
    scanner = _scanner("3 data.bin\n  2\n-7 +4")
    assert scanner.next_int() == 3
    assert scanner.next_word() == "data.bin"
    assert scanner.next_int() == 2
    assert scanner.next_int() == -7
    assert scanner.next_int() == 4


def test_int_stops_at_non_digit():
    scanner = _scanner("12abc")
    assert scanner.next_int() == 12
    assert scanner.next_word() == "abc"


def test_int_errors():
    with pytest.raises(ValueError):
        _scanner("abc").next_int()
    with pytest.raises(EOFError):
        _scanner("   \n").next_int()
    with pytest.raises(EOFError):
        _scanner("").next_word()


def test_float_values():
    scanner = _scanner("50.5 -2 1.5e2 0.1")
    assert scanner.next_float() == 50.5
    assert scanner.next_float() == -2.0
    assert scanner.next_float() == 150.0
    value = scanner.next_float()
    assert value != 0.1
    assert math.isclose(value, 0.1, rel_tol=1e-6)


def test_float_errors():
    with pytest.raises(ValueError):
        _scanner("x").next_float()
    with pytest.raises(EOFError):
        _scanner("").next_float()


def test_quoted_string():
    scanner = _scanner('  "United States" next')
    assert scanner.next_quoted() == "United States"
    assert scanner.next_word() == "next"


def test_quoted_empty_and_null():
    scanner = _scanner('"" NULO nulo after')
    assert scanner.next_quoted() == ""
    assert scanner.next_quoted() == ""
    assert scanner.next_quoted() == ""
    assert scanner.next_word() == "after"


def test_unquoted_word_and_eof():
    scanner = _scanner("Firewall")
    assert scanner.next_quoted() == "Firewall"
    assert scanner.next_quoted() == ""


def test_typical_query_line():
    scanner = _scanner('2 country "Brazil" year 2020\n')
    assert scanner.next_int() == 2
    assert scanner.next_word() == "country"
    assert scanner.next_quoted() == "Brazil"
    assert scanner.next_word() == "year"
    assert scanner.next_int() == 2020