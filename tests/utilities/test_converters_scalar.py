# tests/utilities/test_converters_scalar.py
from __future__ import annotations

from decimal import Decimal

import pytest

from period_tables.utilities.converters_scalar import (
    clean_number_like_string,
    is_filled,
    is_null_or_whitespace,
    to_amount,
    to_decimal,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1234", Decimal("1234")),
        ("-3,188.32", Decimal("-3188.32")),
        ("1.234,56", Decimal("1234.56")),
        ("(1,234.56)", Decimal("-1234.56")),
        ("1,234", Decimal("1234")),
        ("12,5", Decimal("12.5")),
        ("  42  ", Decimal("42")),
        ("+7", Decimal("7")),
        ("5-", Decimal("-5")),
        ("−2.5", Decimal("-2.5")),
    ],
)
def test_to_decimal_parses_number_like_strings(raw, expected):
    """Positive: typed amounts in common spellings convert to Decimal."""
    assert to_decimal(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (0, Decimal("0")),
        (15, Decimal("15")),
        (0.1, Decimal("0.1")),
        (Decimal("2.50"), Decimal("2.50")),
    ],
)
def test_to_decimal_numeric_fast_paths(raw, expected):
    """Positive: numbers convert without binary float artifacts."""
    out = to_decimal(raw)
    assert isinstance(out, Decimal)
    assert out == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", "12abc", "nan", True, [1], object()])
def test_to_decimal_rejects_non_numbers(raw):
    """Negative: blanks, words, bools and containers are not amounts."""
    with pytest.raises(ValueError):
        to_decimal(raw)


def test_to_decimal_rejects_non_finite_decimal():
    """Negative: NaN/Infinity Decimals are not usable amounts."""
    with pytest.raises(ValueError):
        to_decimal(Decimal("NaN"))
    with pytest.raises(ValueError):
        to_decimal(float("inf"))


def test_clean_number_like_string_requires_digits():
    """Negative: a string with no digits cannot be cleaned."""
    with pytest.raises(ValueError) as ei:
        clean_number_like_string("$")
    assert "no digits" in str(ei.value).lower()


@pytest.mark.parametrize(
    "raw,filled",
    [
        (None, False),
        ("", False),
        ("   ", False),
        ("abc", False),
        ("0", True),
        (0, True),
        (0.0, True),
        (Decimal("0"), True),
        ("12.5", True),
        (-3, True),
    ],
)
def test_is_filled_distinguishes_zero_from_empty(raw, filled):
    """Zero in any spelling is an entered value; blanks and junk are not."""
    assert is_filled(raw) is filled


@pytest.mark.parametrize(
    "raw,expected",
    [(None, Decimal("0")), ("", Decimal("0")), ("oops", Decimal("0")), ("7.25", Decimal("7.25"))],
)
def test_to_amount_coerces_empty_to_zero(raw, expected):
    assert to_amount(raw) == expected


@pytest.mark.parametrize("s,expected", [(None, True), ("", True), (" \t", True), ("x", False)])
def test_is_null_or_whitespace(s, expected):
    assert is_null_or_whitespace(s) is expected
