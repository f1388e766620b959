# period_tables/utilities/converters_scalar.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Mapping, Optional, Union

RawValue = Union[str, int, float, Decimal, None]


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def clean_number_like_string(value: str) -> str:
    """
    Normalize a number typed into a cell so ``Decimal`` can parse it.

    Handles a NBSP/unicode minus, a trailing minus, accounting parentheses
    ``(1,234.56)``, ``+`` signs, thousands commas and a comma used as the decimal
    mark when it is the only separator followed by one or two digits.

    Raises:
        ValueError: if the value is blank or holds no digits.
    """
    s = value.replace("\xa0", " ").replace(_UNICODE_MINUS, "-").strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()
    if s.startswith("+"):
        s = s[1:]
    if s.startswith("-"):
        neg = not neg
        s = s[1:]

    s = s.replace(" ", "")
    if not _DIGIT.search(s):
        raise ValueError(f"No digits found in input: {value!r}")

    if "," in s and "." in s:
        # the last separator is the decimal mark
        if s.rfind(",") > s.rfind("."):
            s = s.replace(".", "").replace(",", ".")
        else:
            s = s.replace(",", "")
    elif "," in s:
        after = len(s) - s.rfind(",") - 1
        s = s.replace(",", ".") if after in (1, 2) and s.count(",") == 1 else s.replace(",", "")

    return "-" + s if neg else s


def to_decimal(value: Any) -> Decimal:
    """
    Convert a raw cell value to ``Decimal``.

    ``bool`` is rejected (a checkbox is not an amount); floats go through
    ``str`` to avoid binary artifacts.

    Raises:
        ValueError: if the value is not a number.
    """
    if isinstance(value, bool):
        raise ValueError("Unsupported type for Decimal conversion: bool")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Non-finite amount: {value!r}")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return to_decimal(Decimal(str(value)))
    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_number_like_string(value)
    try:
        result = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e
    if not result.is_finite():
        raise ValueError(f"Non-finite amount: {value!r}")
    return result


def is_filled(value: RawValue) -> bool:
    """
    True when a cell holds an entered amount.

    ``None``, blank strings and values that are not numbers count as empty;
    zero in any spelling (``0``, ``"0"``, ``0.0``) is filled.
    """
    if value is None:
        return False
    if isinstance(value, str) and is_null_or_whitespace(value):
        return False
    try:
        to_decimal(value)
    except ValueError:
        return False
    return True


def as_mapping(value: Any) -> Mapping[str, Any]:
    """``value`` if it is a mapping, else an empty one; malformed tables and rows read as empty."""
    return value if isinstance(value, Mapping) else {}


def to_amount(value: RawValue) -> Decimal:
    """Amount used in arithmetic: empty or malformed cells are zero."""
    if not is_filled(value):
        return _ZERO
    return to_decimal(value)


_DIGIT: Final[re.Pattern[str]] = re.compile(r"\d")
_UNICODE_MINUS: Final[str] = "\u2212"  # '−'
_ZERO: Final[Decimal] = Decimal("0")
