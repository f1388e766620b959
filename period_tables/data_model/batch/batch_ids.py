# period_tables/data_model/batch/batch_ids.py
from __future__ import annotations

import re
from datetime import date
from typing import Dict, Final, List, Mapping, Optional

from period_tables.utilities.converters_scalar import RawValue

RawRow = Mapping[str, RawValue]
RawTable = Mapping[str, RawRow]
RawBatch = Mapping[str, RawTable]

# plain nested dicts produced by the stages
AmountRow = Dict[str, RawValue]
AmountData = Dict[str, Dict[str, AmountRow]]

TABLE_PREFIX: Final[str] = "table_"
ROW_PREFIX: Final[str] = "row_"
REFERENCE_TABLE_ID: Final[str] = TABLE_PREFIX + "0"


def table_id(index: int) -> str:
    """Id of the ``index``-th created table (0-based)."""
    if index < 0:
        raise ValueError(f"Table index must be >= 0, got {index}")
    return f"{TABLE_PREFIX}{index}"


def row_id(index: int) -> str:
    """Id of a row (1-based; ``row_1`` holds the current year)."""
    if index < 1:
        raise ValueError(f"Row index must be >= 1, got {index}")
    return f"{ROW_PREFIX}{index}"


def parse_index(identifier: str) -> int:
    """
    Return the numeric part of a ``table_<i>`` or ``row_<i>`` id.

    Raises:
        ValueError: if ``identifier`` matches neither pattern.
    """
    m = _ID_RE.fullmatch(identifier)
    if not m:
        raise ValueError(f"Not a table or row id: {identifier!r}")
    return int(m.group(2))


def is_table_id(identifier: object) -> bool:
    return isinstance(identifier, str) and _TABLE_RE.fullmatch(identifier) is not None


def table_ids(count: int) -> List[str]:
    """Ids of the first ``count`` tables in creation order."""
    return [table_id(i) for i in range(count)]


def row_ids(count: int) -> List[str]:
    """Ids of ``count`` rows as displayed: oldest year first, ``row_1`` last."""
    return [row_id(i) for i in range(count, 0, -1)]


def year_for_row(identifier: str, current_year: Optional[int] = None) -> int:
    """Calendar year shown in a row: ``row_1`` is the current year, ``row_2`` the previous one..."""
    year = date.today().year if current_year is None else current_year
    return year + 1 - parse_index(identifier)


_ID_RE: Final[re.Pattern[str]] = re.compile(r"^(table_|row_)(\d+)$")
_TABLE_RE: Final[re.Pattern[str]] = re.compile(r"^table_\d+$")
