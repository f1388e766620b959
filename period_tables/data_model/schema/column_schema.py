"""
Declarative column schema shared by extraction, validation and aggregation.

The order of ``COLUMN_SCHEMA`` is the order in which columns are displayed and
the order in which monthly values are flattened when a table is checked for
gaps.
"""

# period_tables/data_model/schema/column_schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final, Tuple

from ..interfaces import ColumnRole


@dataclass(frozen=True)
class ColumnSpec:
    label: str
    role: ColumnRole
    # input columns (for a quarter) or computed columns (for YTD) it is derived from
    sources: Tuple[str, ...] = ()

    @property
    def is_input(self) -> bool:
        return self.role is ColumnRole.INPUT

    @property
    def is_computed(self) -> bool:
        return self.role is ColumnRole.COMPUTED


def _input(label: str) -> ColumnSpec:
    return ColumnSpec(label, ColumnRole.INPUT)


def _computed(label: str, *sources: str) -> ColumnSpec:
    return ColumnSpec(label, ColumnRole.COMPUTED, tuple(sources))


COLUMN_SCHEMA: Final[Tuple[ColumnSpec, ...]] = (
    ColumnSpec("Year", ColumnRole.IDENTIFIER),
    _input("Jan"),
    _input("Feb"),
    _input("Mar"),
    _computed("Q1", "Jan", "Feb", "Mar"),
    _input("Apr"),
    _input("May"),
    _input("Jun"),
    _computed("Q2", "Apr", "May", "Jun"),
    _input("Jul"),
    _input("Aug"),
    _input("Sep"),
    _computed("Q3", "Jul", "Aug", "Sep"),
    _input("Oct"),
    _input("Nov"),
    _input("Dec"),
    _computed("Q4", "Oct", "Nov", "Dec"),
    _computed("YTD", "Q1", "Q2", "Q3", "Q4"),
)

YEAR_LABEL: Final[str] = "Year"
YTD_LABEL: Final[str] = "YTD"

_BY_LABEL: Dict[str, ColumnSpec] = {c.label: c for c in COLUMN_SCHEMA}


def column(label: str) -> ColumnSpec:
    """Look up a column by label; raises ``KeyError`` for unknown labels."""
    try:
        return _BY_LABEL[label]
    except KeyError:
        raise KeyError(f"Unknown column label: {label!r}") from None


def all_labels() -> Tuple[str, ...]:
    return tuple(c.label for c in COLUMN_SCHEMA)


def input_labels() -> Tuple[str, ...]:
    """The twelve monthly labels, January first."""
    return tuple(c.label for c in COLUMN_SCHEMA if c.is_input)


def computed_labels() -> Tuple[str, ...]:
    return tuple(c.label for c in COLUMN_SCHEMA if c.is_computed)


def quarter_columns() -> Tuple[ColumnSpec, ...]:
    """Computed columns whose sources are monthly inputs (Q1..Q4)."""
    return tuple(
        c for c in COLUMN_SCHEMA
        if c.is_computed and all(_BY_LABEL[s].is_input for s in c.sources)
    )


def is_input_label(label: str) -> bool:
    spec = _BY_LABEL.get(label)
    return spec is not None and spec.is_input
