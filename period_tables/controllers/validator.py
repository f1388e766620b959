"""
Consistency rules for a batch of yearly tables.

Two rules are checked on the monthly amounts produced by :func:`extract`:

• Period alignment: every row of every table must leave the same months empty
  as the row with the same id in the reference table.
• No gaps: once a table's first amount is entered, the following months
  (across its rows, oldest row first) must be entered without holes; trailing
  empty months are fine.

Violations are returned as data; nothing here raises for bad input.
"""

# period_tables/controllers/validator.py
from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Mapping, Optional

from period_tables.data_model.batch import (
    REFERENCE_TABLE_ID,
    AmountData,
    RawRow,
    ValidationError,
)
from period_tables.data_model.interfaces import ErrorKind
from period_tables.data_model.schema import input_labels
from period_tables.utilities.converters_scalar import RawValue, is_filled

log = logging.getLogger(__name__)


def empty_columns(row: RawRow) -> FrozenSet[str]:
    """Monthly labels of ``row`` holding no amount (absent cells included)."""
    return frozenset(label for label in input_labels() if not is_filled(row.get(label)))


def rows_misaligned(row: RawRow, reference_row: RawRow) -> bool:
    """True when the two rows leave different months empty."""
    return empty_columns(row) != empty_columns(reference_row)


def flatten_table(table: Mapping[str, RawRow]) -> List[RawValue]:
    """Monthly values of every row, row after row, January first."""
    return [row.get(label) for row in table.values() for label in input_labels()]


def is_dense_run(positions: Iterable[int]) -> bool:
    """True when ``positions`` are exactly ``0 .. n-1`` in order (an empty run included)."""
    return all(pos == i for i, pos in enumerate(positions))


def has_gap(table: Mapping[str, RawRow]) -> bool:
    """
    True when an empty month sits between two entered months of the table.

    Leading empty months are dropped, the rest is re-indexed from 0 and the
    positions of entered months must then form a dense run.
    """
    values = flatten_table(table)
    first = next((i for i, v in enumerate(values) if is_filled(v)), len(values))
    positions = [i for i, v in enumerate(values[first:]) if is_filled(v)]
    return not is_dense_run(positions)


def _alignment_enabled(
    reference: Optional[Mapping[str, RawRow]],
    restrict_mismatch_check_to_single_row: bool,
    rows_count: Optional[int],
) -> bool:
    if reference is None:
        return False
    if not restrict_mismatch_check_to_single_row:
        return True
    count = len(reference) if rows_count is None else rows_count
    return count == 1


def _misaligned_with_reference(
    table: Mapping[str, RawRow], reference: Mapping[str, RawRow]
) -> bool:
    return any(
        rows_misaligned(row, reference[r_id])
        for r_id, row in table.items()
        if r_id in reference
    )


def validate(
    amount_data: AmountData,
    reference_id: str = REFERENCE_TABLE_ID,
    *,
    restrict_mismatch_check_to_single_row: bool = False,
    rows_count: Optional[int] = None,
) -> List[ValidationError]:
    """
    Check every table of ``amount_data`` and collect all violations.

    Parameters
    ----------
    amount_data : AmountData
        Output of :func:`period_tables.controllers.extractor.extract`.
    reference_id : str
        Table whose empty months every other table must match.
    restrict_mismatch_check_to_single_row : bool
        When true, the alignment rule only runs while a single row is
        configured (``rows_count``, or the reference table's row count when
        ``rows_count`` is None).
    rows_count : int, optional
        Number of rows configured by the caller.

    Returns
    -------
    List[ValidationError]
        At most one error per (table, kind), in table order, PeriodMismatch
        before GapInPeriod. Empty when the batch is consistent.
    """
    reference = amount_data.get(reference_id)
    check_alignment = _alignment_enabled(
        reference, restrict_mismatch_check_to_single_row, rows_count
    )
    if reference is None and len(amount_data) > 1:
        log.warning(
            "Reference table %s is missing; skipping period alignment check",
            reference_id,
        )

    errors: List[ValidationError] = []
    for t_id, table in amount_data.items():
        if (
            check_alignment
            and t_id != reference_id
            and _misaligned_with_reference(table, reference)
        ):
            errors.append(ValidationError(t_id, ErrorKind.PERIOD_MISMATCH))
        if has_gap(table):
            errors.append(ValidationError(t_id, ErrorKind.GAP_IN_PERIOD))

    if errors:
        log.info(
            "Validation failed: %s",
            ", ".join(f"{e.table_id}:{e.kind.value}" for e in errors),
        )
    else:
        log.debug("Validation passed for %d table(s)", len(amount_data))
    return errors
