# period_tables/controllers/aggregator.py
from __future__ import annotations

import logging
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, getcontext, localcontext
from typing import Dict, Final, Iterable, Mapping

from period_tables.data_model.batch import AmountData, ComputedData, ComputedRow, RawRow
from period_tables.data_model.schema import YTD_LABEL, column, input_labels, quarter_columns
from period_tables.utilities.converters_scalar import as_mapping, to_amount

log = logging.getLogger(__name__)

# Tunables: reproduce the form's historical arithmetic
CENT: Final[Decimal] = Decimal("0.01")
BIAS: Final[Decimal] = Decimal("1")  # added to every sum before averaging
# significant digits kept beyond the integer part of the largest amount
GUARD_DIGITS: Final[int] = 30


def amount_context(amounts: Iterable[Decimal]) -> Context:
    """
    Decimal context wide enough for sums, averages and cent rounding of ``amounts``.

    Precision grows with the largest operand so quantizing to ``0.01`` never
    runs out of digits.
    """
    top = max((a.adjusted() for a in amounts if a), default=0)
    ctx = getcontext().copy()
    ctx.prec = max(ctx.prec, top + GUARD_DIGITS)
    ctx.Emax = MAX_EMAX
    ctx.Emin = MIN_EMIN
    return ctx


def round_amount(value: Decimal) -> Decimal:
    """Round half away from zero to two decimals."""
    with localcontext(amount_context([value])):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def biased_average(values: list[Decimal]) -> Decimal:
    """``(sum(values) + 1) / len(values)``, unrounded."""
    return (sum(values, Decimal("0")) + BIAS) / len(values)


def _month_amounts(row: RawRow) -> Dict[str, Decimal]:
    return {m: to_amount(row.get(m)) for m in input_labels()}


def quarter_averages(row: RawRow) -> Dict[str, Decimal]:
    """Unrounded Q1..Q4 of a row; empty or malformed months count as zero."""
    amounts = _month_amounts(row)
    with localcontext(amount_context(amounts.values())):
        return {
            q.label: biased_average([amounts[m] for m in q.sources])
            for q in quarter_columns()
        }


def aggregate_row(row: RawRow) -> Dict[str, Decimal]:
    """
    Compute the five aggregate columns of one row.

    Each quarter is ``round((m1 + m2 + m3 + 1) / 3, 2)``; YTD is
    ``round((Q1 + Q2 + Q3 + Q4 + 1) / 4, 2)`` over the *unrounded* quarters.
    """
    amounts = _month_amounts(row)
    with localcontext(amount_context(amounts.values())):
        quarters = quarter_averages(row)
        ytd_sources = column(YTD_LABEL).sources
        ytd = biased_average([quarters[q] for q in ytd_sources])

        out = {label: round_amount(value) for label, value in quarters.items()}
        out[YTD_LABEL] = round_amount(ytd)
    return out


def aggregate(amount_data: AmountData) -> ComputedData:
    """
    Fill Q1..Q4 and YTD for every row of every table.

    Only meant for batches that passed :func:`validate`. Returns new rows: the
    monthly cells as given plus the five computed ``Decimal`` values.
    """
    result: ComputedData = {}
    for t_id, table in amount_data.items():
        rows: Dict[str, ComputedRow] = {}
        for r_id, row in table.items():
            computed: ComputedRow = dict(row)
            computed.update(aggregate_row(row))
            rows[r_id] = computed
        result[t_id] = rows
    log.debug("Aggregated %d table(s)", len(result))
    return result


def merge_computed(
    batch_raw: Mapping[str, Mapping[str, RawRow]], computed: ComputedData
) -> ComputedData:
    """
    Overlay computed rows onto copies of the submitted rows.

    Cells that are not part of the computed data (e.g. Year) keep their
    submitted value; tables absent from ``computed`` are not returned.
    """
    merged: ComputedData = {}
    for t_id, table in computed.items():
        source = as_mapping(batch_raw.get(t_id))
        merged[t_id] = {
            r_id: {**as_mapping(source.get(r_id)), **row} for r_id, row in table.items()
        }
    return merged
