# period_tables/controllers/extractor.py
from __future__ import annotations

import logging
from typing import Optional

from period_tables.data_model.batch import AmountData, RawBatch, is_table_id, table_ids
from period_tables.data_model.schema import is_input_label
from period_tables.utilities.converters_scalar import as_mapping

log = logging.getLogger(__name__)


def extract(batch_raw: RawBatch, tables_count: Optional[int] = None) -> AmountData:
    """
    Keep only the entered monthly amounts of a submitted batch.

    Parameters
    ----------
    batch_raw : RawBatch
        Submitted values keyed ``table_id -> row_id -> column label -> raw value``.
        Keys that are not table ids (buttons, stray form values) are ignored.
    tables_count : int, optional
        Number of tables currently configured by the caller. When given, only
        ``table_0 .. table_<tables_count - 1>`` are kept, in that order.

    Returns
    -------
    AmountData
        New nested dicts of the same shape holding only the twelve monthly
        columns; Year, Q1..Q4, YTD and unknown labels are dropped. A table or
        row that is not a mapping reads as empty. The input is never mutated.
    """
    if tables_count is None:
        wanted = [t_id for t_id in batch_raw if is_table_id(t_id)]
    else:
        wanted = [t_id for t_id in table_ids(tables_count) if t_id in batch_raw]

    result: AmountData = {}
    for t_id in wanted:
        table = as_mapping(batch_raw[t_id])
        result[t_id] = {
            r_id: {
                label: value
                for label, value in as_mapping(row).items()
                if is_input_label(label)
            }
            for r_id, row in table.items()
        }
    log.debug(
        "Extracted %d table(s), %d row(s)",
        len(result),
        sum(len(t) for t in result.values()),
    )
    return result
