# period_tables/controllers/form_session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from period_tables.controllers.aggregator import aggregate, merge_computed
from period_tables.controllers.extractor import extract
from period_tables.controllers.validator import validate
from period_tables.data_model.batch import (
    FormConfig,
    RawBatch,
    SubmissionResult,
    year_for_row,
)
from period_tables.data_model.interfaces import ColumnRole, SubmissionStatus
from period_tables.data_model.schema import COLUMN_SCHEMA
from period_tables.utilities.converters_scalar import RawValue

log = logging.getLogger(__name__)

BatchSkeleton = Dict[str, Dict[str, Dict[str, RawValue]]]


def submit_batch(batch_raw: RawBatch, config: FormConfig) -> SubmissionResult:
    """
    Run extract → validate → aggregate for one submission.

    Returns an ``invalid`` result carrying only the errors when any rule is
    violated; otherwise a ``valid`` result whose ``data`` is the submitted
    rows of the configured tables with Q1..Q4/YTD filled in.
    """
    amounts = extract(batch_raw, config.tables_count)
    errors = validate(
        amounts,
        config.reference_table_id,
        restrict_mismatch_check_to_single_row=config.restrict_mismatch_check_to_single_row,
        rows_count=config.rows_count,
    )
    if errors:
        log.info("Submission invalid (%d error(s))", len(errors))
        return SubmissionResult(status=SubmissionStatus.INVALID, errors=errors)

    data = merge_computed(batch_raw, aggregate(amounts))
    log.info("Submission valid (%d table(s))", len(data))
    return SubmissionResult(status=SubmissionStatus.VALID, data=data)


def blank_batch(config: FormConfig, current_year: Optional[int] = None) -> BatchSkeleton:
    """
    Empty batch for the configured tables and rows, as the form first shows it.

    Year is filled for every row (oldest first); every other cell is ``""``.
    """
    batch: BatchSkeleton = {}
    for t_id in config.table_ids():
        batch[t_id] = {}
        for r_id in config.row_ids():
            batch[t_id][r_id] = {
                c.label: (
                    year_for_row(r_id, current_year)
                    if c.role is ColumnRole.IDENTIFIER
                    else ""
                )
                for c in COLUMN_SCHEMA
            }
    return batch


@dataclass
class FormSession:
    """
    Per-user state of an editable set of tables.

    Responsibilities:
    • Own the table/row counts (the engine itself is stateless).
    • Grow the form by one row or one table at a time.
    • Submit a batch with the current settings and remember the outcome.
    """

    config: FormConfig = field(default_factory=FormConfig)
    last_result: Optional[SubmissionResult] = None

    def add_row(self) -> FormConfig:
        self.config = self.config.with_added_row()
        log.debug("Rows: %d", self.config.rows_count)
        return self.config

    def add_table(self) -> FormConfig:
        self.config = self.config.with_added_table()
        log.debug("Tables: %d", self.config.tables_count)
        return self.config

    def blank(self, current_year: Optional[int] = None) -> BatchSkeleton:
        return blank_batch(self.config, current_year)

    def submit(self, batch_raw: RawBatch) -> SubmissionResult:
        self.last_result = submit_batch(batch_raw, self.config)
        return self.last_result
