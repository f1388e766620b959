from .batch_ids import (
    REFERENCE_TABLE_ID,
    AmountData,
    AmountRow,
    RawBatch,
    RawRow,
    RawTable,
    is_table_id,
    parse_index,
    row_id,
    row_ids,
    table_id,
    table_ids,
    year_for_row,
)
from .form_config import FormConfig
from .submission_result import ComputedData, ComputedRow, SubmissionResult
from .validation_error import ValidationError

__all__ = [
    "REFERENCE_TABLE_ID",
    "AmountData",
    "AmountRow",
    "RawBatch",
    "RawRow",
    "RawTable",
    "ComputedData",
    "ComputedRow",
    "FormConfig",
    "SubmissionResult",
    "ValidationError",
    "is_table_id",
    "parse_index",
    "row_id",
    "row_ids",
    "table_id",
    "table_ids",
    "year_for_row",
]
