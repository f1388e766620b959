# period_tables/data_model/__init__.py
from .batch import (
    FormConfig, SubmissionResult, ValidationError,
    row_id, row_ids, table_id, table_ids, year_for_row)
from .interfaces import ColumnRole, ErrorKind, IToDict, SubmissionStatus
from .schema import (
    COLUMN_SCHEMA, ColumnSpec, computed_labels, input_labels)
__all__ = [
    "FormConfig", "SubmissionResult", "ValidationError", "row_id", "row_ids",
    "table_id", "table_ids", "year_for_row", "ColumnRole", "ErrorKind",
    "IToDict", "SubmissionStatus", "COLUMN_SCHEMA", "ColumnSpec",
    "computed_labels", "input_labels"]
