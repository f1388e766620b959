from .column_schema import (
    COLUMN_SCHEMA,
    YEAR_LABEL,
    YTD_LABEL,
    ColumnSpec,
    all_labels,
    column,
    computed_labels,
    input_labels,
    is_input_label,
    quarter_columns,
)

__all__ = [
    "COLUMN_SCHEMA",
    "YEAR_LABEL",
    "YTD_LABEL",
    "ColumnSpec",
    "all_labels",
    "column",
    "computed_labels",
    "input_labels",
    "is_input_label",
    "quarter_columns",
]
