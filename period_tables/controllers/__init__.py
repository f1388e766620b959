from .aggregator import aggregate, aggregate_row, merge_computed, round_amount
from .extractor import extract
from .form_session import FormSession, blank_batch, submit_batch
from .validator import has_gap, is_dense_run, rows_misaligned, validate

__all__ = [
    "aggregate",
    "aggregate_row",
    "merge_computed",
    "round_amount",
    "extract",
    "FormSession",
    "blank_batch",
    "submit_batch",
    "has_gap",
    "is_dense_run",
    "rows_misaligned",
    "validate",
]
