"""Validation and aggregation of yearly monthly/quarterly financial tables."""

from .controllers import (
    FormSession,
    aggregate,
    blank_batch,
    extract,
    submit_batch,
    validate,
)
from .data_model import ErrorKind, FormConfig, SubmissionResult, SubmissionStatus, ValidationError
from .utilities import configure_logging

__all__ = [
    "FormSession",
    "aggregate",
    "blank_batch",
    "extract",
    "submit_batch",
    "validate",
    "configure_logging",
    "ErrorKind",
    "FormConfig",
    "SubmissionResult",
    "SubmissionStatus",
    "ValidationError",
]
