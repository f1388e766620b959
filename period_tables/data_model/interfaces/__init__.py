"""
Interfaces and Enums for the period tables data model.
"""

from .enum_column_role import ColumnRole
from .enum_error_kind import ErrorKind
from .enum_submission_status import SubmissionStatus
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "ColumnRole",
    "ErrorKind",
    "SubmissionStatus",
    "IToDict",
    "RecursiveDictStr",
]
