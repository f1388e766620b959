# period_tables/data_model/batch/submission_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List

from ..interfaces import IToDict, RecursiveDictStr, SubmissionStatus
from .validation_error import ValidationError

ComputedRow = Dict[str, object]
ComputedData = Dict[str, Dict[str, ComputedRow]]


@dataclass(frozen=True)
class SubmissionResult:
    """
    Outcome of one submission.

    ``data`` holds the submitted rows with Q1..Q4/YTD filled in and is empty
    whenever ``errors`` is not.
    """

    status: SubmissionStatus
    errors: List[ValidationError] = field(default_factory=list)
    data: ComputedData = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.status is SubmissionStatus.VALID

    @property
    def message(self) -> str:
        return self.status.message

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """Convert to plain strings for serialization (Decimals via ``str``)."""
        return {
            "status": self.status.value,
            "errors": [e.to_dict() for e in self.errors],
            "data": {
                t_id: {
                    r_id: {label: _cell_str(v) for label, v in row.items()}
                    for r_id, row in table.items()
                }
                for t_id, table in self.data.items()
            },
        }


def _cell_str(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


if TYPE_CHECKING:
    _is_i_to_dict: type[IToDict] = SubmissionResult
