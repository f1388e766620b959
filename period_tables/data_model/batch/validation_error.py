# period_tables/data_model/batch/validation_error.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import ErrorKind, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class ValidationError:
    """A rule violation attached to one table."""

    table_id: str
    kind: ErrorKind

    @property
    def message(self) -> str:
        return self.kind.message

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "table_id": self.table_id,
            "kind": self.kind.value,
            "message": self.message,
        }


if TYPE_CHECKING:
    _is_i_to_dict: type[IToDict] = ValidationError
