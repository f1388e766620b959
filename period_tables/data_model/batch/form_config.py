# period_tables/data_model/batch/form_config.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Mapping

from .batch_ids import REFERENCE_TABLE_ID, row_ids, table_ids


@dataclass(frozen=True)
class FormConfig:
    """
    Session-scoped settings supplied by the caller on every call.

    ``tables_count`` / ``rows_count`` are the number of tables and rows the
    caller currently shows. ``restrict_mismatch_check_to_single_row`` turns the
    cross-table period check off as soon as more than one row is configured;
    by default the check always runs.
    """

    tables_count: int = 1
    rows_count: int = 1
    reference_table_id: str = REFERENCE_TABLE_ID
    restrict_mismatch_check_to_single_row: bool = False

    def __post_init__(self) -> None:
        if self.tables_count < 1:
            raise ValueError(f"tables_count must be >= 1, got {self.tables_count}")
        if self.rows_count < 1:
            raise ValueError(f"rows_count must be >= 1, got {self.rows_count}")

    def with_added_row(self) -> FormConfig:
        return replace(self, rows_count=self.rows_count + 1)

    def with_added_table(self) -> FormConfig:
        return replace(self, tables_count=self.tables_count + 1)

    def table_ids(self) -> List[str]:
        return table_ids(self.tables_count)

    def row_ids(self) -> List[str]:
        return row_ids(self.rows_count)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FormConfig:
        """
        Build a config from a plain mapping (e.g. session storage).

        Raises:
            TypeError: on unknown keys or values of the wrong type.
        """
        unknown = sorted(set(data) - set(_FIELD_TYPES))
        if unknown:
            raise TypeError(f"Unknown FormConfig fields: {unknown}")
        for name, value in data.items():
            # bool is a subclass of int; counts must be real ints
            if type(value) is not _FIELD_TYPES[name]:
                raise TypeError(
                    f"{name} must be {_FIELD_TYPES[name].__name__}, "
                    f"got {type(value).__name__}"
                )
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_FIELD_TYPES: Dict[str, type] = {
    "tables_count": int,
    "rows_count": int,
    "reference_table_id": str,
    "restrict_mismatch_check_to_single_row": bool,
}
