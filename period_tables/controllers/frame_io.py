"""
Tabular import/export of batches.

A batch is laid out as one DataFrame row per (table, row) pair with the
columns ``table_id``, ``row_id`` followed by the eighteen table labels. This is
what users paste into or export from a spreadsheet; values are kept as text so
an entered ``0`` stays distinct from an empty cell.
"""

# period_tables/controllers/frame_io.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping

import pandas as pd

from period_tables.data_model.batch import RawBatch
from period_tables.data_model.schema import all_labels
from period_tables.utilities.converters_scalar import RawValue

log = logging.getLogger(__name__)

KEY_COLUMNS = ["table_id", "row_id"]


def batch_to_frame(batch: Mapping[str, Mapping[str, Mapping[str, object]]]) -> pd.DataFrame:
    """One row per (table, row); absent cells become ``""``."""
    records: List[Dict[str, object]] = []
    for t_id, table in batch.items():
        for r_id, row in table.items():
            record: Dict[str, object] = {"table_id": t_id, "row_id": r_id}
            for label in all_labels():
                value = row.get(label)
                record[label] = "" if value is None else value
            records.append(record)
    return pd.DataFrame(records, columns=KEY_COLUMNS + list(all_labels()))


def _cell(value: object) -> RawValue:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, str):
        return value.strip()
    return value


def frame_to_batch(df: pd.DataFrame) -> RawBatch:
    """
    Rebuild the nested batch from a frame made by :func:`batch_to_frame`.

    Table and row order follow first appearance in the frame. Label columns
    missing from the frame are simply absent from the rows; NaN becomes ``""``.

    Raises
    ------
    ValueError
        If ``table_id`` or ``row_id`` is missing.
    """
    missing = [c for c in KEY_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Batch frame is missing columns: {missing}")

    labels = [label for label in all_labels() if label in df.columns]
    batch: Dict[str, Dict[str, Dict[str, RawValue]]] = {}
    for _, r in df.iterrows():
        t_id = str(r["table_id"]).strip()
        r_id = str(r["row_id"]).strip()
        batch.setdefault(t_id, {})[r_id] = {label: _cell(r[label]) for label in labels}
    return batch


def load_batch(path: Path) -> RawBatch:
    """
    Load a batch from ``.xlsx``/``.xls`` (``pd.read_excel``) or ``.csv`` (``pd.read_csv``).

    Raises
    ------
    ValueError
        For any other file suffix, or when key columns are missing.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xls"):
        df = pd.read_excel(path, dtype=str, keep_default_na=False)
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported batch file type: {path.suffix!r}")
    batch = frame_to_batch(df)
    log.info("Loaded %d table(s) from %s", len(batch), path)
    return batch


def save_batch(batch: Mapping[str, Mapping[str, Mapping[str, object]]], path: Path) -> Path:
    """Write a batch (typically ``SubmissionResult.data``) to ``.csv`` or ``.xlsx``."""
    path = Path(path)
    df = batch_to_frame(batch)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".xlsx":
        df.to_excel(path, index=False)
    else:
        raise ValueError(f"Unsupported batch file type: {path.suffix!r}")
    log.info("Wrote %d row(s) to %s", len(df), path)
    return path
