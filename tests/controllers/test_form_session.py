# tests/controllers/test_form_session.py
from __future__ import annotations

from decimal import Decimal
from typing import get_type_hints

import pytest

import period_tables.controllers.form_session as fs
from period_tables.controllers.form_session import FormSession, blank_batch, submit_batch
from period_tables.data_model.batch import FormConfig, ValidationError
from period_tables.data_model.interfaces import ErrorKind, SubmissionStatus


def _filled(batch: dict, table: str, row: str, **months) -> dict:
    batch[table][row].update(months)
    return batch


def test_blank_batch_layout():
    """Configured tables, rows oldest first, Year filled and everything else empty."""
    cfg = FormConfig(tables_count=2, rows_count=3)

    batch = blank_batch(cfg, current_year=2024)

    assert list(batch) == ["table_0", "table_1"]
    assert list(batch["table_1"]) == ["row_3", "row_2", "row_1"]
    assert [r["Year"] for r in batch["table_0"].values()] == [2022, 2023, 2024]
    row = batch["table_0"]["row_1"]
    assert len(row) == 18
    assert all(v == "" for k, v in row.items() if k != "Year")


def test_submit_valid_batch_fills_computed_columns():
    cfg = FormConfig(tables_count=2)
    batch = blank_batch(cfg, current_year=2024)
    _filled(batch, "table_0", "row_1", Jan="10", Feb="20", Mar="30")
    _filled(batch, "table_1", "row_1", Jan="1", Feb="2", Mar="3")

    result = submit_batch(batch, cfg)

    assert result.status is SubmissionStatus.VALID
    assert result.errors == []
    row0 = result.data["table_0"]["row_1"]
    assert row0["Year"] == 2024
    assert row0["Jan"] == "10"
    assert row0["Q1"] == Decimal("20.33")
    assert row0["Q2"] == Decimal("0.33")
    assert result.data["table_1"]["row_1"]["Q1"] == Decimal("2.33")
    assert batch["table_0"]["row_1"]["Q1"] == "", "submitted batch is not mutated"


def test_submit_invalid_batch_returns_only_errors(monkeypatch):
    """No computed values surface (and aggregation never runs) when validation fails."""
    cfg = FormConfig(tables_count=2)
    batch = blank_batch(cfg, current_year=2024)
    _filled(batch, "table_0", "row_1", Jan="10")
    _filled(batch, "table_1", "row_1", Feb="20")

    def _boom(*_a, **_k):
        raise AssertionError("aggregate must not run on invalid input")

    monkeypatch.setattr(fs, "aggregate", _boom)

    result = submit_batch(batch, cfg)

    assert result.status is SubmissionStatus.INVALID
    assert result.message == "Invalid"
    assert result.errors == [ValidationError("table_1", ErrorKind.PERIOD_MISMATCH)]
    assert result.data == {}


def test_submit_ignores_tables_beyond_configuration():
    cfg = FormConfig(tables_count=1)
    batch = blank_batch(FormConfig(tables_count=2), current_year=2024)
    _filled(batch, "table_0", "row_1", Jan="1")
    _filled(batch, "table_1", "row_1", Feb="1", Apr="1")

    result = submit_batch(batch, cfg)

    assert result.is_valid
    assert list(result.data) == ["table_0"]


@pytest.mark.parametrize("restrict,expected_valid", [(False, False), (True, True)])
def test_submit_honours_single_row_restriction(restrict, expected_valid):
    cfg = FormConfig(tables_count=2, rows_count=2, restrict_mismatch_check_to_single_row=restrict)
    batch = blank_batch(cfg, current_year=2024)
    _filled(batch, "table_0", "row_1", Jan="1")
    _filled(batch, "table_1", "row_1", Jan="1", Feb="2")

    assert submit_batch(batch, cfg).is_valid is expected_valid


def test_form_session_grows_and_remembers_last_result():
    session = FormSession()

    session.add_row()
    cfg = session.add_table()
    batch = session.blank(current_year=2024)
    _filled(batch, "table_0", "row_2", Dec="5")
    _filled(batch, "table_0", "row_1", Jan="6")
    _filled(batch, "table_1", "row_2", Dec="1")
    _filled(batch, "table_1", "row_1", Jan="2")
    result = session.submit(batch)

    assert (cfg.tables_count, cfg.rows_count) == (2, 2)
    assert session.last_result is result
    assert result.is_valid
    assert result.data["table_0"]["row_2"]["Year"] == 2023
    assert result.data["table_0"]["row_2"]["Q4"] == Decimal("2.00")


def test_submit_with_thirty_digit_month_is_valid():
    """Very large entered amounts are still aggregated."""
    result = submit_batch({"table_0": {"row_1": {"Jan": "9" * 30}}}, FormConfig())

    assert result.is_valid
    assert result.data["table_0"]["row_1"]["Q1"] == Decimal("3" * 30 + ".33")


def test_submit_with_malformed_rows_reads_them_as_empty():
    batch = {"table_0": {"row_2": None, "row_1": {"Year": 2024, "Jan": "3"}}}

    result = submit_batch(batch, FormConfig(rows_count=2))

    assert result.is_valid
    assert result.data["table_0"]["row_2"]["Q1"] == Decimal("0.33")
    assert "Year" not in result.data["table_0"]["row_2"]
    assert result.data["table_0"]["row_1"]["Year"] == 2024


def test_blank_return_type_is_declared():
    hints = get_type_hints(FormSession.blank)
    assert hints["return"] == fs.BatchSkeleton
    assert get_type_hints(blank_batch)["return"] == fs.BatchSkeleton
