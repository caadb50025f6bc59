from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path

import pandas as pd
import pytest

from horas_extras.excel.reader import (
    SheetNotFoundError,
    cell_to_text,
    extract_rows,
    read_excel_file,
)
from horas_extras.models.config_models import ColumnLayout
from horas_extras.models.entry import RawRow


def test_read_and_extract_rows(workbook_factory):
    path = workbook_factory(
        "horas.xlsx",
        [
            ["08/01/2024", "08:00", "09:00", "soporte"],
            ["09/01/2024", "17:00", "19:00"],
        ],
    )
    dfs = read_excel_file(path, target_sheets=["Entrada", "Salida"])
    rows = extract_rows(dfs["Entrada"])

    assert rows == [
        RawRow(row_index=2, date_text="08/01/2024", start_text="08:00", end_text="09:00", detail="soporte"),
        RawRow(row_index=3, date_text="09/01/2024", start_text="17:00", end_text="19:00", detail=""),
    ]


def test_read_excel_file_missing_sheets(workbook_factory):
    path = workbook_factory("sin_salida.xlsx", [["08/01/2024", "08:00", "09:00"]], output_sheet=None)
    with pytest.raises(SheetNotFoundError) as e:
        read_excel_file(path, target_sheets=["Entrada", "Salida"])
    assert e.value.missing == ["Salida"]
    assert str(e.value) == "Pestañas no encontradas. Falta 'Salida'."


def test_read_excel_file_missing_both_sheets(workbook_factory):
    path = workbook_factory("vacio.xlsx", [], input_sheet=None, output_sheet=None)
    with pytest.raises(SheetNotFoundError) as e:
        read_excel_file(path, target_sheets=["Entrada", "Salida"])
    assert str(e.value) == "Pestañas no encontradas. Falta 'Entrada'. Falta 'Salida'."


def test_header_only_sheet_has_no_rows(workbook_factory):
    path = workbook_factory("solo_encabezado.xlsx", [])
    dfs = read_excel_file(path, target_sheets=["Entrada"])
    assert extract_rows(dfs["Entrada"]) == []


def test_blank_rows_are_skipped_but_row_numbers_kept(workbook_factory):
    path = workbook_factory(
        "huecos.xlsx",
        [
            ["08/01/2024", "17:00", "18:00"],
            [None, None, None],
            ["09/01/2024", "17:00", "18:00"],
        ],
    )
    rows = extract_rows(read_excel_file(path, target_sheets=["Entrada"])["Entrada"])
    assert [r.row_index for r in rows] == [2, 4]


def test_partially_filled_row_is_kept(workbook_factory):
    path = workbook_factory("parcial.xlsx", [[None, "17:00", None]])
    rows = extract_rows(read_excel_file(path, target_sheets=["Entrada"])["Entrada"])
    assert rows == [RawRow(row_index=2, date_text="", start_text="17:00", end_text="")]


def test_native_date_and_time_cells_become_text(workbook_factory):
    path = workbook_factory(
        "nativo.xlsx",
        [[datetime(2024, 1, 8), time(8, 0), time(9, 30), "x"]],
    )
    rows = extract_rows(read_excel_file(path, target_sheets=["Entrada"])["Entrada"])
    assert rows[0].date_text == "2024-01-08"
    assert rows[0].start_text == "08:00:00"
    assert rows[0].end_text == "09:30:00"


def test_na_like_strings_are_kept_as_text(workbook_factory):
    path = workbook_factory("na.xlsx", [["NA", "null", "N/A"]])
    rows = extract_rows(read_excel_file(path, target_sheets=["Entrada"])["Entrada"])
    assert (rows[0].date_text, rows[0].start_text, rows[0].end_text) == ("NA", "null", "N/A")


def test_extract_rows_custom_layout():
    df = pd.DataFrame(
        [
            ["Detalle", "Fecha", "Desde", "Hasta"],
            ["guardia", "13/01/2024", "10:00", "12:00"],
        ]
    )
    layout = ColumnLayout(detail=1, date=2, start=3, end=4, weekday=5, errors=6)
    rows = extract_rows(df, layout)
    assert rows == [
        RawRow(row_index=2, date_text="13/01/2024", start_text="10:00", end_text="12:00", detail="guardia")
    ]


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (float("nan"), ""),
        (pd.NaT, ""),
        (datetime(2024, 1, 8, 0, 0), "2024-01-08"),
        (datetime(2024, 1, 8, 17, 30), "2024-01-08 17:30:00"),
        (pd.Timestamp("2024-01-08"), "2024-01-08"),
        (date(2024, 1, 8), "2024-01-08"),
        (time(17, 5), "17:05:00"),
        (5.0, "5"),
        ("  08:00 ", "08:00"),
    ],
)
def test_cell_to_text(value, expected):
    assert cell_to_text(value) == expected


def test_read_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_excel_file(tmp_path / "nope.xlsx")
