from __future__ import annotations

import re
from datetime import datetime, time
from pathlib import Path

from openpyxl import Workbook as XlWorkbook
from openpyxl import load_workbook

from horas_extras.cli import main as cli_main

"""End-to-end run over real workbooks: results written back, exit code 0."""


def _typed_workbook(path: Path, rows: list[list[object]]) -> Path:
    # 日付・時刻を Excel の日付/時刻セルとして保存する
    wb = XlWorkbook()
    ws = wb.active
    ws.title = "Entrada"
    ws.append(["Fecha", "Hora desde", "Hora hasta", "Detalle"])
    for row in rows:
        ws.append(row)
    out = wb.create_sheet("Salida")
    out["A1"] = "Errores"
    wb.save(path)
    wb.close()
    return path


def test_clean_run_writes_weekday_labels(write_config, temp_workdir: Path, capsys):
    path = _typed_workbook(
        temp_workdir / "data" / "enero.xlsx",
        [
            [datetime(2024, 1, 8), time(7, 0), time(9, 0), "guardia"],
            [datetime(2024, 1, 8), time(16, 42), time(18, 0), "cierre"],
            [datetime(2024, 1, 10), time(17, 0), time(19, 30), None],
            [datetime(2024, 1, 13), time(8, 0), time(14, 0), "sábado"],
            [datetime(2024, 1, 13), time(14, 0), time(16, 0), None],
        ],
    )

    code = cli_main([])

    out = capsys.readouterr().out
    assert code == 0
    assert "INFO Proceso completado. Sin errores." in out
    assert re.search(r"SUMMARY files=1/1 success=1 failed=0 rows=5 invalid_rows=0 consistency_errors=0", out)

    wb = load_workbook(path)
    ws = wb["Entrada"]
    assert [ws.cell(row=r, column=5).value for r in range(2, 7)] == [
        "lunes",
        "lunes",
        "miércoles",
        "sábado",
        "sábado",
    ]
    assert all(ws.cell(row=r, column=6).value is None for r in range(2, 7))
    assert [[c.value for c in row] for row in wb["Salida"].iter_rows()] == [["Errores"]]
    # 入力列は変更しない
    assert ws.cell(row=2, column=4).value == "guardia"


def test_text_cells_are_accepted(write_config, workbook_factory):
    path = workbook_factory(
        "texto.xlsx",
        [
            ["08/01/2024", "17:00", "18:00", "a"],
            ["2024-01-08", "18:00:00", "19:00", "b"],
        ],
    )
    assert cli_main([]) == 0
    ws = load_workbook(path)["Entrada"]
    assert ws.cell(row=2, column=5).value == "lunes"
    assert ws.cell(row=3, column=5).value == "lunes"


def test_blank_middle_rows_keep_row_numbers(write_config, temp_workdir: Path):
    path = _typed_workbook(
        temp_workdir / "data" / "huecos.xlsx",
        [
            [datetime(2024, 1, 8), time(17, 0), time(18, 0), None],
            [None, None, None, None],
            ["no es fecha", time(17, 0), time(18, 0), None],
        ],
    )

    assert cli_main([]) == 2

    ws = load_workbook(path)["Entrada"]
    assert ws.cell(row=2, column=6).value is None
    assert ws.cell(row=3, column=6).value is None
    assert ws.cell(row=4, column=6).value == "Fecha invalida"


def test_xlsm_workbook_is_processed(write_config, workbook_factory):
    workbook_factory("macro.xlsm", [["08/01/2024", "17:00", "18:00"]])
    assert cli_main(["--check-only"]) == 0
