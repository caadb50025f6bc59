from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.config_models import ColumnLayout
from ..models.entry import RawRow

"""Workbook reader.

Reads the input sheet with pandas (no header inference) and turns every data row
into a RawRow of plain text:

- row 1 is the header, data starts at row 2
- RawRow.row_index is the spreadsheet row number, so results can be written back
- rows whose input cells (date, start, end, detail) are all blank are skipped
- date cells -> YYYY-MM-DD, time cells -> HH:MM:SS, blanks -> ""
"""

__all__ = [
    "SheetNotFoundError",
    "WorkbookLockedError",
    "read_excel_file",
    "extract_rows",
    "cell_to_text",
]

LOCKED_MESSAGE = "El archivo Excel está abierto en otra aplicación. Ciérrelo e intente de nuevo."


class SheetNotFoundError(Exception):
    """Raised when required sheets are missing from a workbook."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        detail = " ".join(f"Falta '{name}'." for name in missing)
        super().__init__(f"Pestañas no encontradas. {detail}")


class WorkbookLockedError(Exception):
    """Raised when the workbook cannot be opened or saved because another program holds it."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(LOCKED_MESSAGE)


def read_excel_file(path: Path, target_sheets: Iterable[str] | None = None) -> dict[str, pd.DataFrame]:
    """Read a workbook returning raw DataFrames keyed by sheet name.

    Parameters
    ----------
    path: workbook path (.xlsx / .xlsm)
    target_sheets: sheets that must exist; only these are parsed (None = all sheets)

    Raises
    ------
    SheetNotFoundError: a target sheet does not exist
    WorkbookLockedError: the file is locked by another process
    """
    try:
        xls = pd.ExcelFile(path)
    except PermissionError as e:
        raise WorkbookLockedError(path) from e
    with xls:
        names = [str(n) for n in xls.sheet_names]
        wanted = list(target_sheets) if target_sheets is not None else names
        missing = [s for s in wanted if s not in names]
        if missing:
            raise SheetNotFoundError(missing)
        dfs: dict[str, pd.DataFrame] = {}
        for name in wanted:
            # NA 文字列 ("NA", "null" 等) をそのまま文字列として残す
            dfs[name] = xls.parse(name, header=None, keep_default_na=False, na_values=[""])
    return dfs


def cell_to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    if value is pd.NaT:
        return ""
    if isinstance(value, datetime):
        # 時刻部分が 00:00:00 の datetime は日付セルとみなす
        if value.time() == time(0, 0):
            return value.strftime("%Y-%m-%d")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _cell(raw: pd.Series, column: int) -> str:
    # column は 1 始まり (A=1)
    pos = column - 1
    if pos >= len(raw):
        return ""
    return cell_to_text(raw.iloc[pos])


def extract_rows(df: pd.DataFrame, columns: ColumnLayout | None = None) -> list[RawRow]:
    """Convert a raw input-sheet DataFrame into RawRows (header row excluded)."""
    layout = columns or ColumnLayout()
    rows: list[RawRow] = []
    # index 0 = header (row 1)
    for pos in range(1, df.shape[0]):
        raw = df.iloc[pos]
        row = RawRow(
            row_index=pos + 1,
            date_text=_cell(raw, layout.date),
            start_text=_cell(raw, layout.start),
            end_text=_cell(raw, layout.end),
            detail=_cell(raw, layout.detail),
        )
        if not (row.date_text or row.start_text or row.end_text or row.detail):
            continue
        rows.append(row)
    return rows
