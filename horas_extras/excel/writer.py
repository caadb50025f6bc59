from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook

from ..models.config_models import ColumnLayout
from ..models.report import BatchReport
from .reader import SheetNotFoundError, WorkbookLockedError

"""Workbook writer.

Writes a BatchReport back into the workbook it came from:

- input sheet: weekday label and error text per row (output columns are cleared
  for every data row first, so a re-run never leaves stale values)
- output sheet: cleared, header "Errores" in A1, aggregate messages from A2 down

.xlsm workbooks are opened with keep_vba so macros survive the save.
"""

__all__ = [
    "OUTPUT_HEADER",
    "write_report",
]

OUTPUT_HEADER = "Errores"


def write_report(
    path: Path,
    report: BatchReport,
    input_sheet: str = "Entrada",
    output_sheet: str = "Salida",
    columns: ColumnLayout | None = None,
) -> None:
    """Write a BatchReport into the workbook and save it in place.

    Args:
        path: Workbook path (.xlsx / .xlsm)
        report: Result of run_batch for the input sheet rows
        input_sheet: Sheet receiving weekday labels and row errors
        output_sheet: Sheet receiving the aggregate messages
        columns: Column layout (defaults when None)

    Raises:
        SheetNotFoundError: input or output sheet is missing
        WorkbookLockedError: the file cannot be opened or saved
    """
    layout = columns or ColumnLayout()
    try:
        wb = load_workbook(path, keep_vba=path.suffix.lower() == ".xlsm")
    except PermissionError as e:
        raise WorkbookLockedError(path) from e

    try:
        missing = [s for s in (input_sheet, output_sheet) if s not in wb.sheetnames]
        if missing:
            raise SheetNotFoundError(missing)

        ws_in = wb[input_sheet]
        for row in range(2, ws_in.max_row + 1):
            ws_in.cell(row=row, column=layout.weekday).value = None
            ws_in.cell(row=row, column=layout.errors).value = None
        for row_report in report.row_reports:
            ws_in.cell(row=row_report.row_index, column=layout.weekday).value = row_report.weekday_label
            ws_in.cell(row=row_report.row_index, column=layout.errors).value = row_report.text or None

        ws_out = wb[output_sheet]
        if ws_out.max_row > 0:
            ws_out.delete_rows(1, ws_out.max_row)
        ws_out.cell(row=1, column=1).value = OUTPUT_HEADER
        for offset, message in enumerate(report.aggregate_messages, start=2):
            ws_out.cell(row=offset, column=1).value = message

        try:
            wb.save(path)
        except PermissionError as e:
            raise WorkbookLockedError(path) from e
    finally:
        wb.close()
