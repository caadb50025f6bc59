from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..core.batch import run_batch
from ..excel.reader import SheetNotFoundError, WorkbookLockedError, extract_rows, read_excel_file
from ..excel.writer import write_report
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import CheckerConfig
from ..models.error_record import WORKBOOK_LEVEL_ROW, ErrorRecord
from ..models.errors import kind_of
from ..models.processing_result import ProcessingResult
from ..models.report import BatchReport
from ..models.workbook import Workbook, WorkbookStatus
from .progress import ProgressTracker

"""Run orchestration over a directory of workbooks.

For every workbook (sorted by name):
1. read the input and output sheets (both must exist)
2. run the validation core over the input rows
3. record every finding in the error log buffer
4. write weekday labels, row errors and the aggregate block back (unless check-only)

A workbook that cannot be processed is marked FAILED and the run continues with the
next one. Only directory-level problems abort the run (ProcessingError).
"""

__all__ = [
    "WORKBOOK_SUFFIXES",
    "ProcessingError",
    "scan_excel_files",
    "process_workbook",
    "process_all",
]

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIXES = (".xlsx", ".xlsm")


class ProcessingError(Exception):
    """Fatal error that prevents the run (e.g. unreadable source directory)."""


def scan_excel_files(directory: Path) -> list[Path]:
    """Scan directory for workbooks (non-recursive, sorted by name).

    Excel owner/lock files (`~$name.xlsx`) are ignored.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")
    try:
        return sorted(
            p
            for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in WORKBOOK_SUFFIXES and not p.name.startswith("~$")
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def _records_for(file_name: str, sheet: str, report: BatchReport) -> list[ErrorRecord]:
    records: list[ErrorRecord] = []
    for row_report in report.row_reports:
        for message in row_report.error_messages:
            records.append(
                ErrorRecord.create(file_name, sheet, row_report.row_index, kind_of(message).value, message)
            )
    for message in report.aggregate_messages:
        records.append(
            ErrorRecord.create(file_name, sheet, WORKBOOK_LEVEL_ROW, kind_of(message).value, message)
        )
    return records


def _failed(path: Path, start: datetime, error_log: ErrorLogBuffer, sheet: str, error_type: str, reason: str) -> Workbook:
    error_log.append(ErrorRecord.create(path.name, sheet, WORKBOOK_LEVEL_ROW, error_type, reason))
    logger.error(f"{path.name}: {reason}")
    return Workbook(
        path=path,
        name=path.name,
        status=WorkbookStatus.FAILED,
        start_time=start,
        end_time=datetime.now(UTC),
        error=reason,
    )


def process_workbook(
    path: Path,
    config: CheckerConfig,
    error_log: ErrorLogBuffer,
    write_back: bool = True,
) -> Workbook:
    """Validate one workbook and (optionally) write the results into it."""
    start = datetime.now(UTC)
    sheet = config.input_sheet
    try:
        dfs = read_excel_file(path, target_sheets=[config.input_sheet, config.output_sheet])
        df = dfs[config.input_sheet]
        rows = extract_rows(df, config.columns)
        if not rows:
            logger.info(f"{path.name}: Pestaña '{sheet}' está vacía o solo tiene encabezado.")
            # 入力が空白でも前回の出力 (E/F 列, Salida) が残っていれば消す
            cleared = write_back and df.shape[0] > 1
            if cleared:
                write_report(
                    path, run_batch([], config.validation), config.input_sheet, config.output_sheet, config.columns
                )
            return Workbook(
                path=path,
                name=path.name,
                status=WorkbookStatus.EMPTY,
                start_time=start,
                end_time=datetime.now(UTC),
                written=cleared,
            )

        logger.info(f"{path.name}: Procesando {len(rows)} registros en la pestaña '{sheet}'...")
        report = run_batch(rows, config.validation)
        error_log.extend(_records_for(path.name, sheet, report))

        for row_report in report.row_reports:
            if row_report.text:
                logger.debug(f"{path.name} row={row_report.row_index}: {row_report.text}")
        for message in report.aggregate_messages:
            logger.warning(f"{path.name}: {message}")

        if write_back:
            write_report(path, report, config.input_sheet, config.output_sheet, config.columns)

        status = WorkbookStatus.INVALID if report.had_errors else WorkbookStatus.VALID
        logger.info(
            f"{path.name}: status={status.value} rows={len(report.row_reports)} "
            f"invalid_rows={report.invalid_rows} consistency_errors={len(report.aggregate_messages)}"
        )
        return Workbook(
            path=path,
            name=path.name,
            status=status,
            report=report,
            start_time=start,
            end_time=datetime.now(UTC),
            written=write_back,
        )
    except SheetNotFoundError as e:
        return _failed(path, start, error_log, sheet, "SHEET_NOT_FOUND", str(e))
    except WorkbookLockedError as e:
        return _failed(path, start, error_log, "<FILE_LEVEL>", "FILE_LOCKED", str(e))
    except Exception as e:
        return _failed(
            path, start, error_log, "<FILE_LEVEL>", "PROCESSING_ERROR",
            f"Error inesperado al procesar el archivo: {e}",
        )


def process_all(
    config: CheckerConfig,
    write_back: bool = True,
    error_log: ErrorLogBuffer | None = None,
) -> ProcessingResult:
    """Process every workbook in config.source_directory.

    Raises:
        ProcessingError: the source directory is missing or unreadable
    """
    start_time = datetime.now(UTC)
    buffer = error_log if error_log is not None else ErrorLogBuffer()

    file_paths = scan_excel_files(Path(config.source_directory))

    workbooks: list[Workbook] = []
    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            wb = process_workbook(file_path, config, buffer, write_back=write_back)
            workbooks.append(wb)
            progress.finish_file(status=wb.status.value, invalid=wb.invalid_rows)

    log_path = None
    try:
        log_path = buffer.flush()
    except OSError as e:
        # エラーログ書き込み失敗で実行全体は失敗させない
        logger.warning(f"error log flush failed: {e}")
    if log_path is not None:
        logger.info(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    return ProcessingResult(
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        workbooks=workbooks,
        error_log_path=str(log_path) if log_path is not None else None,
    )
