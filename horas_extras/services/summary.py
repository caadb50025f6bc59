from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line and status message rendering."""

STATUS_OK = "Proceso completado. Sin errores."
STATUS_WITH_ERRORS = "Proceso completado con errores. Revise las columnas de error y la pestaña de salida."
STATUS_NO_FILES = "No se encontraron libros para procesar."


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # 指数表記を避ける
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY files={total}/{total} success={success} failed={failed} rows={rows}
    invalid_rows={invalid} consistency_errors={consistency} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 8, 10, 0, 0, tzinfo=timezone.utc)
        >>> render_summary_line(ProcessingResult(start_time=t, end_time=t, elapsed_seconds=2.0))
        'SUMMARY files=0/0 success=0 failed=0 rows=0 invalid_rows=0 consistency_errors=0 elapsed_sec=2'
    """
    total = result.total_files
    return (
        f"SUMMARY files={total}/{total} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"rows={result.total_rows} "
        f"invalid_rows={result.invalid_rows} "
        f"consistency_errors={result.consistency_errors} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_status(result: ProcessingResult) -> str:
    """Final user-facing status message (success vs. failure wording)."""
    if result.total_files == 0:
        return STATUS_NO_FILES
    if result.had_errors:
        return STATUS_WITH_ERRORS
    return STATUS_OK
