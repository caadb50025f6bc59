from __future__ import annotations

from ..models.config_models import ValidationConfig
from ..models.entry import Entry, RawRow
from ..models.errors import (
    MSG_INVALID_DATE,
    MSG_INVALID_END_TIME,
    MSG_INVALID_ORDERING,
    MSG_INVALID_START_TIME,
    band_overlap_message,
)
from ..models.report import RowReport, RowValidation
from .parser import parse_date, parse_time, weekday_label

"""Row validator.

Rule order (each failure appends one message; rules that depend on a failed rule
are skipped, independent rules still run):

1. date must parse                      -> "Fecha invalida"
2. start time must parse                -> "Hora desde invalida"
3. end time must parse                  -> "Hora hasta invalida"
4. start < end (both times parsed)      -> "Hora desde debe ser menor a Hora hasta"
5. weekday rows must not touch the reference band [band_start, band_end)

The message order is part of the output contract.
"""

__all__ = [
    "validate_row",
    "overlaps_band",
]


def overlaps_band(start, end, config: ValidationConfig) -> bool:
    """True when [start, end) intersects [band_start, band_end)."""
    return start < config.band_end and end > config.band_start


def validate_row(row: RawRow, config: ValidationConfig | None = None) -> RowValidation:
    cfg = config or ValidationConfig()
    errors: list[str] = []
    notices: list[str] = []

    day = parse_date(row.date_text, cfg.date_formats)
    label = weekday_label(day, cfg.weekday_labels) if day is not None else None
    if day is None:
        errors.append(MSG_INVALID_DATE)

    start = parse_time(row.start_text, cfg.time_formats)
    if start is None:
        errors.append(MSG_INVALID_START_TIME)

    # 終了時刻は開始時刻と独立に検証する (両方不正なら両方報告)
    end = parse_time(row.end_text, cfg.time_formats)
    if end is None:
        errors.append(MSG_INVALID_END_TIME)

    ordered = False
    if start is not None and end is not None:
        ordered = start < end
        if not ordered:
            errors.append(MSG_INVALID_ORDERING)

    if day is not None and day.weekday() < 5 and ordered and overlaps_band(start, end, cfg):
        message = band_overlap_message(
            cfg.band_start.strftime("%H:%M"), cfg.band_end.strftime("%H:%M")
        )
        if cfg.band_overlap_is_error:
            errors.append(message)
        else:
            notices.append(message)

    report = RowReport(
        row_index=row.row_index,
        weekday_label=label,
        error_messages=tuple(errors),
        notices=tuple(notices),
    )
    if errors:
        return RowValidation(report=report, entry=None)

    entry = Entry(
        row_index=row.row_index,
        date=day,  # type: ignore[arg-type]
        start=start,  # type: ignore[arg-type]
        end=end,  # type: ignore[arg-type]
        detail=row.detail,
    )
    return RowValidation(report=report, entry=entry)
