from __future__ import annotations

from dataclasses import dataclass, field

from .entry import AnalysisGroup, Entry

"""Report models returned by the validation core.

RowReport: per-row outcome written back next to the row.
RowValidation: RowReport + the Entry built from the row (if any).
BatchReport: result of one batch pass (per-row reports + aggregate block).
"""

__all__ = [
    "ROW_MESSAGE_SEPARATOR",
    "RowReport",
    "RowValidation",
    "BatchReport",
]

ROW_MESSAGE_SEPARATOR = "; "


@dataclass(frozen=True)
class RowReport:
    """Per-row outcome.

    Attributes:
        row_index: Spreadsheet row number of the source row
        weekday_label: Label of the date's weekday, None when the date is invalid
        error_messages: Failures in rule-check order (date, start, end, ordering, band)
        notices: Informational messages that do not count as errors
    """
    row_index: int
    weekday_label: str | None
    error_messages: tuple[str, ...] = ()
    notices: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.error_messages)

    @property
    def text(self) -> str:
        """Value for the error column: errors first, then notices."""
        return ROW_MESSAGE_SEPARATOR.join(self.error_messages + self.notices)


@dataclass(frozen=True)
class RowValidation:
    report: RowReport
    entry: Entry | None = None


@dataclass(frozen=True)
class BatchReport:
    """Outcome of validating one batch of rows.

    groups maps every AnalysisGroup to its member entries (possibly empty),
    in input order.
    """
    row_reports: tuple[RowReport, ...]
    entries: tuple[Entry, ...]
    groups: dict[AnalysisGroup, tuple[Entry, ...]] = field(default_factory=dict)
    aggregate_messages: tuple[str, ...] = ()
    had_errors: bool = False

    @property
    def aggregate_text(self) -> str:
        return "\n".join(self.aggregate_messages)

    @property
    def invalid_rows(self) -> int:
        return sum(1 for r in self.row_reports if r.has_errors)
