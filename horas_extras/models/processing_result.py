from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .workbook import Workbook, WorkbookStatus

"""Processing result model: aggregated metrics of one run over a directory."""

__all__ = [
    "ProcessingResult",
]


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a run, used for the SUMMARY line and the exit code."""
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    workbooks: list[Workbook] = field(default_factory=list)
    error_log_path: str | None = None

    def _count(self, *statuses: WorkbookStatus) -> int:
        return sum(1 for w in self.workbooks if w.status in statuses)

    @property
    def total_files(self) -> int:
        return len(self.workbooks)

    @property
    def success_files(self) -> int:
        return self._count(WorkbookStatus.VALID, WorkbookStatus.INVALID, WorkbookStatus.EMPTY)

    @property
    def failed_files(self) -> int:
        return self._count(WorkbookStatus.FAILED)

    @property
    def invalid_files(self) -> int:
        return self._count(WorkbookStatus.INVALID)

    @property
    def total_rows(self) -> int:
        return sum(w.rows for w in self.workbooks)

    @property
    def invalid_rows(self) -> int:
        return sum(w.invalid_rows for w in self.workbooks)

    @property
    def consistency_errors(self) -> int:
        return sum(w.consistency_errors for w in self.workbooks)

    @property
    def had_errors(self) -> bool:
        return self.failed_files > 0 or self.invalid_files > 0
