from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from .report import BatchReport

"""Workbook domain model and WorkbookStatus enum.

A Workbook is the processing context of one Excel file during a run, from
discovery to its final status.
"""

__all__ = [
    "WorkbookStatus",
    "Workbook",
]


class WorkbookStatus(Enum):
    """Status of a workbook after (or during) a run.

    State transitions: pending → (valid | invalid | empty | failed)

    - PENDING: discovered, not processed yet
    - VALID: processed, no validation errors
    - INVALID: processed, at least one row error or consistency message
    - EMPTY: input sheet has only the header row; nothing validated or written
    - FAILED: could not be processed (missing sheet, locked file, unreadable)
    """
    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class Workbook:
    path: Path
    name: str
    status: WorkbookStatus = WorkbookStatus.PENDING
    report: BatchReport | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    written: bool = False  # 結果をブックへ書き戻したか
    error: str | None = None  # FAILED 時の理由

    @property
    def rows(self) -> int:
        return len(self.report.row_reports) if self.report is not None else 0

    @property
    def invalid_rows(self) -> int:
        return self.report.invalid_rows if self.report is not None else 0

    @property
    def consistency_errors(self) -> int:
        return len(self.report.aggregate_messages) if self.report is not None else 0
