from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum

"""Row / Entry domain models for the overtime checker.

RawRow is what the workbook reader hands to the core (text only). Entry is the
validated record produced by the row validator. Both are immutable; neither
outlives a single batch run.
"""

__all__ = [
    "AnalysisGroup",
    "RawRow",
    "Entry",
]


class AnalysisGroup(Enum):
    """Analysis partitions used by the consistency check.

    - PRE_BAND: weekday entries starting at or before the band start (A)
    - POST_BAND: weekday entries ending at or after the band end (B)
    - WEEKEND: Saturday / Sunday entries (C)
    """
    PRE_BAND = "A"
    POST_BAND = "B"
    WEEKEND = "C"


@dataclass(frozen=True)
class RawRow:
    """One data row of the input sheet, as text.

    row_index is the spreadsheet row number (header = 1, first data row = 2).
    """
    row_index: int
    date_text: str
    start_text: str
    end_text: str
    detail: str = ""  # 列D (自由記述)。core では未使用


@dataclass(frozen=True)
class Entry:
    """Validated work-time entry. Invariant: start < end."""
    row_index: int
    date: date
    start: time
    end: time
    detail: str = ""

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise ValueError(
                f"row {self.row_index}: start {self.start} must be before end {self.end}"
            )

    @property
    def is_weekend(self) -> bool:
        return self.date.weekday() >= 5
