from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the JSON Lines error log.

Each validation finding of a run becomes one record. row=-1 marks findings that
do not belong to a single row (aggregate consistency messages, workbook-level
failures such as a missing sheet or a locked file).
"""

__all__ = [
    "WORKBOOK_LEVEL_ROW",
    "ErrorRecord",
]

WORKBOOK_LEVEL_ROW = -1


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Workbook file name
        sheet: Sheet name within the workbook
        row: Spreadsheet row number, -1 when not row-specific
        error_type: Classification in UPPER_SNAKE_CASE (see ErrorKind)
        message: Message text as written to the workbook
    """
    timestamp: str
    file: str
    sheet: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, sheet: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            sheet=sheet,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # dataclass -> dict のキーのみ出力 (追加キー禁止)
        return json.dumps(asdict(self), ensure_ascii=False)
