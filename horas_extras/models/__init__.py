"""Domain models for the overtime checker.

This package contains the domain model classes used by the validation core and the
workbook shell.
"""

from .config_models import CheckerConfig, ColumnLayout, ValidationConfig
from .entry import AnalysisGroup, Entry, RawRow
from .error_record import ErrorRecord
from .errors import ErrorKind
from .processing_result import ProcessingResult
from .report import BatchReport, RowReport, RowValidation
from .workbook import Workbook, WorkbookStatus

__all__ = [
    # Configuration models
    "CheckerConfig",
    "ColumnLayout",
    "ValidationConfig",
    # Core models
    "AnalysisGroup",
    "Entry",
    "RawRow",
    "ErrorKind",
    "BatchReport",
    "RowReport",
    "RowValidation",
    # Run models
    "ErrorRecord",
    "ProcessingResult",
    "Workbook",
    "WorkbookStatus",
]
