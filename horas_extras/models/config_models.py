from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time

"""Config dataclasses for the overtime checker.

These are the typed configuration objects consumed by the validation core and the
workbook shell. The YAML loader in horas_extras/config/loader.py builds them;
tests usually construct them directly with the defaults below.
"""

__all__ = [
    "DEFAULT_DATE_FORMATS",
    "DEFAULT_TIME_FORMATS",
    "DEFAULT_WEEKDAY_LABELS",
    "ValidationConfig",
    "ColumnLayout",
    "CheckerConfig",
]

DEFAULT_DATE_FORMATS: tuple[str, ...] = (
    "%d/%m/%Y",
    "%d/%m/%y",
    "%d-%m-%Y",
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
)
DEFAULT_TIME_FORMATS: tuple[str, ...] = ("%H:%M", "%H:%M:%S")
# Monday .. Sunday (date.weekday() order)
DEFAULT_WEEKDAY_LABELS: tuple[str, ...] = (
    "lunes",
    "martes",
    "miércoles",
    "jueves",
    "viernes",
    "sábado",
    "domingo",
)


@dataclass(frozen=True)
class ValidationConfig:
    """Settings of the validation core.

    band_start / band_end delimit the reference work band [band_start, band_end).
    band_overlap_is_error decides whether touching the band is a hard error
    (row gets no Entry, batch error flag set) or only a notice.
    """
    band_start: time = time(9, 0)
    band_end: time = time(16, 42)
    band_overlap_is_error: bool = True
    date_formats: tuple[str, ...] = DEFAULT_DATE_FORMATS
    time_formats: tuple[str, ...] = DEFAULT_TIME_FORMATS
    weekday_labels: tuple[str, ...] = DEFAULT_WEEKDAY_LABELS
    report_date_format: str = "%d/%m/%Y"

    def __post_init__(self) -> None:
        if not self.band_start < self.band_end:
            raise ValueError("band_start must be before band_end")
        if len(self.weekday_labels) != 7:
            raise ValueError("weekday_labels must have exactly 7 entries (Monday first)")


@dataclass(frozen=True)
class ColumnLayout:
    """1-based column positions in the input sheet."""
    date: int = 1  # A
    start: int = 2  # B
    end: int = 3  # C
    detail: int = 4  # D
    weekday: int = 5  # E (出力)
    errors: int = 6  # F (出力)


@dataclass(frozen=True)
class CheckerConfig:
    """Root configuration object for a run over a directory of workbooks."""
    source_directory: str
    input_sheet: str = "Entrada"
    output_sheet: str = "Salida"
    columns: ColumnLayout = field(default_factory=ColumnLayout)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
