from __future__ import annotations

from enum import Enum

"""Error taxonomy and message texts produced by the validation core.

The message strings are written verbatim into the workbook and are part of the
output contract; tests compare them literally.
"""

__all__ = [
    "ErrorKind",
    "MSG_INVALID_DATE",
    "MSG_INVALID_START_TIME",
    "MSG_INVALID_END_TIME",
    "MSG_INVALID_ORDERING",
    "band_overlap_message",
    "interval_overlap_message",
    "interval_gap_message",
    "kind_of",
]


class ErrorKind(Enum):
    """Classification of validation findings (UPPER_SNAKE for the error log)."""
    INVALID_DATE = "INVALID_DATE"
    INVALID_START_TIME = "INVALID_START_TIME"
    INVALID_END_TIME = "INVALID_END_TIME"
    INVALID_ORDERING = "INVALID_ORDERING"
    BAND_OVERLAP = "BAND_OVERLAP"
    INTERVAL_OVERLAP = "INTERVAL_OVERLAP"
    INTERVAL_GAP = "INTERVAL_GAP"


MSG_INVALID_DATE = "Fecha invalida"
MSG_INVALID_START_TIME = "Hora desde invalida"
MSG_INVALID_END_TIME = "Hora hasta invalida"
MSG_INVALID_ORDERING = "Hora desde debe ser menor a Hora hasta"


_BAND_OVERLAP_PREFIX = "Horario superpuesto con la franja de referencia"
_INTERVAL_OVERLAP_PREFIX = "Horario solapado con la siguiente entrada en"
_INTERVAL_GAP_PREFIX = "Hueco entre entradas en"

_FIXED_MESSAGES = {
    MSG_INVALID_DATE: ErrorKind.INVALID_DATE,
    MSG_INVALID_START_TIME: ErrorKind.INVALID_START_TIME,
    MSG_INVALID_END_TIME: ErrorKind.INVALID_END_TIME,
    MSG_INVALID_ORDERING: ErrorKind.INVALID_ORDERING,
}


def band_overlap_message(band_start: str, band_end: str) -> str:
    return f"{_BAND_OVERLAP_PREFIX} {band_start}-{band_end}"


def interval_overlap_message(date_text: str) -> str:
    return f"{_INTERVAL_OVERLAP_PREFIX} {date_text}"


def interval_gap_message(date_text: str) -> str:
    return f"{_INTERVAL_GAP_PREFIX} {date_text}"


def kind_of(message: str) -> ErrorKind:
    """Map a message produced by the core back to its ErrorKind."""
    if message in _FIXED_MESSAGES:
        return _FIXED_MESSAGES[message]
    if message.startswith(_BAND_OVERLAP_PREFIX):
        return ErrorKind.BAND_OVERLAP
    if message.startswith(_INTERVAL_OVERLAP_PREFIX):
        return ErrorKind.INTERVAL_OVERLAP
    if message.startswith(_INTERVAL_GAP_PREFIX):
        return ErrorKind.INTERVAL_GAP
    raise ValueError(f"unknown message: {message!r}")
