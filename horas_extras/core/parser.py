from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, time

from ..models.config_models import DEFAULT_DATE_FORMATS, DEFAULT_TIME_FORMATS, DEFAULT_WEEKDAY_LABELS

"""Field parser: raw date / time text -> typed values.

Accepted patterns are passed in explicitly (strptime formats, tried in order) so
parsing does not depend on the process locale. Failure is signalled by None.
"""

__all__ = [
    "parse_date",
    "parse_time",
    "weekday_label",
]


def _parse(text: str | None, formats: Sequence[str]) -> datetime | None:
    s = (text or "").strip()
    if not s:
        return None
    for fmt in formats:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None


def parse_date(text: str | None, formats: Sequence[str] = DEFAULT_DATE_FORMATS) -> date | None:
    """Parse a calendar date.

    Args:
        text: Cell text (surrounding whitespace is ignored)
        formats: strptime patterns, tried in order

    Returns:
        The date, or None when the text is blank or matches no pattern
    """
    parsed = _parse(text, formats)
    return parsed.date() if parsed is not None else None


def parse_time(text: str | None, formats: Sequence[str] = DEFAULT_TIME_FORMATS) -> time | None:
    """Parse a time of day.

    strptime accepts one-digit hour and minute fields, so with "%H:%M" both
    "8:05" and "8:5" give 08:05.

    Returns:
        The time, or None when the text is blank or matches no pattern
    """
    parsed = _parse(text, formats)
    return parsed.time() if parsed is not None else None


def weekday_label(value: date, labels: Sequence[str] = DEFAULT_WEEKDAY_LABELS) -> str:
    return labels[value.weekday()]
