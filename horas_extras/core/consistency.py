from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..models.entry import Entry
from ..models.errors import interval_gap_message, interval_overlap_message

"""Interval consistency check within one analysis group.

Entries are grouped by date; each date's entries are sorted by start time (stable,
so ties keep row order) and adjacent pairs are compared:

- prev.end > curr.start  -> overlap message
- curr.start > prev.end  -> gap message

Dates are reported in chronological order. A date with a single entry produces
nothing.
"""

__all__ = [
    "check_consistency",
]


def check_consistency(entries: Iterable[Entry], date_format: str = "%d/%m/%Y") -> list[str]:
    """Check the entries of one analysis group for overlaps and gaps.

    Args:
        entries: Members of a single group, in any order
        date_format: strftime pattern for the date shown in messages

    Returns:
        Overlap / gap messages, by date then by start time (duplicates kept)
    """
    by_date: dict[date, list[Entry]] = {}
    for entry in entries:
        by_date.setdefault(entry.date, []).append(entry)

    messages: list[str] = []
    for day in sorted(by_date):
        ordered = sorted(by_date[day], key=lambda e: e.start)
        day_text = day.strftime(date_format)
        for prev, curr in zip(ordered, ordered[1:]):
            if prev.end > curr.start:
                messages.append(interval_overlap_message(day_text))
            if curr.start > prev.end:
                messages.append(interval_gap_message(day_text))
    return messages
