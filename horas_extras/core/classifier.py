from __future__ import annotations

from collections.abc import Iterable

from ..models.config_models import ValidationConfig
from ..models.entry import AnalysisGroup, Entry

"""Entry classifier: valid Entry -> analysis groups.

Each group predicate is evaluated on its own (no elif chain): an entry that starts
at or before the band start AND ends at or after the band end belongs to both
PRE_BAND and POST_BAND.
"""

__all__ = [
    "classify",
    "group_entries",
]


def classify(entry: Entry, config: ValidationConfig | None = None) -> tuple[AnalysisGroup, ...]:
    cfg = config or ValidationConfig()
    weekday = not entry.is_weekend
    groups: list[AnalysisGroup] = []
    if weekday and entry.start <= cfg.band_start:
        groups.append(AnalysisGroup.PRE_BAND)
    if weekday and entry.end >= cfg.band_end:
        groups.append(AnalysisGroup.POST_BAND)
    if entry.is_weekend:
        groups.append(AnalysisGroup.WEEKEND)
    return tuple(groups)


def group_entries(
    entries: Iterable[Entry], config: ValidationConfig | None = None
) -> dict[AnalysisGroup, tuple[Entry, ...]]:
    """Partition entries by group, keeping input order. Every group key is present."""
    buckets: dict[AnalysisGroup, list[Entry]] = {g: [] for g in AnalysisGroup}
    for entry in entries:
        for group in classify(entry, config):
            buckets[group].append(entry)
    return {g: tuple(members) for g, members in buckets.items()}
