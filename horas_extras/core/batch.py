from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.config_models import ValidationConfig
from ..models.entry import AnalysisGroup, RawRow
from ..models.report import BatchReport, RowReport
from .classifier import group_entries
from .consistency import check_consistency
from .validator import validate_row

"""Batch orchestration for the validation core.

One pass validates every row in input order, then a post-pass runs the consistency
check on each analysis group (PRE_BAND, POST_BAND, WEEKEND), de-duplicates the
messages (exact string match, first-seen order) and folds everything into a single
BatchReport. No I/O and no shared state: the same rows always give an equal report.
"""

__all__ = [
    "run_batch",
    "dedupe",
]

logger = logging.getLogger(__name__)


def dedupe(messages: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(messages))


def run_batch(rows: Iterable[RawRow], config: ValidationConfig | None = None) -> BatchReport:
    """Validate a batch of rows and run the group consistency check.

    Args:
        rows: Input rows in sheet order
        config: Validation settings (defaults when None)

    Returns:
        BatchReport with one RowReport per row, the aggregate messages
        (de-duplicated) and the overall error flag
    """
    cfg = config or ValidationConfig()

    reports: list[RowReport] = []
    entries = []
    for row in rows:
        result = validate_row(row, cfg)
        reports.append(result.report)
        if result.entry is not None:
            entries.append(result.entry)

    groups = group_entries(entries, cfg)

    collected: list[str] = []
    for group in AnalysisGroup:
        group_messages = check_consistency(groups[group], cfg.report_date_format)
        if group_messages:
            logger.debug("group=%s consistency_messages=%d", group.name, len(group_messages))
        collected.extend(group_messages)
    aggregate = dedupe(collected)

    had_errors = any(r.has_errors for r in reports) or bool(aggregate)
    logger.debug(
        "batch rows=%d entries=%d invalid_rows=%d aggregate=%d",
        len(reports),
        len(entries),
        sum(1 for r in reports if r.has_errors),
        len(aggregate),
    )
    return BatchReport(
        row_reports=tuple(reports),
        entries=tuple(entries),
        groups=groups,
        aggregate_messages=aggregate,
        had_errors=had_errors,
    )
