"""Validation core: parsing, row validation, classification and consistency checks."""

from .batch import run_batch
from .classifier import classify, group_entries
from .consistency import check_consistency
from .parser import parse_date, parse_time, weekday_label
from .validator import validate_row

__all__ = [
    "run_batch",
    "classify",
    "group_entries",
    "check_consistency",
    "parse_date",
    "parse_time",
    "weekday_label",
    "validate_row",
]
