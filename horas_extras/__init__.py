"""Overtime record checker: validates work-time entries kept in an Excel workbook."""

__version__ = "0.1.0"
