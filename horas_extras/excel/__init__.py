"""Workbook I/O: pandas-based reading, openpyxl-based write-back."""
