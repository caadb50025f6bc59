"""Run services: orchestration over workbooks, progress display, summary rendering."""
