"""Spreadsheet ingestion.

This package tokenizes the spreadsheet CSV export and maps its grid
into the normalized locations document.
"""
