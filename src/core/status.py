"""Recognized status markers shared by spreadsheet editors and ingest.

A status cell counts only when it contains one of these marker glyphs.
Adding a new status means adding one member here.
"""

from __future__ import annotations

from enum import Enum


class StatusMarker(str, Enum):
    """Marker substrings that make a status cell recognized."""

    URGENT = "‼️"
    STILL_NEED = "⚠️"
    ENOUGH = "✅"
    NO_DATA = "🤨"
    GOVERNMENT_HANDLED = "🙅🏻"
    PAUSED = "暫停"


NO_DATA_STATUS = "🤨 無資料 No Data"


def is_recognized_status(value: str | None) -> bool:
    """Return whether a cell value carries a whitelisted marker."""
    if not value:
        return False
    return any(marker.value in value for marker in StatusMarker)


def status_marker(value: str | None) -> StatusMarker | None:
    """Return the first marker found in a status value, if any."""
    if not value:
        return None
    for marker in StatusMarker:
        if marker.value in value:
            return marker
    return None
