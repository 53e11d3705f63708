"""Item and status facet filters.

This module applies the item selector and status set to locations.
Both filters preserve input order and never mutate their inputs.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from core.constants import ITEM_FILTER_ALL
from core.types import Document, Location


def filter_by_item(locations: Iterable[Location], item_filter: str) -> list[Location]:
    """Keep locations listing an item with the exact given name.

    The item's status is not considered.

    Args:
        locations: Input locations.
        item_filter: Item name, or ``"all"`` to keep everything.

    Returns:
        Filtered locations in input order.
    """
    if item_filter == ITEM_FILTER_ALL:
        return list(locations)
    return [location for location in locations if item_filter in location.item_names()]


def filter_by_status(locations: Iterable[Location], status_set: AbstractSet[str]) -> list[Location]:
    """Keep locations where any overall, item, or volunteer status matches.

    Args:
        locations: Input locations.
        status_set: Accepted status values. Empty keeps everything.

    Returns:
        Filtered locations in input order.
    """
    if not status_set:
        return list(locations)
    return [
        location
        for location in locations
        if any(status in status_set for status in location.statuses())
    ]


def collect_item_names(document: Document | None) -> list[str]:
    """Return sorted unique item names for the item selector."""
    if document is None:
        return []
    names = {name for location in document.locations for name in location.item_names() if name}
    return sorted(names)
