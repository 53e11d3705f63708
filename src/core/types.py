"""Shared typed models.

This module defines the data models used by ingest, store, and query
layers to keep the extractor/engine contract explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from core.constants import ITEM_FILTER_ALL
from core.status import StatusMarker

RawGrid = list[list[str]]


@dataclass(frozen=True)
class Item:
    """Item header attributed to a category.

    Attributes:
        name: Item header text.
        column: Zero-based grid column of the item.
    """

    name: str
    column: int


@dataclass
class Category:
    """Named, contiguous column span from the category header row.

    Attributes:
        name: Category header text.
        start_column: First column of the span, inclusive.
        end_column: Last column of the span, inclusive.
        items: Items attributed to this span in column order.
    """

    name: str
    start_column: int
    end_column: int
    items: list[Item] = field(default_factory=list)

    def contains(self, column: int) -> bool:
        """Return whether a grid column falls inside this category."""
        return self.start_column <= column <= self.end_column


@dataclass(frozen=True)
class ItemStatus:
    """Recognized status of one item at one location."""

    name: str
    status: str


@dataclass(frozen=True)
class CategoryStatus:
    """Category with the items that carry a status at one location."""

    name: str
    items: tuple[ItemStatus, ...]


@dataclass(frozen=True)
class VolunteerNeed:
    """Recognized status of one volunteer type at one location."""

    type: str
    status: str


@dataclass(frozen=True)
class Location:
    """One supply point row from the spreadsheet.

    Attributes:
        name: Location name cell.
        overall_status: All-items status cell, or None when blank.
        categories: Non-empty categories in sheet column order.
        volunteers: Volunteer needs, empty when none are recognized.
    """

    name: str
    overall_status: str | None
    categories: tuple[CategoryStatus, ...] = ()
    volunteers: tuple[VolunteerNeed, ...] = ()

    def item_names(self) -> list[str]:
        """Return item names across all categories in order."""
        return [item.name for category in self.categories for item in category.items]

    def statuses(self) -> list[str]:
        """Return every status value attached to this location."""
        values: list[str] = []
        if self.overall_status:
            values.append(self.overall_status)
        for category in self.categories:
            values.extend(item.status for item in category.items)
        values.extend(volunteer.status for volunteer in self.volunteers)
        return values


@dataclass(frozen=True)
class Document:
    """Normalized output of one ingestion run.

    Attributes:
        last_update: UTC generation timestamp, None when unknown.
        locations: Locations in spreadsheet row order.
        notification: Optional banner text for consumers.
    """

    last_update: datetime | None
    locations: tuple[Location, ...]
    notification: str | None = None


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class FilterState:
    """User-controlled query parameters.

    Attributes:
        status_set: Accepted status values, empty means no constraint.
        item_filter: Exact item name, or ``"all"`` for no constraint.
        sort_by_distance: Whether distance sort was requested.
        viewer_position: Viewer coordinates once known.
    """

    status_set: frozenset[str] = frozenset()
    item_filter: str = ITEM_FILTER_ALL
    sort_by_distance: bool = False
    viewer_position: Coordinates | None = None


@dataclass(frozen=True)
class ExtractOptions:
    """Extract command options.

    Attributes:
        source_path: Spreadsheet CSV export to read.
        output_path: Optional output override for the document.
        notification: Optional banner text embedded in the document.
        layout_path: Optional YAML sheet layout override.
    """

    source_path: str
    output_path: str | None = None
    notification: str | None = None
    layout_path: str | None = None


@dataclass(frozen=True)
class QueryResult:
    """Ordered query output with counts for display.

    Attributes:
        locations: Locations to display in order.
        total_count: Locations in the loaded document.
        distances_km: Distance per location name when sorted by distance.
    """

    locations: tuple[Location, ...]
    total_count: int
    distances_km: dict[str, float] = field(default_factory=dict)

    @property
    def shown_count(self) -> int:
        """Number of locations matching the filter state."""
        return len(self.locations)


@dataclass(frozen=True)
class MapMarker:
    """Resolved map marker for one location."""

    name: str
    coordinates: Coordinates
    status: str
    marker: StatusMarker | None
    category_count: int


@dataclass(frozen=True)
class MapSummary:
    """Markers plus map center for the map view."""

    markers: tuple[MapMarker, ...]
    center: Coordinates
