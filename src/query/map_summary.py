"""Map marker and center derivation.

This module resolves filtered locations to map markers and computes
the map center from the resolved coordinates.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.constants import DEFAULT_MAP_CENTER
from core.status import NO_DATA_STATUS, status_marker
from core.types import Coordinates, Location, MapMarker, MapSummary
from query.geo_distance import resolve_coordinates


def build_map_summary(
    locations: Iterable[Location],
    table: Mapping[str, Coordinates] | None,
) -> MapSummary:
    """Build markers for resolvable locations and the map center.

    Args:
        locations: Locations already filtered for display.
        table: Coordinate side-table.

    Returns:
        Markers in input order and the mean of their coordinates, or
        the default center when nothing resolves.
    """
    markers: list[MapMarker] = []
    for location in locations:
        coordinates = resolve_coordinates(location.name, table)
        if coordinates is None:
            continue
        status = location.overall_status or NO_DATA_STATUS
        markers.append(
            MapMarker(
                name=location.name,
                coordinates=coordinates,
                status=status,
                marker=status_marker(status),
                category_count=len(location.categories),
            )
        )
    return MapSummary(markers=tuple(markers), center=_center_of(markers))


def _center_of(markers: list[MapMarker]) -> Coordinates:
    if not markers:
        return Coordinates(lat=DEFAULT_MAP_CENTER[0], lng=DEFAULT_MAP_CENTER[1])
    lat = sum(marker.coordinates.lat for marker in markers) / len(markers)
    lng = sum(marker.coordinates.lng for marker in markers) / len(markers)
    return Coordinates(lat=lat, lng=lng)
