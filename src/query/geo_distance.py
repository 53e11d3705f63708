"""Coordinate resolution and distance ordering.

This module matches location names against the coordinate side-table
and orders locations by great-circle distance from the viewer.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from core.constants import EARTH_RADIUS_KM
from core.types import Coordinates, Location


def resolve_coordinates(
    location_name: str,
    table: Mapping[str, Coordinates] | None,
) -> Coordinates | None:
    """Resolve a location name to coordinates.

    Exact key match wins. Otherwise the first table entry, in table
    order, whose key contains the name or is contained by it is used.

    Args:
        location_name: Name from the document.
        table: Coordinate side-table.

    Returns:
        Coordinates, or None when nothing matches.
    """
    if not location_name or not table:
        return None
    exact = table.get(location_name)
    if exact is not None:
        return exact
    for key, coordinates in table.items():
        if key in location_name or location_name in key:
            return coordinates
    return None


def haversine_km(origin: Coordinates, target: Coordinates) -> float:
    """Return the great-circle distance in kilometres."""
    lat1 = math.radians(origin.lat)
    lat2 = math.radians(target.lat)
    delta_lat = math.radians(target.lat - origin.lat)
    delta_lng = math.radians(target.lng - origin.lng)
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def measure_distances(
    locations: Iterable[Location],
    viewer: Coordinates,
    table: Mapping[str, Coordinates] | None,
) -> dict[str, float]:
    """Map each resolvable location name to its distance from the viewer."""
    distances: dict[str, float] = {}
    for location in locations:
        coordinates = resolve_coordinates(location.name, table)
        if coordinates is not None:
            distances[location.name] = haversine_km(viewer, coordinates)
    return distances


def sort_by_distance(
    locations: Iterable[Location],
    viewer: Coordinates,
    table: Mapping[str, Coordinates] | None,
) -> list[Location]:
    """Order locations nearest first, unresolved ones last.

    Args:
        locations: Input locations.
        viewer: Viewer position.
        table: Coordinate side-table.

    Returns:
        Resolved locations ascending by distance, then unresolved
        locations in input order.
    """
    resolved: list[tuple[float, Location]] = []
    unresolved: list[Location] = []
    for location in locations:
        coordinates = resolve_coordinates(location.name, table)
        if coordinates is None:
            unresolved.append(location)
        else:
            resolved.append((haversine_km(viewer, coordinates), location))
    resolved.sort(key=lambda entry: entry[0])
    return [location for _, location in resolved] + unresolved
