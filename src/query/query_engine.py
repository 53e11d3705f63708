"""Faceted query execution over a loaded document.

This module composes the item filter, status filter, and optional
distance sort into one pure query, plus a small session holder that
recomputes results whenever its inputs change.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from core.logging_config import get_logger
from core.types import Coordinates, Document, FilterState, Location, QueryResult
from query.geo_distance import measure_distances, sort_by_distance
from query.location_filtering import filter_by_item, filter_by_status

_LOGGER = get_logger(__name__)


def run_query(
    document: Document | None,
    filter_state: FilterState,
    coordinate_table: Mapping[str, Coordinates] | None = None,
) -> list[Location]:
    """Return the ordered locations matching a filter state.

    Args:
        document: Loaded document, None while unavailable.
        filter_state: Current user filter state.
        coordinate_table: Optional coordinate side-table.

    Returns:
        Every matching location. Row order is kept unless distance
        sort is requested and both viewer position and table exist.
    """
    if document is None:
        return []
    locations = filter_by_item(document.locations, filter_state.item_filter)
    locations = filter_by_status(locations, filter_state.status_set)
    viewer = _distance_viewer(filter_state, coordinate_table)
    if viewer is not None:
        locations = sort_by_distance(locations, viewer, coordinate_table)
    return locations


def query_document(
    document: Document | None,
    filter_state: FilterState,
    coordinate_table: Mapping[str, Coordinates] | None = None,
) -> QueryResult:
    """Run a query and attach display counts and distances.

    Args:
        document: Loaded document, None while unavailable.
        filter_state: Current user filter state.
        coordinate_table: Optional coordinate side-table.

    Returns:
        Query result with shown/total counts.
    """
    locations = run_query(document, filter_state, coordinate_table)
    distances: dict[str, float] = {}
    viewer = _distance_viewer(filter_state, coordinate_table)
    if viewer is not None:
        distances = measure_distances(locations, viewer, coordinate_table)
    total_count = len(document.locations) if document is not None else 0
    _LOGGER.info(
        "query_completed",
        total_count=total_count,
        shown_count=len(locations),
        sorted_by_distance=bool(distances),
    )
    return QueryResult(locations=tuple(locations), total_count=total_count, distances_km=distances)


class QueryEngine:
    """Session holder for document, coordinate table, and filter state.

    Inputs arrive independently and in any order; every update
    recomputes the result synchronously.
    """

    def __init__(
        self,
        document: Document | None = None,
        coordinate_table: Mapping[str, Coordinates] | None = None,
        filter_state: FilterState | None = None,
    ) -> None:
        self._document = document
        self._coordinate_table = coordinate_table
        self._filter_state = filter_state or FilterState()
        self._result = self._recompute()

    @property
    def filter_state(self) -> FilterState:
        """Current filter state."""
        return self._filter_state

    @property
    def result(self) -> QueryResult:
        """Result for the current inputs."""
        return self._result

    def load_document(self, document: Document | None) -> QueryResult:
        """Replace the document and recompute."""
        self._document = document
        return self._refresh()

    def load_coordinate_table(self, table: Mapping[str, Coordinates] | None) -> QueryResult:
        """Replace the coordinate table and recompute."""
        self._coordinate_table = table
        return self._refresh()

    def with_filter(self, filter_state: FilterState) -> QueryResult:
        """Replace the whole filter state and recompute."""
        self._filter_state = filter_state
        return self._refresh()

    def toggle_status(self, status: str) -> QueryResult:
        """Add or remove one status from the status set."""
        status_set = set(self._filter_state.status_set)
        status_set.symmetric_difference_update({status})
        return self.with_filter(replace(self._filter_state, status_set=frozenset(status_set)))

    def select_item(self, item_filter: str) -> QueryResult:
        """Set the item selector."""
        return self.with_filter(replace(self._filter_state, item_filter=item_filter))

    def request_distance_sort(self, enabled: bool = True) -> QueryResult:
        """Turn distance sorting on or off."""
        return self.with_filter(replace(self._filter_state, sort_by_distance=enabled))

    def update_viewer_position(self, position: Coordinates | None) -> QueryResult:
        """Record a viewer position, possibly after sort was requested."""
        return self.with_filter(replace(self._filter_state, viewer_position=position))

    def _refresh(self) -> QueryResult:
        self._result = self._recompute()
        return self._result

    def _recompute(self) -> QueryResult:
        return query_document(self._document, self._filter_state, self._coordinate_table)


def _distance_viewer(
    filter_state: FilterState,
    coordinate_table: Mapping[str, Coordinates] | None,
) -> Coordinates | None:
    """Return the viewer position when distance sort can run."""
    if not filter_state.sort_by_distance or not coordinate_table:
        return None
    return filter_state.viewer_position
