"""Unit tests for faceted query execution."""

from __future__ import annotations

from datetime import datetime, timezone

from core.types import CategoryStatus, Coordinates, Document, FilterState, ItemStatus, Location
from query.query_engine import QueryEngine, query_document, run_query

ENOUGH = "✅ 充足 Enough"
URGENT = "‼️ 急需 Urgent"
VIEWER = Coordinates(lat=22.4445, lng=114.168)
TABLE = {
    "Far Hall": Coordinates(lat=22.50, lng=114.20),
    "Near Estate": Coordinates(lat=22.445, lng=114.169),
}


def _document() -> Document:
    return Document(
        last_update=datetime(2025, 11, 27, tzinfo=timezone.utc),
        locations=(
            Location(
                name="Far Hall",
                overall_status=URGENT,
                categories=(
                    CategoryStatus(name="Food", items=(ItemStatus(name="Rice", status=URGENT),)),
                ),
            ),
            Location(name="Unmapped Church", overall_status=ENOUGH),
            Location(
                name="Near Estate",
                overall_status=ENOUGH,
                categories=(
                    CategoryStatus(name="Food", items=(ItemStatus(name="Rice", status=ENOUGH),)),
                ),
            ),
        ),
    )


def _names(locations) -> list[str]:
    return [location.name for location in locations]


def test_run_query_without_document_returns_empty_list() -> None:
    """An absent document should behave as an empty location list."""
    assert run_query(None, FilterState()) == []


def test_run_query_default_state_keeps_row_order() -> None:
    """Default filter state should return every location in row order."""
    assert _names(run_query(_document(), FilterState(), TABLE)) == [
        "Far Hall",
        "Unmapped Church",
        "Near Estate",
    ]


def test_run_query_applies_item_then_status_filters() -> None:
    """Item and status filters should combine."""
    state = FilterState(status_set=frozenset({ENOUGH}), item_filter="Rice")

    assert _names(run_query(_document(), state)) == ["Near Estate"]


def test_run_query_sorts_by_distance_when_viewer_known() -> None:
    """Distance sort should order resolved locations nearest first."""
    state = FilterState(sort_by_distance=True, viewer_position=VIEWER)

    assert _names(run_query(_document(), state, TABLE)) == [
        "Near Estate",
        "Far Hall",
        "Unmapped Church",
    ]


def test_run_query_ignores_distance_sort_without_viewer_or_table() -> None:
    """Missing viewer position or table should keep row order."""
    without_viewer = FilterState(sort_by_distance=True)
    with_viewer = FilterState(sort_by_distance=True, viewer_position=VIEWER)

    assert _names(run_query(_document(), without_viewer, TABLE))[0] == "Far Hall"
    assert _names(run_query(_document(), with_viewer, None))[0] == "Far Hall"


def test_run_query_ignores_viewer_when_sort_not_requested() -> None:
    """A known viewer position alone should not reorder results."""
    state = FilterState(viewer_position=VIEWER)

    assert _names(run_query(_document(), state, TABLE))[0] == "Far Hall"


def test_run_query_is_pure() -> None:
    """Running the same query twice should give equal results and keep the input."""
    document = _document()
    state = FilterState(
        status_set=frozenset({URGENT}),
        sort_by_distance=True,
        viewer_position=VIEWER,
    )

    first = run_query(document, state, TABLE)
    second = run_query(document, state, TABLE)

    assert first == second and document == _document()


def test_query_document_reports_counts_and_distances() -> None:
    """Query result should distinguish shown from total and carry distances."""
    state = FilterState(
        status_set=frozenset({ENOUGH}),
        sort_by_distance=True,
        viewer_position=VIEWER,
    )

    result = query_document(_document(), state, TABLE)

    assert (result.shown_count, result.total_count) == (2, 3)
    assert list(result.distances_km) == ["Near Estate"]


def test_query_document_zero_matches_is_not_unavailable() -> None:
    """A query matching nothing should still report the loaded total."""
    result = query_document(_document(), FilterState(item_filter="Blankets"))

    assert result.shown_count == 0 and result.total_count == 3


def test_query_engine_recomputes_when_viewer_arrives_after_sort_request() -> None:
    """Requesting sort before the viewer position is known should resolve on arrival."""
    engine = QueryEngine(_document(), TABLE)

    pending = engine.request_distance_sort()
    arrived = engine.update_viewer_position(VIEWER)

    assert _names(pending.locations)[0] == "Far Hall"
    assert _names(arrived.locations)[0] == "Near Estate"


def test_query_engine_toggles_statuses_and_selects_items() -> None:
    """Status toggles should add then remove members of the status set."""
    engine = QueryEngine(_document())

    engine.toggle_status(URGENT)
    urgent_only = engine.result
    engine.toggle_status(URGENT)
    engine.select_item("Rice")

    assert _names(urgent_only.locations) == ["Far Hall"]
    assert engine.filter_state.status_set == frozenset()
    assert _names(engine.result.locations) == ["Far Hall", "Near Estate"]


def test_query_engine_handles_document_loaded_later() -> None:
    """The engine should start empty and fill once a document loads."""
    engine = QueryEngine()

    empty = engine.result
    loaded = engine.load_document(_document())

    assert empty.total_count == 0 and loaded.total_count == 3


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    def info(self, event: str, **fields: object) -> None:
        self.events.append((event, fields))


def test_query_document_logs_completion_at_info(monkeypatch) -> None:
    """Query completion should be emitted at a level the INFO filter keeps."""
    recorder = _RecordingLogger()
    monkeypatch.setattr("query.query_engine._LOGGER", recorder)

    query_document(_document(), FilterState(status_set=frozenset({ENOUGH})))

    assert recorder.events == [
        ("query_completed", {"total_count": 3, "shown_count": 2, "sorted_by_distance": False})
    ]
