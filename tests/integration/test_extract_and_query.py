"""Integration test for extraction followed by interactive queries."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import ReliefConfig
from core.types import Coordinates, ExtractOptions
from store.directory_sdk import ReliefClient
from tests.fixture_paths import fixture_path


def test_extract_then_query_session(tmp_path: Path) -> None:
    """A refreshed document should drive a full filter-and-sort session."""
    config = replace(
        ReliefConfig.from_env(),
        output_path=tmp_path / "public" / "data" / "locations.json",
        coordinates_path=fixture_path("coordinates.json"),
    )
    client = ReliefClient(config)
    client.extract(ExtractOptions(source_path=str(fixture_path("sheet.csv"))))
    document = client.load_document()
    engine = client.engine(document, client.load_coordinates())

    engine.select_item("飯盒 Meal boxes")
    engine.toggle_status("✅ 充足 Enough")
    filtered = engine.result
    engine.request_distance_sort()
    sorted_result = engine.update_viewer_position(Coordinates(lat=22.448, lng=114.17))
    summary = client.map_summary(sorted_result.locations, client.load_coordinates())

    assert [location.name for location in filtered.locations] == [
        "大埔墟體育館 Tai Po Sports Centre",
        "廣福邨 Kwong Fuk Estate",
    ]
    assert [location.name for location in sorted_result.locations] == [
        "廣福邨 Kwong Fuk Estate",
        "大埔墟體育館 Tai Po Sports Centre",
    ]
    assert len(summary.markers) == 2 and sorted_result.total_count == 4
