"""Unit tests for relief CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from cli.main import main
from core.types import ExtractOptions
from store.directory_sdk import ReliefClient
from tests.fixture_paths import fixture_path


def _extract(tmp_path: Path, capsys) -> Path:
    output_path = tmp_path / "locations.json"
    main(["--output", str(output_path), "extract", str(fixture_path("sheet.csv"))])
    _ = capsys.readouterr()
    return output_path


def test_cli_extract_prints_output_path(tmp_path: Path, capsys) -> None:
    """Extract should print the written document path."""
    output_path = tmp_path / "out" / "locations.json"

    exit_code = main(
        [
            "--output",
            str(output_path),
            "extract",
            str(fixture_path("sheet.csv")),
            "--notification",
            "Updated hourly",
        ]
    )
    printed = capsys.readouterr().out.strip()

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0 and printed == str(output_path)
    assert payload["notification"] == "Updated hourly"


def test_cli_extract_passes_layout_option(monkeypatch, capsys) -> None:
    """Extract should forward --layout into extract options."""
    captured: dict[str, object] = {}

    def _fake_extract(self, options: ExtractOptions) -> Path:
        captured["layout_path"] = options.layout_path
        return Path("locations.json")

    monkeypatch.setattr(ReliefClient, "extract", _fake_extract)

    exit_code = main(["extract", "sheet.csv", "--layout", "layout.yaml"])
    _ = capsys.readouterr()

    assert exit_code == 0 and captured["layout_path"] == "layout.yaml"


def test_cli_query_prints_counts_and_rows(tmp_path: Path, capsys) -> None:
    """Query should print shown/total then tab-separated rows."""
    document_path = _extract(tmp_path, capsys)

    exit_code = main(["query", str(document_path), "--status", "🤨 無資料 No Data"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert lines == ["1/4", "Community Hall, Block A\t🤨 無資料 No Data\t-"]


def test_cli_query_sorts_by_distance_with_viewer(tmp_path: Path, capsys) -> None:
    """Viewer coordinates should enable distance sort and distance output."""
    document_path = _extract(tmp_path, capsys)

    exit_code = main(
        [
            "query",
            str(document_path),
            "--coordinates",
            str(fixture_path("coordinates.json")),
            "--lat",
            "22.451",
            "--lng",
            "114.1645",
        ]
    )
    rows = capsys.readouterr().out.strip().splitlines()[1:]

    names = [row.split("\t")[0] for row in rows]
    assert exit_code == 0
    assert names == [
        "東昌街 Tung Cheong Street",
        "廣福邨 Kwong Fuk Estate",
        "大埔墟體育館 Tai Po Sports Centre",
        "Community Hall, Block A",
    ]
    assert rows[0].endswith("\t0.00") and rows[-1].endswith("\t-")


def test_cli_items_lists_unique_item_names(tmp_path: Path, capsys) -> None:
    """Items should print sorted unique item names."""
    document_path = _extract(tmp_path, capsys)

    exit_code = main(["items", str(document_path)])
    names = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and names == sorted(set(names))
    assert "樽裝水 Bottled water" in names and "口罩 Masks" in names


def test_cli_reports_data_unavailable_with_exit_code(tmp_path: Path, capsys) -> None:
    """A missing document should print an error and exit with code 1."""
    exit_code = main(["query", str(tmp_path / "missing.json")])
    captured = capsys.readouterr()

    assert exit_code == 1 and "unavailable" in captured.err


def test_cli_extract_accepts_output_after_subcommand(tmp_path: Path, capsys) -> None:
    """Extract should honor --output placed after the source argument."""
    output_path = tmp_path / "after" / "locations.json"

    exit_code = main(["extract", str(fixture_path("sheet.csv")), "--output", str(output_path)])
    printed = capsys.readouterr().out.strip()

    assert exit_code == 0 and printed == str(output_path)
    assert len(json.loads(output_path.read_text(encoding="utf-8"))["locations"]) == 4


def test_cli_top_level_output_is_default_document_for_query(tmp_path: Path, capsys) -> None:
    """Top-level --output should also be the document query reads by default."""
    document_path = _extract(tmp_path, capsys)

    exit_code = main(["--output", str(document_path), "query"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and lines[0] == "4/4"


def test_cli_reports_undecodable_document_with_exit_code(tmp_path: Path, capsys) -> None:
    """A document that is not valid UTF-8 should print an error and exit with code 1."""
    document_path = tmp_path / "locations.json"
    document_path.write_bytes(b'{"locations": [{"name": "\xff\xfe"}]}')

    exit_code = main(["query", str(document_path)])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.err.startswith("error: ")
