"""Relief directory CLI entry points.
This module exposes commands for extraction and document queries.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import ReliefConfig
from core.constants import ITEM_FILTER_ALL
from core.errors import ReliefError
from core.types import Coordinates, ExtractOptions, FilterState, QueryResult
from store.directory_sdk import ReliefClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="relief", description="Relief supply directory CLI")
    parser.add_argument("--output", help="Override RELIEF_OUTPUT_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_extract_command(subparsers)
    _add_query_command(subparsers)
    _add_items_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the relief CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.output)
        if args.command == "extract":
            return _run_extract_command(client, args)
        if args.command == "query":
            return _run_query_command(client, args)
        if args.command == "items":
            return _run_items_command(client, args)
    except ReliefError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(output_path: str | None) -> ReliefClient:
    """Build SDK client with optional output-path override.

    Args:
        output_path: Optional override path.

    Returns:
        Configured SDK client.
    """
    client = ReliefClient(ReliefConfig.from_env())
    if output_path:
        return client.with_output_path(output_path)
    return client


def _run_extract_command(client: ReliefClient, args: argparse.Namespace) -> int:
    """Handle extract command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = ExtractOptions(
        source_path=args.source,
        notification=args.notification,
        layout_path=args.layout,
        output_path=args.extract_output,
    )
    output_path = client.extract(options)
    print(output_path)
    return 0


def _run_query_command(client: ReliefClient, args: argparse.Namespace) -> int:
    """Handle query command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    document = client.load_document(args.document)
    viewer = _parse_viewer(args)
    coordinate_table = client.load_coordinates(args.coordinates) if viewer else None
    filter_state = FilterState(
        status_set=frozenset(args.status or ()),
        item_filter=args.item,
        sort_by_distance=viewer is not None,
        viewer_position=viewer,
    )
    result = client.query(document, filter_state, coordinate_table)
    _print_query_result(result)
    return 0


def _run_items_command(client: ReliefClient, args: argparse.Namespace) -> int:
    """Handle items command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    document = client.load_document(args.document)
    for item_name in client.item_names(document):
        print(item_name)
    return 0


def _parse_viewer(args: argparse.Namespace) -> Coordinates | None:
    """Build viewer coordinates when both --lat and --lng are given."""
    if args.lat is None or args.lng is None:
        return None
    return Coordinates(lat=args.lat, lng=args.lng)


def _print_query_result(result: QueryResult) -> None:
    """Print the shown/total header and one row per location."""
    print(f"{result.shown_count}/{result.total_count}")
    for location in result.locations:
        distance = result.distances_km.get(location.name)
        distance_text = f"{distance:.2f}" if distance is not None else "-"
        print(f"{location.name}\t{location.overall_status or '-'}\t{distance_text}")


def _add_extract_command(subparsers: Any) -> None:
    """Register extract subcommand."""
    parser = subparsers.add_parser("extract", help="Extract a sheet CSV export into JSON")
    parser.add_argument("source", help="Spreadsheet CSV export path")
    parser.add_argument("--notification", help="Optional banner text for the document")
    parser.add_argument("--layout", help="Optional YAML sheet layout override")
    parser.add_argument(
        "--output",
        dest="extract_output",
        help="Write the document here instead of RELIEF_OUTPUT_PATH",
    )


def _add_query_command(subparsers: Any) -> None:
    """Register query subcommand."""
    parser = subparsers.add_parser("query", help="Filter and order locations in a document")
    parser.add_argument("document", nargs="?", help="Locations document, defaults to output path")
    parser.add_argument(
        "--status",
        action="append",
        help="Accepted status value, repeat for several",
    )
    parser.add_argument("--item", default=ITEM_FILTER_ALL, help="Exact item name filter")
    parser.add_argument("--coordinates", help="Coordinate side-table JSON")
    parser.add_argument("--lat", type=float, help="Viewer latitude for distance sort")
    parser.add_argument("--lng", type=float, help="Viewer longitude for distance sort")


def _add_items_command(subparsers: Any) -> None:
    """Register items subcommand."""
    parser = subparsers.add_parser("items", help="List unique item names in a document")
    parser.add_argument("document", nargs="?", help="Locations document, defaults to output path")
