"""Python SDK for relief directory operations.

This module exposes high-level APIs for extraction, document loading,
and faceted queries backed by the ingest and query layers.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable, Mapping

from core.config import ReliefConfig
from core.types import (
    Coordinates,
    Document,
    ExtractOptions,
    FilterState,
    Location,
    MapSummary,
    QueryResult,
)
from ingest.pipeline import extract_document
from query.location_filtering import collect_item_names
from query.map_summary import build_map_summary
from query.query_engine import QueryEngine, query_document
from store.coordinate_table import load_coordinate_table
from store.document_io import load_document


class ReliefClient:
    """Primary SDK entry point for extraction and query workflows."""

    def __init__(self, config: ReliefConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or ReliefConfig.from_env()

    @property
    def config(self) -> ReliefConfig:
        """Runtime configuration used by this client."""
        return self._config

    def extract(self, options: ExtractOptions) -> Path:
        """Extract a spreadsheet export into a locations document.

        Args:
            options: Extract options.

        Returns:
            Written document path.

        Raises:
            ReliefIngestError: If the export cannot be read.
            ReliefStoreError: If the document cannot be written.
        """
        return extract_document(options, self._config)

    def load_document(self, document_path: str | None = None) -> Document:
        """Load the published document, defaulting to the output path.

        Raises:
            DataUnavailableError: If the document cannot be loaded.
        """
        return load_document(document_path or self._config.output_path)

    def load_coordinates(self, table_path: str | None = None) -> dict[str, Coordinates] | None:
        """Load the coordinate side-table, None when unavailable."""
        return load_coordinate_table(table_path or self._config.coordinates_path)

    def query(
        self,
        document: Document | None,
        filter_state: FilterState,
        coordinate_table: Mapping[str, Coordinates] | None = None,
    ) -> QueryResult:
        """Run a faceted query over a loaded document.

        Args:
            document: Loaded document, None while unavailable.
            filter_state: User filter state.
            coordinate_table: Optional coordinate side-table.

        Returns:
            Ordered matching locations with counts.
        """
        return query_document(document, filter_state, coordinate_table)

    def engine(
        self,
        document: Document | None = None,
        coordinate_table: Mapping[str, Coordinates] | None = None,
    ) -> QueryEngine:
        """Create a session query engine for interactive filtering."""
        return QueryEngine(document, coordinate_table)

    def item_names(self, document: Document | None) -> list[str]:
        """Return sorted unique item names for the item selector."""
        return collect_item_names(document)

    def map_summary(
        self,
        locations: Iterable[Location],
        coordinate_table: Mapping[str, Coordinates] | None,
    ) -> MapSummary:
        """Return map markers and center for displayed locations."""
        return build_map_summary(locations, coordinate_table)

    def with_output_path(self, output_path: str) -> "ReliefClient":
        """Clone the client with a different document output path.

        Args:
            output_path: New output path.

        Returns:
            New SDK client instance.
        """
        updated_config = replace(self._config, output_path=Path(output_path).expanduser())
        return ReliefClient(updated_config)
