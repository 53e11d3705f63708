"""Public SDK surface for the relief directory.

This module provides a stable import path for SDK users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import ReliefConfig
from core.errors import DataUnavailableError, ReliefError
from core.layout import SheetLayout, load_sheet_layout
from core.status import StatusMarker, is_recognized_status
from core.types import (
    Coordinates,
    Document,
    ExtractOptions,
    FilterState,
    Location,
    QueryResult,
)
from ingest.csv_tokenizer import tokenize_csv
from ingest.grid_mapper import map_grid
from ingest.pipeline import build_document
from query.query_engine import QueryEngine, run_query
from store.directory_sdk import ReliefClient

__all__ = [
    "Coordinates",
    "DataUnavailableError",
    "Document",
    "ExtractOptions",
    "FilterState",
    "Location",
    "QueryEngine",
    "QueryResult",
    "ReliefClient",
    "ReliefConfig",
    "ReliefError",
    "SheetLayout",
    "StatusMarker",
    "build_document",
    "is_recognized_status",
    "load_sheet_layout",
    "map_grid",
    "run_query",
    "tokenize_csv",
]
