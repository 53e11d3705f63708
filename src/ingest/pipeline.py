"""Extraction orchestration for one data refresh.

This module coordinates reading the export, tokenizing, grid mapping,
and writing the locations document. Each run starts from scratch.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from core.config import ReliefConfig
from core.constants import DEFAULT_CSV_DELIMITER
from core.layout import SheetLayout, load_sheet_layout
from core.logging_config import get_logger
from core.types import Category, Document, ExtractOptions, RawGrid
from ingest.csv_tokenizer import tokenize_csv
from ingest.grid_mapper import attribute_items, build_categories, map_grid
from ingest.source_reader import read_sheet_text
from store.document_io import write_document

_LOGGER = get_logger(__name__)


def build_document(
    sheet_text: str,
    layout: SheetLayout,
    *,
    delimiter: str = DEFAULT_CSV_DELIMITER,
    notification: str | None = None,
    generated_at: datetime | None = None,
) -> Document:
    """Build a locations document from raw CSV text.

    Args:
        sheet_text: Raw spreadsheet export.
        layout: Structural offsets of the sheet.
        delimiter: Field separator of the export.
        notification: Optional banner text.
        generated_at: Generation time, defaults to now in UTC.

    Returns:
        Normalized document with locations in row order.
    """
    grid = tokenize_csv(sheet_text, delimiter)
    categories = attribute_items(build_categories(grid, layout), grid, layout)
    return _document_from_grid(grid, layout, categories, notification, generated_at)


def extract_document(options: ExtractOptions, config: ReliefConfig) -> Path:
    """Run one extraction and write the document to disk.

    Args:
        options: Extract request options.
        config: Runtime configuration.

    Returns:
        Path of the written document.

    Raises:
        ReliefIngestError: If the export cannot be read.
        ReliefConfigError: If the layout override is invalid.
        ReliefStoreError: If the document cannot be written.
    """
    layout = load_sheet_layout(options.layout_path or config.layout_path)
    grid = tokenize_csv(read_sheet_text(options.source_path), config.csv_delimiter)
    categories = attribute_items(build_categories(grid, layout), grid, layout)
    document = _document_from_grid(grid, layout, categories, options.notification, None)
    output_path = (
        Path(options.output_path).expanduser() if options.output_path else config.output_path
    )
    write_document(document, output_path)
    _log_extract_completion(options.source_path, output_path, grid, categories, document)
    return output_path


def _document_from_grid(
    grid: RawGrid,
    layout: SheetLayout,
    categories: list[Category],
    notification: str | None,
    generated_at: datetime | None,
) -> Document:
    """Map a grid and stamp the document with its generation time."""
    return Document(
        last_update=generated_at or datetime.now(timezone.utc),
        locations=tuple(map_grid(grid, layout, categories)),
        notification=notification or None,
    )


def _log_extract_completion(
    source_path: str,
    output_path: Path,
    grid: RawGrid,
    categories: list[Category],
    document: Document,
) -> None:
    """Log extraction completion with contextual metadata."""
    _LOGGER.info(
        "extract_completed",
        source_path=source_path,
        output_path=str(output_path),
        row_count=len(grid),
        location_count=len(document.locations),
        categories=[category.name for category in categories],
        has_notification=document.notification is not None,
    )
