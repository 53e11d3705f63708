"""Spreadsheet export reader.

This module loads the raw CSV export from local disk. Reading is the
only ingest step that can fail; tokenizing and mapping never raise.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import SOURCE_ENCODING
from core.errors import ReliefIngestError


def read_sheet_text(source_path: str | Path) -> str:
    """Read the spreadsheet export as text.

    A leading UTF-8 byte-order mark is dropped.

    Args:
        source_path: Path to the CSV export.

    Returns:
        Raw delimited text.

    Raises:
        ReliefIngestError: If the file is missing, unreadable, or not UTF-8.
    """
    sheet_path = Path(source_path).expanduser()
    if not sheet_path.is_file():
        raise ReliefIngestError(
            f"Failed to read spreadsheet export at {sheet_path}: file does not exist. "
            "Download the sheet as CSV and pass its path."
        )
    try:
        return sheet_path.read_text(encoding=SOURCE_ENCODING)
    except UnicodeDecodeError as error:
        raise ReliefIngestError(
            f"Failed to decode spreadsheet export at {sheet_path}: {error.reason}. "
            "Export the sheet as UTF-8 CSV and retry."
        ) from error
    except OSError as error:
        raise ReliefIngestError(
            f"Failed to read spreadsheet export at {sheet_path}: {error}. "
            "Check file permissions and retry."
        ) from error
