"""Delimited-text tokenizer for spreadsheet exports.

This module splits raw CSV text into a grid of trimmed cells.
It never fails: unbalanced quotes absorb the rest of the text.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_CSV_DELIMITER
from core.types import RawGrid

_QUOTE = '"'


def tokenize_csv(text: str, delimiter: str = DEFAULT_CSV_DELIMITER) -> RawGrid:
    """Tokenize CSV text into rows of trimmed cells.

    Args:
        text: Raw delimited text.
        delimiter: Single-character field separator.

    Returns:
        Ordered rows of cell values.
    """
    rows: RawGrid = []
    current_row: list[str] = []
    field_chars: list[str] = []
    in_quotes = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == _QUOTE:
            if in_quotes and index + 1 < length and text[index + 1] == _QUOTE:
                field_chars.append(_QUOTE)
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            current_row.append("".join(field_chars).strip())
            field_chars = []
        elif char == "\n" and not in_quotes:
            current_row.append("".join(field_chars).strip())
            rows.append(current_row)
            current_row = []
            field_chars = []
        elif char != "\r":
            field_chars.append(char)
        index += 1
    if field_chars or current_row:
        current_row.append("".join(field_chars).strip())
        rows.append(current_row)
    return rows


def serialize_csv(grid: Iterable[Iterable[str]], delimiter: str = DEFAULT_CSV_DELIMITER) -> str:
    """Serialize a grid back into delimited text.

    Fields holding the delimiter, a quote, or a line break are quoted
    and embedded quotes are doubled.

    Args:
        grid: Rows of cell values.
        delimiter: Single-character field separator.

    Returns:
        Newline-terminated CSV text.
    """
    lines = [delimiter.join(_quote_field(cell, delimiter) for cell in row) for row in grid]
    return "".join(f"{line}\n" for line in lines)


def _quote_field(cell: str, delimiter: str) -> str:
    if any(char in cell for char in (delimiter, _QUOTE, "\n", "\r")):
        escaped = cell.replace(_QUOTE, _QUOTE * 2)
        return f"{_QUOTE}{escaped}{_QUOTE}"
    return cell
