"""Typed sheet layout parsing.

This module holds the structural offsets of the published spreadsheet
and loads optional YAML overrides when editors move header rows.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import (
    DEFAULT_CATEGORY_HEADER_ROW,
    DEFAULT_CATEGORY_START_COLUMN,
    DEFAULT_FIRST_DATA_ROW,
    DEFAULT_ITEM_HEADER_ROW,
    DEFAULT_ITEM_START_COLUMN,
    DEFAULT_NAME_COLUMN,
    DEFAULT_OVERALL_STATUS_COLUMN,
)
from core.errors import ReliefConfigError


@dataclass(frozen=True)
class SheetLayout:
    """Zero-based structural offsets of the spreadsheet export.

    Attributes:
        category_header_row: Row holding category names.
        item_header_row: Row holding item and volunteer names.
        first_data_row: First row that may hold a location.
        category_start_column: Column where category scanning begins.
        item_start_column: Column where item scanning begins.
        name_column: Column holding the location name.
        overall_status_column: Column holding the all-items status.
    """

    category_header_row: int = DEFAULT_CATEGORY_HEADER_ROW
    item_header_row: int = DEFAULT_ITEM_HEADER_ROW
    first_data_row: int = DEFAULT_FIRST_DATA_ROW
    category_start_column: int = DEFAULT_CATEGORY_START_COLUMN
    item_start_column: int = DEFAULT_ITEM_START_COLUMN
    name_column: int = DEFAULT_NAME_COLUMN
    overall_status_column: int = DEFAULT_OVERALL_STATUS_COLUMN


def load_sheet_layout(layout_path: str | Path | None) -> SheetLayout:
    """Load a sheet layout, applying YAML overrides to the defaults.

    Args:
        layout_path: Optional YAML file path. None returns defaults.

    Returns:
        Validated sheet layout.

    Raises:
        ReliefConfigError: If the file is missing or fails validation.
    """
    if layout_path is None:
        return SheetLayout()
    payload = _load_yaml_payload(Path(layout_path))
    if payload is None:
        return SheetLayout()
    layout_mapping = _expect_mapping(payload)
    _validate_layout_keys(layout_mapping)
    overrides = {key: _parse_offset(key, value) for key, value in layout_mapping.items()}
    layout = replace(SheetLayout(), **overrides)
    _validate_header_rows(layout)
    return layout


def _load_yaml_payload(layout_file: Path) -> object:
    layout_file = layout_file.expanduser().resolve()
    if not layout_file.exists():
        raise ReliefConfigError(
            f"Sheet layout file does not exist at {layout_file}. Provide a valid YAML file path."
        )
    try:
        return cast(object, yaml.safe_load(layout_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ReliefConfigError(
            f"Failed to read sheet layout at {layout_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ReliefConfigError(
            f"Failed to parse YAML sheet layout at {layout_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error


def _expect_mapping(value: object) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    raise ReliefConfigError(
        f"Invalid sheet layout: expected object mapping, got {type(value).__name__}."
    )


def _validate_layout_keys(layout_mapping: Mapping[str, object]) -> None:
    allowed_keys = {layout_field.name for layout_field in fields(SheetLayout)}
    unknown_keys = sorted(str(key) for key in set(layout_mapping) - allowed_keys)
    if unknown_keys:
        raise ReliefConfigError(
            f"Sheet layout contains unknown fields: {', '.join(unknown_keys)}."
        )


def _parse_offset(field_name: str, raw_value: object) -> int:
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise ReliefConfigError(
            f"Sheet layout field '{field_name}' must be an integer, "
            f"got {type(raw_value).__name__}."
        )
    if raw_value < 0:
        raise ReliefConfigError(
            f"Sheet layout field '{field_name}' must be zero or greater, got {raw_value}."
        )
    return raw_value


def _validate_header_rows(layout: SheetLayout) -> None:
    if layout.category_header_row == layout.item_header_row:
        raise ReliefConfigError(
            "Sheet layout category_header_row and item_header_row must differ. "
            "Point each field at its own header row."
        )
