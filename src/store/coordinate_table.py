"""Coordinate side-table loading.

This module reads the name-to-coordinates JSON mapping used by the
distance sort and map summary. A missing table disables those
features instead of failing.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.errors import ReliefStoreError
from core.logging_config import get_logger
from core.types import Coordinates

_LOGGER = get_logger(__name__)


def load_coordinate_table(table_path: str | Path | None) -> dict[str, Coordinates] | None:
    """Load a coordinate table from JSON.

    Args:
        table_path: JSON file mapping names to ``{lat, lng}``.

    Returns:
        Table in file order, or None when no table is available.

    Raises:
        ReliefStoreError: If the file exists but is malformed.
    """
    if table_path is None:
        return None
    path = Path(table_path).expanduser()
    if not path.is_file():
        _LOGGER.warning("coordinate_table_missing", table_path=str(path))
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise ReliefStoreError(
            f"Failed to load coordinate table at {path}: {error}. "
            "Fix the JSON mapping of name to {lat, lng} and retry."
        ) from error
    return coordinate_table_from_payload(payload, str(path))


def coordinate_table_from_payload(
    payload: object,
    source: str = "<memory>",
) -> dict[str, Coordinates]:
    """Validate a parsed coordinate mapping.

    Args:
        payload: Parsed JSON value.
        source: Origin used in error messages.

    Returns:
        Table preserving key order.

    Raises:
        ReliefStoreError: If an entry lacks numeric ``lat``/``lng``.
    """
    if not isinstance(payload, dict):
        raise ReliefStoreError(
            f"Invalid coordinate table at {source}: expected JSON object, "
            f"got {type(payload).__name__}."
        )
    table: dict[str, Coordinates] = {}
    for name, raw in payload.items():
        table[str(name)] = _parse_coordinates(str(name), raw, source)
    return table


def _parse_coordinates(name: str, raw: object, source: str) -> Coordinates:
    if isinstance(raw, dict):
        lat = raw.get("lat")
        lng = raw.get("lng")
        if _is_number(lat) and _is_number(lng):
            return Coordinates(lat=float(lat), lng=float(lng))
    raise ReliefStoreError(
        f"Invalid coordinate table entry '{name}' at {source}: "
        "expected an object with numeric 'lat' and 'lng'."
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
