"""Locations document serialization and IO.

This module maps typed documents to the published JSON wire format
and back. Load failures surface as one data-unavailable condition.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from core.constants import OUTPUT_ENCODING
from core.errors import DataUnavailableError, ReliefStoreError
from core.types import CategoryStatus, Document, ItemStatus, Location, VolunteerNeed


def document_to_payload(document: Document) -> dict[str, object]:
    """Serialize a document into its JSON wire payload.

    Args:
        document: Document instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    payload: dict[str, object] = {"lastUpdate": format_timestamp(document.last_update)}
    if document.notification:
        payload["notification"] = document.notification
    payload["locations"] = [location_to_payload(location) for location in document.locations]
    return payload


def location_to_payload(location: Location) -> dict[str, object]:
    """Serialize one location, omitting an empty volunteers list."""
    payload: dict[str, object] = {
        "name": location.name,
        "allItems": location.overall_status,
        "categories": [
            {
                "name": category.name,
                "items": [{"name": item.name, "status": item.status} for item in category.items],
            }
            for category in location.categories
        ],
    }
    if location.volunteers:
        payload["volunteers"] = [
            {"type": volunteer.type, "status": volunteer.status}
            for volunteer in location.volunteers
        ]
    return payload


def document_from_payload(payload: Any) -> Document:
    """Deserialize a wire payload into a document.

    Missing ``lastUpdate`` and ``locations`` fields are tolerated the
    same way existing consumers tolerate them.

    Args:
        payload: Parsed JSON value.

    Returns:
        Parsed document.

    Raises:
        DataUnavailableError: If the payload shape is invalid.
    """
    if not isinstance(payload, dict):
        raise DataUnavailableError(
            f"Invalid locations document: expected JSON object, got {type(payload).__name__}."
        )
    raw_locations = payload.get("locations") or []
    if not isinstance(raw_locations, list):
        raise DataUnavailableError("Invalid locations document: 'locations' must be a list.")
    notification = payload.get("notification")
    return Document(
        last_update=parse_timestamp(payload.get("lastUpdate")),
        locations=tuple(_location_from_payload(entry) for entry in raw_locations),
        notification=notification if isinstance(notification, str) and notification else None,
    )


def write_document(document: Document, output_path: Path) -> None:
    """Write a document as indented UTF-8 JSON.

    Args:
        document: Document to persist.
        output_path: Destination file, parent directories are created.

    Raises:
        ReliefStoreError: If the file cannot be written.
    """
    text = json.dumps(document_to_payload(document), indent=2, ensure_ascii=False)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding=OUTPUT_ENCODING)
    except OSError as error:
        raise ReliefStoreError(
            f"Failed to write locations document at {output_path}: {error}. "
            "Check the output directory and retry."
        ) from error


def load_document(document_path: str | Path) -> Document:
    """Load a published locations document.

    Args:
        document_path: JSON document path.

    Returns:
        Parsed document.

    Raises:
        DataUnavailableError: If the file is missing, unreadable, or invalid.
    """
    path = Path(document_path).expanduser()
    try:
        text = path.read_text(encoding=OUTPUT_ENCODING)
    except UnicodeDecodeError as error:
        raise DataUnavailableError(
            f"Failed to decode locations document at {path}: {error.reason}. "
            "Regenerate it with extract."
        ) from error
    except OSError as error:
        raise DataUnavailableError(
            f"Locations document unavailable at {path}: {error}. Run extract first."
        ) from error
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise DataUnavailableError(
            f"Failed to parse locations document at {path}: {error.msg}. "
            "Regenerate it with extract."
        ) from error
    return document_from_payload(payload)


def format_timestamp(value: datetime | None) -> str | None:
    """Format a timestamp as ISO-8601 UTC with milliseconds and ``Z``."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc_value = value.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw_value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when absent or invalid."""
    if not isinstance(raw_value, str) or not raw_value:
        return None
    normalized = raw_value[:-1] + "+00:00" if raw_value.endswith("Z") else raw_value
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def _location_from_payload(entry: Any) -> Location:
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise DataUnavailableError(
            "Invalid locations document: every location needs a string 'name'."
        )
    overall_status = entry.get("allItems")
    return Location(
        name=entry["name"],
        overall_status=overall_status if isinstance(overall_status, str) else None,
        categories=tuple(_category_from_payload(raw) for raw in _as_list(entry.get("categories"))),
        volunteers=tuple(
            VolunteerNeed(type=str(raw.get("type", "")), status=str(raw.get("status", "")))
            for raw in _as_list(entry.get("volunteers"))
            if isinstance(raw, dict)
        ),
    )


def _category_from_payload(raw: Any) -> CategoryStatus:
    if not isinstance(raw, dict):
        raise DataUnavailableError("Invalid locations document: categories must be objects.")
    items = tuple(
        ItemStatus(name=str(item.get("name", "")), status=str(item.get("status", "")))
        for item in _as_list(raw.get("items"))
        if isinstance(item, dict)
    )
    return CategoryStatus(name=str(raw.get("name", "")), items=items)


def _as_list(value: object) -> list[Any]:
    return value if isinstance(value, list) else []
