"""Core constants used across relief directory modules.

This module centralizes layout defaults, file names, and map defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_PATH = Path("public/data/locations.json")
DEFAULT_CSV_DELIMITER = ","
SOURCE_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"

DEFAULT_CATEGORY_HEADER_ROW = 5
DEFAULT_ITEM_HEADER_ROW = 6
DEFAULT_FIRST_DATA_ROW = 8
DEFAULT_CATEGORY_START_COLUMN = 2
DEFAULT_ITEM_START_COLUMN = 3
DEFAULT_NAME_COLUMN = 0
DEFAULT_OVERALL_STATUS_COLUMN = 1

ITEM_FILTER_ALL = "all"
EARTH_RADIUS_KM = 6371.0
DEFAULT_MAP_CENTER = (22.45, 114.17)

VOLUNTEER_KEYWORDS = (
    "一般義工",
    "General volunteers",
    "醫護人員",
    "medic",
    "社工",
    "social worker",
    "心理輔導員",
    "psychological counselor",
    "車手",
    "driver",
)
