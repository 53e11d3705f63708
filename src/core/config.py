"""Runtime configuration model for the relief directory.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_CSV_DELIMITER, DEFAULT_OUTPUT_PATH
from core.errors import ReliefConfigError


@dataclass(frozen=True)
class ReliefConfig:
    """Validated runtime configuration.

    Attributes:
        output_path: Destination of the generated locations document.
        coordinates_path: Optional coordinate side-table for distance sort.
        layout_path: Optional YAML file overriding the sheet layout.
        csv_delimiter: Single field delimiter of the spreadsheet export.
    """

    output_path: Path
    coordinates_path: Path | None
    layout_path: Path | None
    csv_delimiter: str

    @classmethod
    def from_env(cls) -> "ReliefConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ReliefConfigError: If environment values are invalid.
        """
        output_value = os.getenv("RELIEF_OUTPUT_PATH", str(DEFAULT_OUTPUT_PATH))
        coordinates_value = os.getenv("RELIEF_COORDINATES_PATH")
        layout_value = os.getenv("RELIEF_LAYOUT_PATH")
        delimiter_value = os.getenv("RELIEF_CSV_DELIMITER", DEFAULT_CSV_DELIMITER)
        return cls(
            output_path=Path(output_value).expanduser(),
            coordinates_path=_optional_path(coordinates_value),
            layout_path=_optional_path(layout_value),
            csv_delimiter=_parse_delimiter(delimiter_value),
        )


def _optional_path(raw_value: str | None) -> Path | None:
    """Convert an optional env value into a path.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Expanded path, or None when unset or blank.
    """
    if raw_value is None or not raw_value.strip():
        return None
    return Path(raw_value.strip()).expanduser()


def _parse_delimiter(raw_value: str) -> str:
    """Parse the CSV delimiter environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Validated single-character delimiter.

    Raises:
        ReliefConfigError: If value is not exactly one character.
    """
    if len(raw_value) != 1 or raw_value in {'"', "\n", "\r"}:
        raise ReliefConfigError(
            "Invalid RELIEF_CSV_DELIMITER value: "
            f"expected one character other than quote or newline, got '{raw_value}'. "
            "Set RELIEF_CSV_DELIMITER to a single separator such as ','."
        )
    return raw_value
