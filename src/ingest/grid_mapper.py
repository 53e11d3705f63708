"""Grid-to-model mapping for the spreadsheet layout.

This module turns a tokenized grid into categories, items, and
locations using fixed structural offsets from the sheet layout.
A short or ragged grid yields fewer entries, never an exception.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import VOLUNTEER_KEYWORDS
from core.layout import SheetLayout
from core.status import is_recognized_status
from core.types import (
    Category,
    CategoryStatus,
    Item,
    ItemStatus,
    Location,
    RawGrid,
    VolunteerNeed,
)


def map_grid(
    grid: RawGrid,
    layout: SheetLayout,
    categories: list[Category] | None = None,
) -> list[Location]:
    """Map a tokenized grid into locations in spreadsheet row order.

    Args:
        grid: Tokenized spreadsheet rows.
        layout: Structural offsets of the sheet.
        categories: Categories with items already attributed. Built from
            the grid when omitted.

    Returns:
        One location per data row with a non-empty name cell.
    """
    if categories is None:
        categories = attribute_items(build_categories(grid, layout), grid, layout)
    item_header = _row_at(grid, layout.item_header_row)
    locations: list[Location] = []
    for row in grid[layout.first_data_row :]:
        name = _cell(row, layout.name_column)
        if not name:
            continue
        locations.append(
            Location(
                name=name,
                overall_status=_cell(row, layout.overall_status_column) or None,
                categories=_category_statuses(row, categories),
                volunteers=_volunteer_needs(row, item_header, layout),
            )
        )
    return locations


def build_categories(grid: RawGrid, layout: SheetLayout) -> list[Category]:
    """Split the category header row into contiguous column spans.

    Args:
        grid: Tokenized spreadsheet rows.
        layout: Structural offsets of the sheet.

    Returns:
        Categories in column order, each without items yet.
    """
    header_row = _row_at(grid, layout.category_header_row)
    categories: list[Category] = []
    for column in range(layout.category_start_column, len(header_row)):
        name = header_row[column].strip()
        if not name:
            continue
        if categories:
            categories[-1].end_column = column - 1
        categories.append(Category(name=name, start_column=column, end_column=column))
    if categories:
        categories[-1].end_column = len(header_row) - 1
    return categories


def attribute_items(
    categories: list[Category],
    grid: RawGrid,
    layout: SheetLayout,
) -> list[Category]:
    """Attach item headers to the categories whose span holds them.

    Args:
        categories: Categories from ``build_categories``.
        grid: Tokenized spreadsheet rows.
        layout: Structural offsets of the sheet.

    Returns:
        The same category list with items appended in column order.
    """
    item_header = _row_at(grid, layout.item_header_row)
    for column in range(layout.item_start_column, len(item_header)):
        name = item_header[column].strip()
        if not name:
            continue
        category = find_category(categories, column)
        if category is not None:
            category.items.append(Item(name=name, column=column))
    return categories


def find_category(categories: Sequence[Category], column: int) -> Category | None:
    """Return the first category whose span contains a column."""
    for category in categories:
        if category.contains(column):
            return category
    return None


def _category_statuses(row: list[str], categories: list[Category]) -> tuple[CategoryStatus, ...]:
    statuses: list[CategoryStatus] = []
    for category in categories:
        items: list[ItemStatus] = []
        for item in category.items:
            status = _cell(row, item.column)
            if is_recognized_status(status):
                items.append(ItemStatus(name=item.name, status=status))
        if items:
            statuses.append(CategoryStatus(name=category.name, items=tuple(items)))
    return tuple(statuses)


def _volunteer_needs(
    row: list[str],
    item_header: list[str],
    layout: SheetLayout,
) -> tuple[VolunteerNeed, ...]:
    needs: list[VolunteerNeed] = []
    for column in range(layout.category_start_column, min(len(row), len(item_header))):
        header = item_header[column].strip()
        if not _is_volunteer_header(header):
            continue
        status = _cell(row, column)
        if is_recognized_status(status):
            needs.append(VolunteerNeed(type=header, status=status))
    return tuple(needs)


def _is_volunteer_header(header: str) -> bool:
    lowered = header.lower()
    return any(keyword.lower() in lowered for keyword in VOLUNTEER_KEYWORDS)


def _row_at(grid: RawGrid, row_index: int) -> list[str]:
    if row_index < len(grid):
        return grid[row_index]
    return []


def _cell(row: list[str], column: int) -> str:
    if column < len(row):
        return row[column].strip()
    return ""
