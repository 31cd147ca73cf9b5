"""Sheet grid parser that rebuilds location/shelf structure from row order"""

import logging
import math
import re
from typing import Any, List, Optional, Sequence

from inventory_dashboard.models.inventory import ColumnMap, InventoryRecord, RawGrid

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown"

# Position of the Type column; it is never matched by header text
TYPE_COLUMN_INDEX = 2

_ROW_LABEL_RE = re.compile(r"row\s+[a-z0-9]", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _find_column(headers: Sequence[Any], matches) -> Optional[int]:
    for index, header in enumerate(headers):
        if matches(str(header if header is not None else "").lower()):
            return index
    return None


def discover_columns(headers: Sequence[Any]) -> ColumnMap:
    """
    Map each logical role to the first header cell that names it.

    Args:
        headers: First row of the sheet

    Returns:
        ColumnMap with None for roles that have no matching header
    """
    return ColumnMap(
        item_id=_find_column(headers, lambda h: "item id" in h or "itemid" in h),
        item_name=_find_column(headers, lambda h: "item name" in h or "itemname" in h),
        stock=_find_column(headers, lambda h: h == "stock"),
        par=_find_column(headers, lambda h: h == "par"),
        order_amount=_find_column(headers, lambda h: "order" in h),
    )


def is_shelf_marker(text: str) -> bool:
    """
    Check whether an Item ID cell labels a shelf.

    "Shelf 1 Row A" and "Row 3" are shelf markers, "Events Shelf" is not.
    """
    if not text:
        return False
    lowered = text.lower()
    if "shelf" in lowered and "row" in lowered:
        return True
    return "row" in lowered and _ROW_LABEL_RE.search(text) is not None


def parse_number(value: Any) -> float:
    """
    Read the leading number of a cell, e.g. "12 units" -> 12.0.

    Empty, non-numeric and non-finite values become 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER_RE.match(str(value).strip())
        if match is None:
            return 0.0
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _cell(row: Sequence[Any], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()


def parse_sheet_data(raw_data: Optional[RawGrid]) -> List[InventoryRecord]:
    """
    Parse raw sheet values into inventory records.

    The Item ID column carries both location headers and shelf headers;
    every item row inherits the most recent of each seen above it.

    Args:
        raw_data: Sheet values, header row first

    Returns:
        Records in sheet order. Empty when there are no data rows.
    """
    if not raw_data or len(raw_data) < 2:
        return []

    columns = discover_columns(raw_data[0])

    records: List[InventoryRecord] = []
    current_location = ""
    current_shelf = ""

    for row in raw_data[1:]:
        if not row:
            continue

        item_id = _cell(row, columns.item_id)
        item_name = _cell(row, columns.item_name)
        has_shelf_info = is_shelf_marker(item_id)

        # Location header: a label with no item name that is not a shelf
        if item_id and not item_name and not has_shelf_info:
            current_location = item_id
            current_shelf = ""
            continue

        # Shelf header: items below inherit this shelf
        if has_shelf_info and not item_name:
            current_shelf = item_id
            continue

        if not item_name:
            continue

        shelf: Optional[str] = None
        if has_shelf_info:
            shelf = item_id
            current_shelf = item_id
        elif current_shelf:
            shelf = current_shelf

        location = current_location
        if not location and item_id and not has_shelf_info:
            location = item_id
            current_location = item_id
        if not location:
            location = UNKNOWN_LOCATION

        stock = parse_number(_cell(row, columns.stock))
        par = parse_number(_cell(row, columns.par))
        order_amount = parse_number(_cell(row, columns.order_amount))

        records.append(
            InventoryRecord(
                item_id=item_id or (f"{location} - {shelf}" if shelf else location),
                location=location,
                shelf=shelf,
                item_name=item_name,
                type=_cell(row, TYPE_COLUMN_INDEX) or None,
                stock=stock,
                par=par,
                order_amount=order_amount,
                is_below_par=stock < par,
                needs_order=order_amount > 0,
            )
        )

    logger.debug("Parsed %d inventory records from %d sheet rows", len(records), len(raw_data) - 1)
    return records
