"""Search, location filter and sort for the inventory table"""

from typing import Iterable, List, Literal, Optional

from inventory_dashboard.models.inventory import InventoryRecord

SortDirection = Literal["asc", "desc"]

ALL_LOCATIONS = "all"

SORTABLE_FIELDS = {
    "item_id": "item_id",
    "itemId": "item_id",
    "item_name": "item_name",
    "itemName": "item_name",
    "location": "location",
    "shelf": "shelf",
    "type": "type",
    "stock": "stock",
    "par": "par",
    "order_amount": "order_amount",
    "orderAmount": "order_amount",
}


def filter_records(
    records: Iterable[InventoryRecord],
    search: Optional[str] = None,
    location: Optional[str] = None,
) -> List[InventoryRecord]:
    """
    Filter records by free-text search and location.

    Args:
        records: Records to filter
        search: Case-insensitive text matched against item name, location and shelf
        location: Exact location, None or "all" for every location

    Returns:
        Matching records in their original order
    """
    term = (search or "").lower()
    filtered = []

    for record in records:
        if term and not (
            term in record.item_name.lower()
            or term in record.location.lower()
            or (record.shelf is not None and term in record.shelf.lower())
        ):
            continue
        if location and location != ALL_LOCATIONS and record.location != location:
            continue
        filtered.append(record)

    return filtered


def sort_records(
    records: Iterable[InventoryRecord],
    sort_field: str = "item_name",
    direction: SortDirection = "asc",
) -> List[InventoryRecord]:
    """
    Sort records by a single field.

    Text compares case-insensitively, numbers numerically. Records without
    a value for the field (no shelf or type) always come last.

    Raises:
        ValueError: If the field or direction is not supported
    """
    attribute = SORTABLE_FIELDS.get(sort_field)
    if attribute is None:
        raise ValueError(
            f"Unsupported sort field: {sort_field}. "
            f"Available fields: {sorted(set(SORTABLE_FIELDS.values()))}"
        )
    if direction not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort direction: {direction}")

    present = []
    missing = []
    for record in records:
        if getattr(record, attribute) is None:
            missing.append(record)
        else:
            present.append(record)

    def sort_key(record: InventoryRecord):
        value = getattr(record, attribute)
        return value.lower() if isinstance(value, str) else value

    present.sort(key=sort_key, reverse=direction == "desc")
    return present + missing
