"""Dashboard statistics over parsed inventory records"""

from typing import Dict, Iterable

from inventory_dashboard.models.inventory import DashboardStats, InventoryRecord


def calculate_stats(records: Iterable[InventoryRecord]) -> DashboardStats:
    """
    Calculate dashboard statistics from inventory records.

    Args:
        records: Parsed inventory records

    Returns:
        DashboardStats. All zeros and empty collections for no records.
    """
    total_items = 0
    total_stock = 0.0
    items_below_par = 0
    total_order_amount = 0.0
    stock_by_location: Dict[str, float] = {}

    for record in records:
        total_items += 1
        total_stock += record.stock
        total_order_amount += record.order_amount
        if record.is_below_par:
            items_below_par += 1
        stock_by_location[record.location] = (
            stock_by_location.get(record.location, 0.0) + record.stock
        )

    return DashboardStats(
        total_items=total_items,
        total_stock=total_stock,
        items_below_par=items_below_par,
        total_order_amount=total_order_amount,
        locations=tuple(sorted(stock_by_location)),
        stock_by_location=stock_by_location,
    )
