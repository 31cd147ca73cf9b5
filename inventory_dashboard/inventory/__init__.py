"""Inventory sheet parsing, statistics and table views"""

from inventory_dashboard.inventory.parser import discover_columns, is_shelf_marker, parse_number, parse_sheet_data
from inventory_dashboard.inventory.stats import calculate_stats
from inventory_dashboard.inventory.table import filter_records, sort_records

__all__ = [
    "calculate_stats",
    "discover_columns",
    "filter_records",
    "is_shelf_marker",
    "parse_number",
    "parse_sheet_data",
    "sort_records",
]
