"""Pydantic models for the inventory dashboard"""

from inventory_dashboard.models.configs import DashboardConfig
from inventory_dashboard.models.inventory import ColumnMap, DashboardStats, InventoryRecord, RawGrid

__all__ = [
    "ColumnMap",
    "DashboardConfig",
    "DashboardStats",
    "InventoryRecord",
    "RawGrid",
]
