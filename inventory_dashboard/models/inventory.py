"""Pydantic models for inventory records and dashboard statistics"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# Raw spreadsheet values: first row is the header, the rest are data rows
RawGrid = List[List[str]]


class ColumnMap(BaseModel):
    """Column index for each logical role, None when the header is missing"""

    model_config = ConfigDict(frozen=True)

    item_id: Optional[int] = Field(None, description="Index of the Item ID column")
    item_name: Optional[int] = Field(None, description="Index of the Item Name column")
    stock: Optional[int] = Field(None, description="Index of the Stock column")
    par: Optional[int] = Field(None, description="Index of the Par column")
    order_amount: Optional[int] = Field(None, description="Index of the Order Amount column")


class InventoryRecord(BaseModel):
    """A single inventory item reconstructed from a sheet row"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "itemId": "Trailer - Shelf 1 Row A",
                "location": "Trailer",
                "shelf": "Shelf 1 Row A",
                "itemName": "Widget",
                "type": "Tool",
                "stock": 5.0,
                "par": 10.0,
                "orderAmount": 5.0,
                "isBelowPar": True,
                "needsOrder": True,
            }
        },
    )

    item_id: str = Field(..., description="Item ID text, or location/shelf when the cell is empty")
    location: str = Field(..., min_length=1, description="Location header the row sits under")
    shelf: Optional[str] = Field(None, description="Shelf header the row sits under")
    item_name: str = Field(..., min_length=1, description="Item name")
    type: Optional[str] = Field(None, description="Item type (third sheet column)")
    stock: float = Field(0.0, description="Units currently in stock")
    par: float = Field(0.0, description="Par level")
    order_amount: float = Field(0.0, description="Units to order")
    is_below_par: bool = Field(False, description="stock < par")
    needs_order: bool = Field(False, description="order_amount > 0")


class DashboardStats(BaseModel):
    """Summary statistics over a list of inventory records"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalItems": 2,
                "totalStock": 12.0,
                "itemsBelowPar": 1,
                "totalOrderAmount": 5.0,
                "locations": ["Storage", "Trailer"],
                "stockByLocation": {"Storage": 7.0, "Trailer": 5.0},
            }
        },
    )

    total_items: int = Field(0, description="Number of records")
    total_stock: float = Field(0.0, description="Sum of stock")
    items_below_par: int = Field(0, description="Number of records below par")
    total_order_amount: float = Field(0.0, description="Sum of order amounts")
    locations: Tuple[str, ...] = Field(default_factory=tuple, description="Sorted unique locations")
    stock_by_location: Mapping[str, float] = Field(
        default_factory=dict, validate_default=True, description="Summed stock per location"
    )

    @field_validator("stock_by_location", mode="after")
    @classmethod
    def _read_only_stock_by_location(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(value))

    @field_serializer("stock_by_location")
    def _serialize_stock_by_location(self, value: Mapping[str, float]) -> Dict[str, float]:
        return dict(value)
