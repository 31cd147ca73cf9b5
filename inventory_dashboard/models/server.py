"""Pydantic models for FastAPI server endpoints"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory_dashboard.models.inventory import DashboardStats, InventoryRecord


class SheetResponse(BaseModel):
    """Response model for the sheet data endpoint"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: List[InventoryRecord] = Field(
        default_factory=list, description="Parsed records after filtering and sorting"
    )
    stats: DashboardStats = Field(..., description="Statistics over every parsed record")
    raw_data: Optional[List[List[str]]] = Field(
        None, description="Raw sheet values, only when include_raw_data is enabled"
    )


class ErrorResponse(BaseModel):
    """Response model for failed sheet requests"""

    error: str = Field(..., description="Short error summary")
    details: str = Field(..., description="Underlying error message")
    hint: Optional[str] = Field(None, description="Suggested fix, when one is known")
