"""FastAPI server for the inventory dashboard"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_dashboard import __version__
from inventory_dashboard.config.config_loader import load_config
from inventory_dashboard.inventory.parser import parse_sheet_data
from inventory_dashboard.inventory.stats import calculate_stats
from inventory_dashboard.inventory.table import (
    SORTABLE_FIELDS,
    SortDirection,
    filter_records,
    sort_records,
)
from inventory_dashboard.models.configs import DashboardConfig
from inventory_dashboard.models.server import ErrorResponse, SheetResponse
from inventory_dashboard.sheets.client import fetch_sheet_data

logger = logging.getLogger(__name__)

PARSE_HINT = (
    "Check that GOOGLE_SERVICE_ACCOUNT_JSON is valid JSON. Make sure to paste the entire "
    "JSON file content, including all quotes and brackets."
)

# Configuration (singleton)
_config: Optional[DashboardConfig] = None


def get_config() -> DashboardConfig:
    """Get or load the dashboard configuration (singleton pattern)"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


app = FastAPI(
    title="Inventory Dashboard",
    description="Inventory records and statistics from a Google Sheet",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": "Inventory Dashboard",
        "version": __version__,
        "endpoints": {
            "sheets": "/api/sheets",
            "health": "/health",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "inventory-dashboard"}


@app.get(
    "/api/sheets",
    response_model=SheetResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_sheet(
    search: Optional[str] = Query(None, description="Text to find in item name, location or shelf"),
    location: Optional[str] = Query(None, description="Only this location, 'all' for every location"),
    sort: str = Query("item_name", description="Field to sort items by"),
    direction: SortDirection = Query("asc", description="Sort direction"),
):
    """
    Fetch the inventory sheet and return parsed records with statistics.

    Statistics always cover every parsed record; search, location and sort
    only shape the returned items.

    Raises:
        HTTPException: 400 if the sort field is not supported
    """
    if sort not in SORTABLE_FIELDS:
        raise HTTPException(status_code=400, detail=f"Unsupported sort field: {sort}")

    config = get_config()

    try:
        raw_data = fetch_sheet_data(config)
        records = parse_sheet_data(raw_data)
        stats = calculate_stats(records)
        items = sort_records(filter_records(records, search=search, location=location), sort, direction)
    except Exception as e:
        logger.exception(
            "Failed to fetch sheet data (sheet id set: %s, credentials set: %s)",
            bool(config.sheet_id),
            config.has_credentials(),
        )
        message = str(e)
        error = ErrorResponse(
            error="Failed to fetch sheet data",
            details=message,
            hint=PARSE_HINT if "parse" in message.lower() else None,
        )
        return JSONResponse(status_code=500, content=error.model_dump())

    return SheetResponse(
        items=items,
        stats=stats,
        raw_data=raw_data if config.include_raw_data else None,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
