"""Google Sheets data source"""

from inventory_dashboard.sheets.client import (
    CredentialsError,
    SheetFetchError,
    SheetsConfigError,
    fetch_sheet_data,
    get_sheet_metadata,
    get_sheets_client,
)

__all__ = [
    "CredentialsError",
    "SheetFetchError",
    "SheetsConfigError",
    "fetch_sheet_data",
    "get_sheet_metadata",
    "get_sheets_client",
]
