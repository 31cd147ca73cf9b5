"""Google Sheets client for reading the inventory sheet"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

from inventory_dashboard.config.config_loader import load_config
from inventory_dashboard.models.configs import DashboardConfig
from inventory_dashboard.models.inventory import RawGrid

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


class CredentialsError(ValueError):
    """Service account credentials are missing or malformed"""


class SheetsConfigError(ValueError):
    """Sheet settings required for a request are missing"""


class SheetFetchError(RuntimeError):
    """The Google Sheets API could not be reached or refused the request"""


def load_service_account_info(config: DashboardConfig) -> Dict[str, Any]:
    """
    Load service account info from inline JSON or a key file.

    Inline JSON (GOOGLE_SERVICE_ACCOUNT_JSON) wins over the key file path
    (GOOGLE_SERVICE_ACCOUNT_KEY), which is resolved against the working
    directory.

    Raises:
        CredentialsError: If no credentials are configured or they can't be parsed
    """
    if config.service_account_json:
        try:
            info = json.loads(config.service_account_json)
        except json.JSONDecodeError as e:
            raise CredentialsError(
                "Failed to parse GOOGLE_SERVICE_ACCOUNT_JSON. Make sure it's valid JSON."
            ) from e
    elif config.service_account_key:
        key_path = Path(config.service_account_key).resolve()
        try:
            info = json.loads(key_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CredentialsError(f"Could not read service account key file {key_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CredentialsError(f"Failed to parse service account key file {key_path}") from e
    else:
        raise CredentialsError(
            "Google Service Account credentials not found. "
            "Set GOOGLE_SERVICE_ACCOUNT_JSON or GOOGLE_SERVICE_ACCOUNT_KEY"
        )

    if not isinstance(info, dict):
        raise CredentialsError("Service account credentials must be a JSON object")

    return info


def get_sheets_client(config: Optional[DashboardConfig] = None) -> gspread.Client:
    """
    Create an authorized read-only gspread client.

    Raises:
        CredentialsError: If credentials are missing or malformed
    """
    config = config or load_config()
    info = load_service_account_info(config)

    try:
        credentials = Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    except (ValueError, KeyError) as e:
        raise CredentialsError(f"Invalid service account credentials: {e}") from e

    return gspread.authorize(credentials)


def _require_sheet_id(config: DashboardConfig) -> str:
    if not config.sheet_id:
        raise SheetsConfigError("GOOGLE_SHEET_ID environment variable is not set")
    return config.sheet_id


def _open_spreadsheet(config: DashboardConfig) -> gspread.Spreadsheet:
    sheet_id = _require_sheet_id(config)
    client = get_sheets_client(config)
    return client.open_by_key(sheet_id)


def fetch_sheet_data(config: Optional[DashboardConfig] = None) -> RawGrid:
    """
    Fetch all values of the inventory worksheet.

    Args:
        config: Dashboard configuration. If None, loads it.

    Returns:
        Sheet values, header row first. Empty for an empty sheet.

    Raises:
        SheetsConfigError: If GOOGLE_SHEET_ID is not set
        CredentialsError: If credentials are missing or malformed
        SheetFetchError: If the Sheets API request fails
    """
    config = config or load_config()

    try:
        spreadsheet = _open_spreadsheet(config)
        worksheet = (
            spreadsheet.worksheet(config.worksheet) if config.worksheet else spreadsheet.sheet1
        )
        values = worksheet.get_values(config.sheet_range)
    except (gspread.exceptions.GSpreadException, GoogleAuthError, requests.exceptions.RequestException) as e:
        logger.error("Error fetching sheet data: %s", e)
        raise SheetFetchError(f"Could not fetch sheet data: {e}") from e

    logger.info("Fetched %d rows from sheet %s", len(values or []), config.sheet_id)
    return [[str(cell) for cell in row] for row in values or []]


def get_sheet_metadata(config: Optional[DashboardConfig] = None) -> Dict[str, Any]:
    """
    Fetch spreadsheet metadata (title, worksheets, grid sizes).

    Raises:
        SheetsConfigError: If GOOGLE_SHEET_ID is not set
        CredentialsError: If credentials are missing or malformed
        SheetFetchError: If the Sheets API request fails
    """
    config = config or load_config()

    try:
        return _open_spreadsheet(config).fetch_sheet_metadata()
    except (gspread.exceptions.GSpreadException, GoogleAuthError, requests.exceptions.RequestException) as e:
        logger.error("Error fetching sheet metadata: %s", e)
        raise SheetFetchError(f"Could not fetch sheet metadata: {e}") from e
