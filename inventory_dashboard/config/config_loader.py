"""Configuration loader for sheet access and dashboard settings"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from inventory_dashboard.models.configs import DashboardConfig

load_dotenv()

DEFAULT_CONFIG_PATH = Path("config/dashboard_config.yaml")

# Environment variable -> DashboardConfig field
ENV_FIELDS = {
    "GOOGLE_SHEET_ID": "sheet_id",
    "GOOGLE_SERVICE_ACCOUNT_JSON": "service_account_json",
    "GOOGLE_SERVICE_ACCOUNT_KEY": "service_account_key",
}


def load_config(config_path: Optional[Path | str] = None) -> DashboardConfig:
    """
    Load dashboard configuration from YAML and the environment.

    The YAML file holds non-secret settings; the sheet id and service
    account credentials always come from the environment.

    Args:
        config_path: Path to configuration file. If None, uses DASHBOARD_CONFIG
            or the default path, and missing files fall back to defaults.

    Returns:
        DashboardConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config is invalid
    """
    explicit = config_path is not None or bool(os.getenv("DASHBOARD_CONFIG"))
    if config_path is None:
        config_path = os.getenv("DASHBOARD_CONFIG") or DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    config_data = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")
    elif explicit:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    for env_var, field in ENV_FIELDS.items():
        value = os.getenv(env_var)
        if value:
            config_data[field] = value

    return DashboardConfig(**config_data)
