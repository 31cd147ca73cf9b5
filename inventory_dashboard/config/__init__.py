"""Configuration loading"""

from inventory_dashboard.config.config_loader import load_config

__all__ = ["load_config"]
