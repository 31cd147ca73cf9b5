"""Inventory dashboard backed by a Google Sheet"""

__version__ = "1.0.0"
