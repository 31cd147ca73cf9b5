"""Shared fixtures for inventory dashboard tests"""

import pytest

HEADERS = ["Item ID", "Item Name", "Type", "Stock", "Par", "Order Amount"]


@pytest.fixture
def headers():
    """Header row in the column order the inventory sheet uses"""
    return list(HEADERS)


@pytest.fixture
def sample_grid():
    """A sheet with two locations, shelf headers and a few noise rows"""
    return [
        list(HEADERS),
        ["Trailer", "", "", "", "", ""],
        ["Shelf 1 Row A", "", "", "", "", ""],
        ["", "Widget", "Tool", "5", "10", "5"],
        ["", "Gadget", "Tool", "12", "10", "0"],
        ["", "", "", "", "", ""],
        ["Shelf 2 Row B", "Hammer", "Tool", "3", "3", ""],
        ["", "Wrench", "", "1", "4", "3"],
        ["Events Shelf", "", "", "", "", ""],
        ["", "Tablecloth", "Linen", "20", "15", "0"],
        ["Row 4", "", "", "", "", ""],
        ["", "Banner", "Signage", "n/a", "2", "2"],
    ]
