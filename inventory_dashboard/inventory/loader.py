"""Load a raw sheet grid from a local Excel or CSV export"""

import csv
from pathlib import Path

import pandas as pd

from inventory_dashboard.models.inventory import RawGrid

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}


def _csv_width(file_path: Path) -> int:
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        return max((len(row) for row in csv.reader(f)), default=0)


def load_grid_file(file_path: Path | str) -> RawGrid:
    """
    Load every cell of the first worksheet (or CSV) as text.

    The header row is kept as the first row of the grid, the same shape the
    Google Sheets API returns.

    Args:
        file_path: Path to an .xlsx or .csv export

    Returns:
        Grid of strings, empty cells as "" and trailing empty cells dropped

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file type is not supported or cannot be read
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Inventory file not found: {file_path}")

    suffix = file_path.suffix.lower()

    if suffix not in EXCEL_SUFFIXES | CSV_SUFFIXES:
        raise ValueError(
            f"Unsupported file type: {suffix or file_path.name}. "
            f"Expected one of {sorted(EXCEL_SUFFIXES | CSV_SUFFIXES)}"
        )

    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(file_path, header=None, dtype=str, engine="openpyxl")
        else:
            width = _csv_width(file_path)
            if width == 0:
                return []
            # Rows may be longer or shorter than the header row
            df = pd.read_csv(
                file_path,
                header=None,
                names=range(width),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=False,
            )
    except pd.errors.EmptyDataError:
        return []
    except Exception as e:
        raise ValueError(f"Error reading inventory file: {e}")

    grid: RawGrid = []

    for row in df.itertuples(index=False):
        cells = ["" if pd.isna(value) else str(value) for value in row]
        while cells and not cells[-1].strip():
            cells.pop()
        grid.append(cells)

    return grid
