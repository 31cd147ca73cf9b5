"""Excel report generation for inventory records"""

from pathlib import Path
from typing import List

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from inventory_dashboard.models.inventory import DashboardStats, InventoryRecord

INVENTORY_HEADERS = [
    "Item ID",
    "Item Name",
    "Location",
    "Shelf",
    "Type",
    "Stock",
    "Par",
    "Order Amount",
    "Below Par",
    "Needs Order",
]

BELOW_PAR_FILL = PatternFill(start_color="FFCCCC", end_color="FFCCCC", fill_type="solid")


def sanitize_for_excel(value):
    """Remove characters openpyxl refuses to write from strings"""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def generate_excel_report(
    records: List[InventoryRecord], stats: DashboardStats, output_path: Path | str
) -> Path:
    """
    Generate an Excel report of the inventory.

    Args:
        records: Records to list on the Inventory sheet
        stats: Statistics for the Summary sheet
        output_path: Path where to save the Excel file

    Returns:
        Path to generated Excel file
    """
    output_path = Path(output_path)

    wb = Workbook()

    # Remove default sheet
    if "Sheet" in wb.sheetnames:
        wb.remove(wb["Sheet"])

    create_inventory_sheet(wb.create_sheet("Inventory"), records)
    create_summary_sheet(wb.create_sheet("Summary"), stats)

    wb.save(output_path)
    wb.close()

    return output_path


def _write_headers(ws: Worksheet, headers: List[str], color: str) -> None:
    for col_idx, header in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)
        cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
        cell.alignment = Alignment(horizontal="center", vertical="center")


def _autofit_columns(ws: Worksheet) -> None:
    for col_idx, col in enumerate(ws.columns, start=1):
        max_length = 0
        for cell in col:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_length + 2, 50)


def create_inventory_sheet(ws: Worksheet, records: List[InventoryRecord]) -> None:
    """
    Create Inventory sheet with one row per record.

    Rows below par are highlighted.
    """
    _write_headers(ws, INVENTORY_HEADERS, "CCE5FF")

    for row_idx, record in enumerate(records, start=2):
        values = [
            record.item_id,
            record.item_name,
            record.location,
            record.shelf,
            record.type,
            record.stock,
            record.par,
            record.order_amount,
            "Yes" if record.is_below_par else "No",
            "Yes" if record.needs_order else "No",
        ]
        for col_idx, value in enumerate(values, start=1):
            cell = ws.cell(row=row_idx, column=col_idx, value=sanitize_for_excel(value))
            if record.is_below_par:
                cell.fill = BELOW_PAR_FILL

    _autofit_columns(ws)

    # Freeze header row
    ws.freeze_panes = "A2"

    if records:
        last_column = get_column_letter(len(INVENTORY_HEADERS))
        ws.auto_filter.ref = f"A1:{last_column}{len(records) + 1}"


def create_summary_sheet(ws: Worksheet, stats: DashboardStats) -> None:
    """Create Summary sheet with totals and stock by location"""
    _write_headers(ws, ["Metric", "Value"], "FFE5CC")

    totals = [
        ("Total Items", stats.total_items),
        ("Total Stock", stats.total_stock),
        ("Items Below Par", stats.items_below_par),
        ("Total Order Amount", stats.total_order_amount),
        ("Locations", len(stats.locations)),
    ]
    for row_idx, (label, value) in enumerate(totals, start=2):
        ws.cell(row=row_idx, column=1, value=label)
        ws.cell(row=row_idx, column=2, value=value)

    location_header_row = len(totals) + 3
    for col_idx, header in enumerate(["Location", "Stock"], start=1):
        cell = ws.cell(row=location_header_row, column=col_idx, value=header)
        cell.font = Font(bold=True)

    for row_idx, location in enumerate(stats.locations, start=location_header_row + 1):
        ws.cell(row=row_idx, column=1, value=sanitize_for_excel(location))
        ws.cell(row=row_idx, column=2, value=stats.stock_by_location.get(location, 0.0))

    _autofit_columns(ws)
    ws.freeze_panes = "A2"
