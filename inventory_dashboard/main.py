"""Main CLI entry point for the inventory dashboard"""

import logging
import sys
from pathlib import Path
from typing import Optional

from inventory_dashboard.config.config_loader import load_config
from inventory_dashboard.inventory.loader import load_grid_file
from inventory_dashboard.inventory.parser import parse_sheet_data
from inventory_dashboard.inventory.stats import calculate_stats
from inventory_dashboard.models.inventory import DashboardStats
from inventory_dashboard.report.excel_generator import generate_excel_report
from inventory_dashboard.sheets.client import fetch_sheet_data


def configure_logging(level: str) -> None:
    """Configure root logging and quiet the Google client libraries"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for noisy in ("google", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def format_summary(stats: DashboardStats) -> str:
    """Format dashboard statistics as a plain text summary"""
    lines = [
        f"  Total items: {stats.total_items}",
        f"  Total stock: {stats.total_stock:g}",
        f"  Items below par: {stats.items_below_par}",
        f"  Total order amount: {stats.total_order_amount:g}",
        f"  Locations: {len(stats.locations)}",
    ]
    for location in stats.locations:
        lines.append(f"    - {location}: {stats.stock_by_location[location]:g}")
    return "\n".join(lines)


def main(input_file: Optional[str] = None, output_path: Optional[str] = None) -> None:
    """
    Main CLI entry point.

    Usage:
        python -m inventory_dashboard.main [input_file] [output_path]
        python -m inventory_dashboard.main --sheet [output_path]

    Args:
        input_file: Local .xlsx or .csv export. Reads the Google Sheet when None.
        output_path: Where to write an Excel report, skipped when None
    """
    try:
        config = load_config()
        configure_logging(config.log_level)

        if input_file:
            print(f"Reading inventory from {input_file}...")
            raw_data = load_grid_file(input_file)
        else:
            print("Fetching inventory from Google Sheets...")
            raw_data = fetch_sheet_data(config)

        records = parse_sheet_data(raw_data)
        stats = calculate_stats(records)

        print("Inventory summary:")
        print(format_summary(stats))

        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            generate_excel_report(records, stats, output_file)
            print(f"  Report generated: {output_file}")

    except Exception as e:
        print(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    args = sys.argv[1:]

    # --sheet reads from Google Sheets; the remaining argument is the report path
    if "--sheet" in args:
        args.remove("--sheet")
        if len(args) > 1:
            print("Usage: python -m inventory_dashboard.main --sheet [output_path]")
            sys.exit(1)
        main(None, args[0] if args else None)
    elif len(args) <= 2:
        main(*args)
    else:
        print("Usage: python -m inventory_dashboard.main [input_file] [output_path]")
        print("  input_file: Local .xlsx or .csv export (default: read the Google Sheet)")
        print("  output_path: Path for an Excel report (default: no report)")
        print("  --sheet: Read the Google Sheet and treat the only argument as output_path")
        sys.exit(1)
