"""Calculate the flex-time balance.

Usage:
    python -m scripts.calculate_balance               # from the last downloaded table
    python -m scripts.calculate_balance --download    # export a fresh table first
    python -m scripts.calculate_balance --export report.xlsx
"""

from __future__ import annotations

import argparse

from src.flextime_account.flextime_account.common.datetime_utils import format_table_date
from src.flextime_account.flextime_account.core.exceptions import DownloadError
from src.flextime_account.flextime_account.main import run


def main() -> int:
    parser = argparse.ArgumentParser(description="Calculate the flex-time account balance.")
    parser.add_argument("--download", action="store_true", help="download a fresh table of working times first")
    parser.add_argument("--show-window", action="store_true", default=None, help="show the browser while downloading")
    parser.add_argument("--export", metavar="PATH", help="write the accrual breakdown to .xlsx or .csv")
    args = parser.parse_args()

    try:
        result = run(download=args.download, show_window=args.show_window, export_path=args.export)
    except DownloadError as e:
        print(f"ERROR: {e}")
        return int(e.status)

    if result is None:
        print("No table of working times found. Run with --download first.")
        return 1

    print(f"Balance: {result.balance_label} ({result.balance_minutes} min)")
    print(f"Last considered date: {format_table_date(result.last_considered_date)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
