"""
Statcast Report — End-to-end report run.

Loads both leaderboards, joins them, runs every query, writes the HTML
report (and chart PNGs) and prints smoke-test summaries.

Usage:
    python main.py
"""

import logging
import sys
from pathlib import Path

import pandas as pd

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from statcast_report.charts import ChartExportError, save_chart_images
from statcast_report.config import (
    EXPORT_CHART_IMAGES,
    OUTPUT_DIR,
    REPORT_FILE,
    STATCAST_SEASONS,
    STATCAST_STATS_FILE,
    TRADITIONAL_STATS_FILE,
)
from statcast_report.loaders import load_statcast_stats, load_traditional_stats
from statcast_report.queries import appearances_by_player
from statcast_report.report import build_report, write_report
from statcast_report.validation import ReportDataError

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def run() -> dict:
    """Run the report pipeline and print smoke-test outputs."""

    print("=" * 70)
    print("  STATCAST REPORT — Barrels, Whiffs and OPS")
    print("=" * 70)
    print()

    # ------------------------------------------------------------------
    # 1. Load source data
    # ------------------------------------------------------------------
    print("[ 1 ] LOADING SOURCE DATA")
    print("-" * 40)

    traditional = load_traditional_stats(str(TRADITIONAL_STATS_FILE))
    print(f"\nTraditional leaderboard: {len(traditional)} rows loaded")
    print(traditional.head().to_string(index=False))

    statcast = load_statcast_stats(str(STATCAST_STATS_FILE))
    print(f"\nStatcast leaderboard: {len(statcast)} rows loaded")
    print(statcast.head().to_string(index=False))

    # ------------------------------------------------------------------
    # 2. Join and queries
    # ------------------------------------------------------------------
    print("\n")
    print("[ 2 ] JOIN & QUERIES")
    print("-" * 40)

    report = build_report(traditional, statcast)
    merged = report["merged"]
    tables = report["tables"]

    print(f"\nmerged: {len(merged)} rows")
    print(report["profiles"].to_string(index=False))

    print(f"\nTop OPS, seasons {report['ops_seasons']}:")
    print(tables["top_ops_by_season"].to_string(index=False))

    print("\nMean whiff % and K% by season:")
    print(tables["mean_rates_by_year"].to_string(index=False))

    print("\nMost common surnames:")
    print(tables["surname_counts"].to_string(index=False))

    # ------------------------------------------------------------------
    # 3. Report output
    # ------------------------------------------------------------------
    print("\n")
    print("[ 3 ] REPORT OUTPUT")
    print("-" * 40)

    # Images before HTML, so a failed export leaves no report behind
    if EXPORT_CHART_IMAGES:
        for image in save_chart_images(report["figures"], OUTPUT_DIR):
            print(f"Chart written to {image}")
    path = write_report(report, REPORT_FILE)
    print(f"\nReport written to {path}")

    # ------------------------------------------------------------------
    # 4. Acceptance checks
    # ------------------------------------------------------------------
    print("\n")
    print("[ 4 ] ACCEPTANCE CRITERIA CHECKS")
    print("-" * 40)

    summary = report["join_summary"]

    # Check 1: merge keeps every Statcast row
    check1 = len(merged) == len(statcast)
    print(f"\n  [{'PASS' if check1 else 'FAIL'}] Merged rows {len(merged)} == Statcast rows {len(statcast)}")

    # Check 2: dropped rows = traditional minus merged
    dropped = sum(summary["dropped_by_season"].values())
    check2 = dropped == len(traditional) - len(merged)
    print(f"  [{'PASS' if check2 else 'FAIL'}] Dropped {dropped} rows, seasons {sorted(summary['dropped_by_season'])}")

    # Check 3: ops is exact
    check3 = (merged["ops"] == merged["on_base_percent"] + merged["slugging_percent"]).all()
    print(f"  [{'PASS' if check3 else 'FAIL'}] ops == on_base_percent + slugging_percent for every row")

    # Check 4: leaderboard ordering
    check4 = tables["top_ops"]["ops"].is_monotonic_decreasing
    print(f"  [{'PASS' if check4 else 'FAIL'}] Top OPS rows are in non-increasing order")

    # Check 5: no player appears more often than there are seasons
    most = appearances_by_player(merged)["count"].max()
    check5 = most <= len(STATCAST_SEASONS)
    print(f"  [{'PASS' if check5 else 'FAIL'}] Max seasons per player = {most} (limit {len(STATCAST_SEASONS)})")

    print("\n" + "=" * 70)
    print("  Report complete.")
    print("=" * 70)
    return report


def main() -> None:
    try:
        run()
    except (FileNotFoundError, pd.errors.ParserError, pd.errors.EmptyDataError, ReportDataError,
            ChartExportError) as e:
        logger.error("Report aborted: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
