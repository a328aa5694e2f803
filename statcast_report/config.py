"""
Configuration: file paths, season constants, column layouts.

The two source leaderboards share the (player_id, year) key. The
traditional board covers one more season than the Statcast board; that
season is the shortened one and is expected to fall out of the join.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths — adjust these if source files move
# ---------------------------------------------------------------------------
PROJECT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_DIR / "data"
OUTPUT_DIR = PROJECT_DIR / "output"

TRADITIONAL_STATS_FILE = DATA_DIR / "traditional_stats.csv"
STATCAST_STATS_FILE = DATA_DIR / "statcast_stats.csv"

REPORT_FILE = OUTPUT_DIR / "statcast_report.html"

# Write PNG copies of the charts next to the HTML report (needs kaleido)
EXPORT_CHART_IMAGES = True

# ---------------------------------------------------------------------------
# Seasons
# ---------------------------------------------------------------------------
SEASONS: tuple[int, ...] = (2017, 2018, 2019, 2020, 2021, 2022)
SHORTENED_SEASON = 2020
STATCAST_SEASONS: tuple[int, ...] = tuple(s for s in SEASONS if s != SHORTENED_SEASON)

# Seasons either side of the shortened one, compared in the OPS leaderboard
OPS_COMPARISON_SEASONS: tuple[int, int] = (2019, 2021)

TOP_N = 10

# ---------------------------------------------------------------------------
# Column layouts
# ---------------------------------------------------------------------------
KEY_COLUMNS = ["player_id", "year"]
NAME_COLUMNS = ["last_name", "first_name"]

TRADITIONAL_STAT_COLUMNS = [
    "home_run",
    "strikeout_percent",
    "batting_average",
    "slugging_percent",
    "on_base_percent",
]
STATCAST_STAT_COLUMNS = [
    "barrel_rate",
    "whiff_percent",
]

TRADITIONAL_COLUMNS = NAME_COLUMNS + KEY_COLUMNS + TRADITIONAL_STAT_COLUMNS
STATCAST_COLUMNS = NAME_COLUMNS + KEY_COLUMNS + STATCAST_STAT_COLUMNS

# Display labels for report tables and chart axes
COLUMN_LABELS: dict[str, str] = {
    "player_id": "Player ID",
    "year": "Season",
    "name": "Player",
    "last_name": "Last name",
    "first_name": "First name",
    "home_run": "Home runs",
    "strikeout_percent": "K%",
    "batting_average": "AVG",
    "slugging_percent": "SLG",
    "on_base_percent": "OBP",
    "ops": "OPS",
    "barrel_rate": "Barrel %",
    "whiff_percent": "Whiff %",
    "mean_whiff_percent": "Mean whiff %",
    "mean_strikeout_percent": "Mean K%",
    "std_error": "Std. error",
    "count": "Records",
}

# ---------------------------------------------------------------------------
# Chart styling
# ---------------------------------------------------------------------------
CHART_COLORS = {
    "points": "#3498db",
    "trend": "#e74c3c",
    "error_bar": "#2c3e50",
}
CHART_HEIGHT = 450
