"""
Statcast Report — Streamlit page

Renders the same report as main.py, top to bottom, as a Streamlit page.
Charts are the plotly figures drawn non-interactive (staticPlot), not images.

Run with:  streamlit run app.py
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from statcast_report.charts import STATIC_CONFIG
from statcast_report.config import (
    COLUMN_LABELS,
    STATCAST_STATS_FILE,
    TRADITIONAL_STATS_FILE,
)
from statcast_report.loaders import load_statcast_stats, load_traditional_stats
from statcast_report.report import REPORT_TITLE, build_report

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Statcast Report",
    page_icon="⚾",
    layout="centered",
)


# ---------------------------------------------------------------------------
# Data loading (cached)
# ---------------------------------------------------------------------------
@st.cache_data
def load_leaderboards():
    traditional = load_traditional_stats(str(TRADITIONAL_STATS_FILE))
    statcast = load_statcast_stats(str(STATCAST_STATS_FILE))
    return traditional, statcast


def show_table(df: pd.DataFrame):
    display = df.rename(columns={c: COLUMN_LABELS.get(c, c) for c in df.columns if isinstance(c, str)})
    display.columns = [str(c) for c in display.columns]
    st.dataframe(display, use_container_width=True, hide_index=True)


def show_paragraphs(paragraphs: list[str]):
    for paragraph in paragraphs:
        st.markdown(paragraph)


traditional, statcast = load_leaderboards()
report = build_report(traditional, statcast)
narrative = report["narrative"]
tables = report["tables"]
figures = report["figures"]
seasons_str = " and ".join(str(s) for s in report["ops_seasons"])

st.title(REPORT_TITLE)

# ===========================================================================
# The data
# ===========================================================================
st.header("The data")
show_paragraphs(narrative["data"])
show_table(report["profiles"])

# ===========================================================================
# Top OPS
# ===========================================================================
st.header(f"Top OPS seasons, {seasons_str}")
show_paragraphs(narrative["ops"])
show_table(tables["top_ops_by_season"])

# ===========================================================================
# Whiffs and strikeouts
# ===========================================================================
st.header("Whiffs and strikeouts by season")
show_paragraphs(narrative["rates"])
show_table(tables["mean_rates_by_year"])
st.plotly_chart(figures["whiff_rate_by_year"], use_container_width=True, config=STATIC_CONFIG)

# ===========================================================================
# Barrels and home runs
# ===========================================================================
st.header("Barrels and home runs")
show_paragraphs(narrative["barrels"])
st.plotly_chart(figures["barrel_rate_vs_home_runs"], use_container_width=True, config=STATIC_CONFIG)

# ===========================================================================
# Surnames
# ===========================================================================
st.header("Most common surnames")
show_paragraphs(narrative["surnames"])
show_table(tables["surname_counts"])

st.divider()
st.caption(f"Sources: {TRADITIONAL_STATS_FILE.name}, {STATCAST_STATS_FILE.name}")
