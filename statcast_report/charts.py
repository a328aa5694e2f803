"""
Plotly figures for the report.

Both charts are rendered non-interactive (STATIC_CONFIG) in the HTML
report and the Streamlit page, and can be exported to PNG via kaleido.
"""

import logging
from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .config import CHART_COLORS, CHART_HEIGHT, COLUMN_LABELS

logger = logging.getLogger(__name__)

# Plotly config disabling hover, zoom and the mode bar
STATIC_CONFIG = {"staticPlot": True, "displayModeBar": False}

# Fraction of points used for each local fit of the LOWESS trend
LOWESS_FRAC = 0.6

# Below this many points the scatter is drawn without a trend curve
MIN_TREND_POINTS = 10


class ChartExportError(RuntimeError):
    """A figure could not be written as an image (kaleido or its browser missing)."""


def _base_layout(fig: go.Figure, title: str, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        title=title,
        xaxis_title=x_title,
        yaxis_title=y_title,
        height=CHART_HEIGHT,
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=50, b=40),
        showlegend=False,
    )
    fig.update_xaxes(showgrid=True, gridcolor="#eee")
    fig.update_yaxes(showgrid=True, gridcolor="#eee")
    return fig


def barrel_rate_vs_home_runs_chart(pairs: pd.DataFrame) -> go.Figure:
    """Scatter of barrel rate against home runs with a LOWESS trend curve.

    Parameters
    ----------
    pairs : From queries.barrel_vs_home_runs().
    """
    trend = {}
    if len(pairs) >= MIN_TREND_POINTS:
        trend = dict(
            trendline="lowess",
            trendline_options=dict(frac=LOWESS_FRAC),
            trendline_color_override=CHART_COLORS["trend"],
        )
    else:
        logger.warning("Only %d barrel/home run pairs; skipping trend curve", len(pairs))

    fig = px.scatter(
        pairs,
        x="barrel_rate",
        y="home_run",
        hover_name="name",
        hover_data=["year"],
        **trend,
    )
    fig.update_traces(
        selector=dict(mode="markers"),
        marker=dict(color=CHART_COLORS["points"], size=7, opacity=0.6),
    )
    fig.update_traces(selector=dict(mode="lines"), line=dict(width=3))
    return _base_layout(
        fig,
        "Barrel Rate vs Home Runs",
        COLUMN_LABELS["barrel_rate"],
        COLUMN_LABELS["home_run"],
    )


def whiff_rate_by_year_chart(summary: pd.DataFrame) -> go.Figure:
    """Mean whiff rate per season with standard-error bars.

    Parameters
    ----------
    summary : From queries.whiff_by_year().
    """
    fig = go.Figure(go.Scatter(
        x=summary["year"],
        y=summary["mean_whiff_percent"],
        mode="markers",
        marker=dict(color=CHART_COLORS["points"], size=11),
        error_y=dict(
            type="data",
            array=summary["std_error"].fillna(0),
            color=CHART_COLORS["error_bar"],
            thickness=1.5,
            width=6,
        ),
    ))
    fig.update_xaxes(tickmode="array", tickvals=summary["year"].tolist())
    return _base_layout(
        fig,
        "Mean Whiff Rate by Season (± 1 SE)",
        COLUMN_LABELS["year"],
        COLUMN_LABELS["whiff_percent"],
    )


def save_chart_images(figures: dict[str, go.Figure], out_dir: Path) -> list[Path]:
    """Write each figure to <out_dir>/<name>.png and return the paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, fig in figures.items():
        path = out_dir / f"{name}.png"
        try:
            fig.write_image(str(path), width=900, height=CHART_HEIGHT, scale=2)
        except Exception as exc:
            raise ChartExportError(f"Could not export {name} to {path}: {exc}") from exc
        logger.info("Saved chart image %s", path)
        paths.append(path)
    return paths
