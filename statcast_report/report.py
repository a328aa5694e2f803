"""
Report assembly and HTML rendering.

build_report() is the single entry point used by main.py and the Streamlit
page: it joins the two leaderboards, runs every query and returns a plain
dict of tables, figures and narrative paragraphs. render_html() turns that
dict into one self-describing HTML document.
"""

import html
import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from . import charts, queries
from .config import (
    COLUMN_LABELS,
    OPS_COMPARISON_SEASONS,
    SHORTENED_SEASON,
    TOP_N,
)
from .transforms import build_merged_stats

logger = logging.getLogger(__name__)

REPORT_TITLE = "Barrels, Whiffs and OPS: Qualified Batters"


def build_report(
    traditional: pd.DataFrame,
    statcast: pd.DataFrame,
    ops_seasons: tuple[int, ...] = OPS_COMPARISON_SEASONS,
    top_n: int = TOP_N,
) -> dict:
    """Run the join and every query, returning the report contents.

    Returns
    -------
    Dict with structure:
    {
        "title": str,
        "join_summary": {...},          # from check_join_coverage()
        "profiles": DataFrame,          # one row per table
        "merged": DataFrame,
        "tables": {"top_ops": ..., "top_ops_by_season": ...,
                   "mean_rates_by_year": ..., "surname_counts": ...,
                   "whiff_by_year": ...},
        "figures": {"barrel_rate_vs_home_runs": Figure,
                    "whiff_rate_by_year": Figure},
        "barrel_home_run_r": float | None,
        "narrative": {section: [paragraph, ...]},
    }
    """
    merged, join_summary = build_merged_stats(traditional, statcast)

    profiles = pd.concat(
        [
            queries.profile_table(traditional).assign(table="traditional"),
            queries.profile_table(statcast).assign(table="statcast"),
            queries.profile_table(merged).assign(table="merged"),
        ],
        ignore_index=True,
    )
    profiles = profiles[["table", "rows", "players", "seasons", "missing_values"]]

    top = queries.top_ops(merged, ops_seasons, top_n)
    pairs = queries.barrel_vs_home_runs(merged)
    whiff_summary = queries.whiff_by_year(merged)

    tables = {
        "top_ops": top,
        "top_ops_by_season": queries.pivot_top_ops(top),
        "mean_rates_by_year": queries.mean_rates_by_year(merged),
        "surname_counts": queries.surname_counts(merged, top_n),
        "whiff_by_year": whiff_summary,
    }
    figures = {
        "barrel_rate_vs_home_runs": charts.barrel_rate_vs_home_runs_chart(pairs),
        "whiff_rate_by_year": charts.whiff_rate_by_year_chart(whiff_summary),
    }
    r = queries.barrel_home_run_correlation(merged)

    report = {
        "title": REPORT_TITLE,
        "join_summary": join_summary,
        "profiles": profiles,
        "merged": merged,
        "tables": tables,
        "figures": figures,
        "barrel_home_run_r": r,
        "ops_seasons": tuple(ops_seasons),
    }
    report["narrative"] = build_narrative(report)
    logger.info("Built report with %d tables and %d figures", len(tables), len(figures))
    return report


# ---------------------------------------------------------------------------
# Narrative
# ---------------------------------------------------------------------------

def _correlation_strength(r: float) -> str:
    size = abs(r)
    if size >= 0.7:
        strength = "strong"
    elif size >= 0.4:
        strength = "moderate"
    elif size >= 0.2:
        strength = "weak"
    else:
        return "essentially no"
    return f"a {strength} {'positive' if r > 0 else 'negative'}"


def _change_phrase(start: float, end: float) -> str:
    if pd.isna(start) or pd.isna(end):
        return "could not be compared"
    if abs(end - start) < 0.05:
        return f"held steady at about {end:.1f}%"
    verb = "rose" if end > start else "fell"
    return f"{verb} from {start:.1f}% to {end:.1f}%"


def build_narrative(report: dict) -> dict[str, list[str]]:
    """Commentary paragraphs derived from the computed tables.

    Returns
    -------
    Dict mapping section key (data, ops, rates, barrels, surnames) to a
    list of plain-text paragraphs.
    """
    summary = report["join_summary"]
    tables = report["tables"]
    seasons_str = " and ".join(str(s) for s in report["ops_seasons"])

    dropped = summary["dropped_by_season"]
    dropped_total = sum(dropped.values())
    if dropped_total:
        dropped_str = ", ".join(f"{n} from {y}" for y, n in sorted(dropped.items()))
        drop_sentence = (
            f"The {dropped_total} traditional rows without a Statcast match "
            f"({dropped_str}) all belong to seasons with no Statcast export."
        )
        if SHORTENED_SEASON in dropped:
            drop_sentence += f" {SHORTENED_SEASON} was the shortened season."
    else:
        drop_sentence = "Every traditional row found a Statcast match."
    narrative = {
        "data": [
            f"The traditional leaderboard holds {summary['traditional_rows']} "
            f"qualified player seasons and the Statcast leaderboard holds "
            f"{summary['statcast_rows']}. Joining on player and season keeps "
            f"{summary['matched_rows']} rows. {drop_sentence}"
        ],
    }

    top = tables["top_ops"]
    if top.empty:
        narrative["ops"] = [f"No qualified batters were found for {seasons_str}."]
    else:
        best = top.iloc[0]
        repeaters = int((top.groupby("player_id").size() > 1).sum())
        paragraph = (
            f"Across {seasons_str}, the best OPS season belongs to {best['name']} "
            f"({int(best['year'])}, {best['ops']:.3f})."
        )
        if repeaters:
            paragraph += (
                f" {repeaters} player{'s' if repeaters != 1 else ''} made the "
                f"top {len(top)} more than once."
            )
        narrative["ops"] = [paragraph]

    rates = tables["mean_rates_by_year"]
    if len(rates) >= 2:
        first, last = rates.iloc[0], rates.iloc[-1]
        narrative["rates"] = [
            f"Between {int(first['year'])} and {int(last['year'])} the mean whiff rate "
            f"{_change_phrase(first['mean_whiff_percent'], last['mean_whiff_percent'])} "
            f"while the mean strikeout rate "
            f"{_change_phrase(first['mean_strikeout_percent'], last['mean_strikeout_percent'])}."
        ]
    else:
        narrative["rates"] = ["Only one season is available, so no trend can be read."]

    r = report["barrel_home_run_r"]
    if r is None:
        narrative["barrels"] = ["Too few paired values to relate barrel rate and home runs."]
    else:
        narrative["barrels"] = [
            f"Barrel rate and home runs show {_correlation_strength(r)} relationship "
            f"(r = {r:.2f}). The trend curve is a local regression, so it follows "
            "any flattening at the extremes rather than forcing a straight line."
        ]

    surnames = tables["surname_counts"]
    if surnames.empty:
        narrative["surnames"] = []
    else:
        top_name = surnames.iloc[0]
        narrative["surnames"] = [
            f"The most common surname is {top_name['last_name']} with "
            f"{int(top_name['count'])} player seasons. A count above the number of "
            "seasons means the name is shared by more than one player."
        ]

    return narrative


# ---------------------------------------------------------------------------
# HTML rendering
# ---------------------------------------------------------------------------

def _table_html(df: pd.DataFrame) -> str:
    display = df.rename(columns={c: COLUMN_LABELS.get(c, c) for c in df.columns if isinstance(c, str)})
    return display.to_html(
        index=False,
        na_rep="",
        float_format=lambda x: f"{x:,.3f}",
        classes="report-table",
        border=0,
    )


def _paragraphs_html(paragraphs: list[str]) -> str:
    return "\n".join(f"<p>{html.escape(p)}</p>" for p in paragraphs)


_STYLE = """
body { font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
       max-width: 960px; margin: 2em auto; color: #222; line-height: 1.5; }
h1 { border-bottom: 3px solid #3498db; padding-bottom: 0.3em; }
h2 { margin-top: 2em; color: #2c3e50; }
.report-table { border-collapse: collapse; margin: 1em 0; font-size: 14px; }
.report-table th, .report-table td { padding: 4px 12px; text-align: right; }
.report-table th { border-bottom: 2px solid #888; }
.report-table tr:nth-child(even) { background: #f6f8fa; }
.caption { color: #888; font-size: 13px; }
"""


def render_html(report: dict) -> str:
    """Render the report dict into a single HTML document."""
    tables = report["tables"]
    narrative = report["narrative"]
    figures = report["figures"]
    seasons_str = " and ".join(str(s) for s in report["ops_seasons"])

    # The whiff chart comes first in the document, so it carries plotly.js
    whiff_html = figures["whiff_rate_by_year"].to_html(
        full_html=False, include_plotlyjs="cdn", config=charts.STATIC_CONFIG,
    )
    scatter_html = figures["barrel_rate_vs_home_runs"].to_html(
        full_html=False, include_plotlyjs=False, config=charts.STATIC_CONFIG,
    )

    sections = [
        f"<h1>{html.escape(report['title'])}</h1>",
        f"<p class='caption'>Generated {datetime.now():%d %B %Y %H:%M}</p>",
        "<h2>The data</h2>",
        _paragraphs_html(narrative["data"]),
        _table_html(report["profiles"]),
        f"<h2>Top OPS seasons, {html.escape(seasons_str)}</h2>",
        _paragraphs_html(narrative["ops"]),
        _table_html(tables["top_ops_by_season"]),
        "<h2>Whiffs and strikeouts by season</h2>",
        _paragraphs_html(narrative["rates"]),
        _table_html(tables["mean_rates_by_year"]),
        whiff_html,
        "<h2>Barrels and home runs</h2>",
        _paragraphs_html(narrative["barrels"]),
        scatter_html,
        "<h2>Most common surnames</h2>",
        _paragraphs_html(narrative["surnames"]),
        _table_html(tables["surname_counts"]),
    ]

    body = "\n".join(sections)
    return (
        "<!DOCTYPE html>\n<html lang='en'>\n<head>\n<meta charset='utf-8'>\n"
        f"<title>{html.escape(report['title'])}</title>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n{body}\n</body>\n</html>\n"
    )


def write_report(report: dict, path: Path) -> Path:
    """Render the report and write it to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(report), encoding="utf-8")
    logger.info("Wrote report to %s", path)
    return path
