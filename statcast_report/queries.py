"""
Aggregate queries over the merged season table — pure functions with no
side effects.

Provides the OPS leaderboard and its season pivot, yearly whiff/strikeout
means, surname and player appearance counts, and the paired series behind
the two report charts. Means skip missing values.
"""

import logging

import numpy as np
import pandas as pd

from .config import OPS_COMPARISON_SEASONS, TOP_N

logger = logging.getLogger(__name__)


def display_name(df: pd.DataFrame) -> pd.Series:
    """Concatenate first and last name into a single display field.

    A missing part is left out rather than rendered as text.
    """
    first = df["first_name"].fillna("").astype(str)
    last = df["last_name"].fillna("").astype(str)
    return first.str.cat(last, sep=" ").str.strip()


def top_ops(
    merged: pd.DataFrame,
    seasons: tuple[int, ...] = OPS_COMPARISON_SEASONS,
    n: int = TOP_N,
) -> pd.DataFrame:
    """Top-n player seasons by OPS within the given seasons.

    Ties keep their merged-table order, so the result is deterministic.

    Returns
    -------
    DataFrame with columns: player_id, name, year, ops
    sorted by ops descending.
    """
    season_df = merged[merged["year"].isin(seasons)]
    if season_df.empty:
        logger.warning("No merged rows for seasons %s", list(seasons))

    top = season_df.sort_values("ops", ascending=False, kind="stable").head(n).copy()
    top["name"] = display_name(top)
    return top[["player_id", "name", "year", "ops"]].reset_index(drop=True)


def pivot_top_ops(top: pd.DataFrame) -> pd.DataFrame:
    """Reshape the OPS leaderboard to one row per player, one column per season.

    Players appear in the order of their best showing in `top`; a season
    where the player did not make the leaderboard is NaN.

    Returns
    -------
    DataFrame with columns: name, <season>, <season>, ...
    """
    if top.empty:
        return pd.DataFrame(columns=["name"])

    names = top.drop_duplicates("player_id").set_index("player_id")["name"]
    wide = top.pivot(index="player_id", columns="year", values="ops").reindex(names.index)
    wide = wide.reindex(columns=sorted(wide.columns))
    wide.columns = [int(c) for c in wide.columns]
    wide.insert(0, "name", names)
    return wide.reset_index(drop=True)


def mean_rates_by_year(merged: pd.DataFrame) -> pd.DataFrame:
    """Mean whiff rate and mean strikeout rate per season.

    Missing values are excluded from each mean rather than counted as zero.

    Returns
    -------
    DataFrame with columns: year, mean_whiff_percent, mean_strikeout_percent
    """
    result = (
        merged.groupby("year")
        .agg(
            mean_whiff_percent=("whiff_percent", "mean"),
            mean_strikeout_percent=("strikeout_percent", "mean"),
        )
        .reset_index()
    )
    return result


def surname_counts(merged: pd.DataFrame, n: int = TOP_N) -> pd.DataFrame:
    """Most frequent last names in the merged table.

    A surname shared by several players can exceed the number of seasons;
    a single player cannot (see appearances_by_player).

    Returns
    -------
    DataFrame with columns: last_name, count
    """
    counts = (
        merged.groupby("last_name")
        .size()
        .rename("count")
        .reset_index()
        .sort_values(["count", "last_name"], ascending=[False, True])
        .head(n)
        .reset_index(drop=True)
    )
    return counts


def appearances_by_player(merged: pd.DataFrame) -> pd.DataFrame:
    """Number of merged seasons per player.

    Returns
    -------
    DataFrame with columns: player_id, name, count
    sorted by count descending.
    """
    df = merged.copy()
    df["name"] = display_name(df)
    result = (
        df.groupby("player_id")
        .agg(name=("name", "last"), count=("year", "size"))
        .reset_index()
        .sort_values(["count", "player_id"], ascending=[False, True])
        .reset_index(drop=True)
    )
    return result


def barrel_vs_home_runs(merged: pd.DataFrame) -> pd.DataFrame:
    """Paired barrel rate and home run values, one row per player season.

    Rows missing either value are dropped.

    Returns
    -------
    DataFrame with columns: name, year, barrel_rate, home_run
    """
    df = merged.dropna(subset=["barrel_rate", "home_run"]).copy()
    df["name"] = display_name(df)
    return df[["name", "year", "barrel_rate", "home_run"]].reset_index(drop=True)


def barrel_home_run_correlation(merged: pd.DataFrame) -> float | None:
    """Pearson correlation of barrel rate and home runs, None if undefined."""
    pairs = barrel_vs_home_runs(merged)
    if len(pairs) < 2:
        return None
    r = pairs["barrel_rate"].corr(pairs["home_run"])
    return None if pd.isna(r) else float(r)


def whiff_by_year(merged: pd.DataFrame) -> pd.DataFrame:
    """Mean whiff rate with its standard error for each season.

    Standard error is the sample standard deviation over sqrt(n), with
    missing values excluded from n. A season with a single value has an
    undefined (NaN) standard error.

    Returns
    -------
    DataFrame with columns: year, mean_whiff_percent, std_error, count
    """
    grouped = merged.groupby("year")["whiff_percent"]
    result = pd.DataFrame({
        "mean_whiff_percent": grouped.mean(),
        "std_dev": grouped.std(ddof=1),
        "count": grouped.count(),
    })
    result["std_error"] = result["std_dev"] / np.sqrt(result["count"].where(result["count"] > 0))
    result = result.reset_index()
    return result[["year", "mean_whiff_percent", "std_error", "count"]]


def profile_table(df: pd.DataFrame) -> pd.DataFrame:
    """One-row summary of a source or merged table.

    Returns
    -------
    DataFrame with columns: rows, players, seasons, missing_values
    """
    missing = df.isna().sum()
    missing = missing[missing > 0]
    missing_str = ", ".join(f"{col}={int(n)}" for col, n in missing.items()) or "none"
    return pd.DataFrame([{
        "rows": len(df),
        "players": df["player_id"].nunique(),
        "seasons": ", ".join(str(y) for y in sorted(df["year"].unique())),
        "missing_values": missing_str,
    }])
