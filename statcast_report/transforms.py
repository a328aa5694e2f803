"""
Data transforms: join the two leaderboards into the merged season table
and derive OPS.
"""

import logging

import pandas as pd

from .config import KEY_COLUMNS, NAME_COLUMNS, SHORTENED_SEASON
from .validation import check_join_coverage

logger = logging.getLogger(__name__)


def add_ops(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of df with ops = on_base_percent + slugging_percent."""
    out = df.copy()
    out["ops"] = out["on_base_percent"] + out["slugging_percent"]
    return out


def build_merged_stats(
    traditional: pd.DataFrame,
    statcast: pd.DataFrame,
    expected_dropped_seasons: tuple[int, ...] = (SHORTENED_SEASON,),
) -> tuple[pd.DataFrame, dict]:
    """Inner-join the traditional and Statcast leaderboards.

    The Statcast name columns are dropped before joining so the merged
    table carries a single first_name/last_name pair. Keys present in only
    one source are excluded; check_join_coverage first confirms those are
    confined to `expected_dropped_seasons`.

    Parameters
    ----------
    traditional : From load_traditional_stats().
    statcast : From load_statcast_stats().
    expected_dropped_seasons : Seasons whose traditional rows may lack a
        Statcast counterpart.

    Returns
    -------
    (merged, join_summary) where merged has the traditional columns,
    barrel_rate, whiff_percent and ops, and join_summary is the dict from
    check_join_coverage().
    """
    summary = check_join_coverage(traditional, statcast, expected_dropped_seasons)

    statcast_stats = statcast.drop(columns=NAME_COLUMNS)
    merged = traditional.merge(
        statcast_stats,
        on=KEY_COLUMNS,
        how="inner",
        validate="one_to_one",
    )
    merged = add_ops(merged)
    merged = merged.sort_values(KEY_COLUMNS, ignore_index=True)

    logger.info(
        "Built merged stats with %d rows from %d traditional / %d Statcast rows",
        len(merged), len(traditional), len(statcast),
    )
    return merged, summary
