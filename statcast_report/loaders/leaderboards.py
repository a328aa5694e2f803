"""
Loaders for the two qualified-batter leaderboard exports.

Both files share the same quirks:
    - The first header cell reads 'last_name, first_name' (or carries a
      BOM) although the column holds surnames only.
    - A trailing delimiter on every line yields an 'Unnamed: N' column.
    - Empty cells mark stats that were not recorded.

Traditional board: player_id, year, home_run, strikeout_percent,
    batting_average, slugging_percent, on_base_percent
Statcast board: player_id, year, barrel_rate, whiff_percent
"""

import logging

import numpy as np
import pandas as pd

from ..config import (
    KEY_COLUMNS,
    STATCAST_COLUMNS,
    STATCAST_STAT_COLUMNS,
    TRADITIONAL_COLUMNS,
    TRADITIONAL_STAT_COLUMNS,
)
from ..validation import (
    SchemaError,
    check_numeric_columns,
    check_required_columns,
    check_unique_keys,
)
from .utils import clean_columns, coerce_numeric

logger = logging.getLogger(__name__)


def _read_leaderboard(path: str, columns: list[str], stat_columns: list[str], source: str) -> pd.DataFrame:
    try:
        raw = pd.read_csv(path, encoding="utf-8-sig", skipinitialspace=True)
    except (FileNotFoundError, pd.errors.ParserError, pd.errors.EmptyDataError):
        logger.exception("Failed to read %s file: %s", source, path)
        raise

    df = clean_columns(raw)
    check_required_columns(df, columns, source)

    df = coerce_numeric(df, KEY_COLUMNS + stat_columns, source)
    check_numeric_columns(df, KEY_COLUMNS + stat_columns, source)

    if df[KEY_COLUMNS].isna().any().any():
        raise SchemaError(f"{source}: blank player_id or year in {path}")
    df[KEY_COLUMNS] = df[KEY_COLUMNS].astype("int64")

    for col in ("last_name", "first_name"):
        names = df[col].astype("string").str.strip()
        # Blank names stay missing instead of becoming the text "nan"
        df[col] = names.astype(object).where(names.ne("").fillna(False), np.nan)

    check_unique_keys(df, source)

    extra = [c for c in df.columns if c not in columns]
    if extra:
        logger.warning("%s: ignoring unexpected columns %s", source, extra)

    return df[columns].reset_index(drop=True)


def load_traditional_stats(path: str) -> pd.DataFrame:
    """Load the traditional batting leaderboard.

    Assumptions
    -----------
    - One row per qualified batter per season, six seasons including the
      shortened season.
    - (player_id, year) is unique; verified here.

    Returns
    -------
    DataFrame with columns:
        last_name, first_name, player_id, year, home_run, strikeout_percent,
        batting_average, slugging_percent, on_base_percent
    """
    df = _read_leaderboard(path, TRADITIONAL_COLUMNS, TRADITIONAL_STAT_COLUMNS, "traditional")
    logger.info(
        "Loaded %d traditional rows (%d players, seasons %s) from %s",
        len(df), df["player_id"].nunique(), sorted(df["year"].unique().tolist()), path,
    )
    return df


def load_statcast_stats(path: str) -> pd.DataFrame:
    """Load the Statcast batted-ball leaderboard.

    Assumptions
    -----------
    - One row per qualified batter per season, five seasons (no
      shortened-season export).
    - (player_id, year) is unique; verified here.

    Returns
    -------
    DataFrame with columns:
        last_name, first_name, player_id, year, barrel_rate, whiff_percent
    """
    df = _read_leaderboard(path, STATCAST_COLUMNS, STATCAST_STAT_COLUMNS, "statcast")
    logger.info(
        "Loaded %d Statcast rows (%d players, seasons %s) from %s",
        len(df), df["player_id"].nunique(), sorted(df["year"].unique().tolist()), path,
    )
    return df
