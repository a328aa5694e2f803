"""
Data checks applied between loading and joining.

Each check raises a ReportDataError subclass describing the offending
columns or keys. Callers do not recover; a failed check ends the run.
"""

import logging

import pandas as pd

from .config import KEY_COLUMNS

logger = logging.getLogger(__name__)


class ReportDataError(ValueError):
    """Base class for source data that cannot produce a report."""


class SchemaError(ReportDataError):
    """Expected columns are absent or hold values of the wrong type."""


class DuplicateKeyError(ReportDataError):
    """A (player_id, year) key appears more than once in one source table."""


class JoinCoverageError(ReportDataError):
    """The join dropped rows other than the expected shortened-season rows."""


def _format_keys(keys: pd.DataFrame, limit: int = 5) -> str:
    shown = [
        f"({row.player_id}, {row.year})"
        for row in keys.head(limit).itertuples(index=False)
    ]
    more = len(keys) - len(shown)
    if more > 0:
        shown.append(f"... and {more} more")
    return ", ".join(shown)


def check_required_columns(df: pd.DataFrame, required: list[str], source: str) -> None:
    """Raise SchemaError listing any required column missing from df."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise SchemaError(
            f"{source}: missing required columns {missing}. "
            f"Columns present: {df.columns.tolist()}"
        )


def check_numeric_columns(df: pd.DataFrame, columns: list[str], source: str) -> None:
    """Raise SchemaError if any column is not numeric.

    Missing values are allowed; text that cannot be read as a number is not.
    """
    bad = [c for c in columns if not pd.api.types.is_numeric_dtype(df[c])]
    if bad:
        raise SchemaError(f"{source}: non-numeric values in columns {bad}")


def check_unique_keys(df: pd.DataFrame, source: str, keys: list[str] | None = None) -> None:
    """Raise DuplicateKeyError if the composite key repeats within df."""
    keys = keys or KEY_COLUMNS
    dupes = df.loc[df.duplicated(subset=keys, keep=False), keys].drop_duplicates()
    if not dupes.empty:
        raise DuplicateKeyError(
            f"{source}: {len(dupes)} duplicated {tuple(keys)} keys: "
            f"{_format_keys(dupes)}"
        )
    logger.debug("%s: %d unique %s keys", source, len(df), tuple(keys))


def check_join_coverage(
    traditional: pd.DataFrame,
    statcast: pd.DataFrame,
    expected_dropped_seasons: tuple[int, ...],
) -> dict:
    """Confirm the inner join only discards the expected seasons.

    Every Statcast key must have a traditional counterpart, and every
    traditional key without a Statcast counterpart must belong to one of
    `expected_dropped_seasons`.

    Returns
    -------
    Dict with structure:
    {
        "traditional_rows": 816,
        "statcast_rows": 674,
        "matched_rows": 674,
        "dropped_by_season": {2020: 142},
    }
    """
    keyed = traditional[KEY_COLUMNS].merge(
        statcast[KEY_COLUMNS],
        on=KEY_COLUMNS,
        how="outer",
        indicator=True,
    )

    statcast_only = keyed.loc[keyed["_merge"] == "right_only", KEY_COLUMNS]
    if not statcast_only.empty:
        raise JoinCoverageError(
            f"{len(statcast_only)} Statcast rows have no traditional counterpart: "
            f"{_format_keys(statcast_only)}"
        )

    traditional_only = keyed.loc[keyed["_merge"] == "left_only", KEY_COLUMNS]
    unexpected = traditional_only[~traditional_only["year"].isin(expected_dropped_seasons)]
    if not unexpected.empty:
        raise JoinCoverageError(
            f"{len(unexpected)} traditional rows outside seasons "
            f"{list(expected_dropped_seasons)} have no Statcast counterpart: "
            f"{_format_keys(unexpected)}"
        )

    dropped = traditional_only.groupby("year").size()
    summary = {
        "traditional_rows": len(traditional),
        "statcast_rows": len(statcast),
        "matched_rows": int((keyed["_merge"] == "both").sum()),
        "dropped_by_season": {int(y): int(n) for y, n in dropped.items()},
    }
    logger.info(
        "Join coverage OK: %d matched, dropped %s",
        summary["matched_rows"], summary["dropped_by_season"] or "nothing",
    )
    return summary
