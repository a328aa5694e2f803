"""
Shared utilities for data ingestion: header cleanup, index-column removal,
numeric coercion.
"""

import logging
import re

import pandas as pd

from ..validation import SchemaError

logger = logging.getLogger(__name__)

_UNNAMED_PATTERN = r"^Unnamed:"


def to_snake_case(name: str) -> str:
    """Convert a column name to snake_case.

    Handles spaces, parentheses, slashes, and percent signs.
    """
    s = str(name).strip()
    # Replace common symbols
    s = s.replace("%", "percent").replace("/", "_per_").replace("(", "").replace(")", "")
    s = s.replace("-", "_").replace(".", "_")
    # Collapse whitespace and special chars to underscores
    s = re.sub(r"[^a-zA-Z0-9]+", "_", s)
    # CamelCase to snake_case
    s = re.sub(r"([a-z])([A-Z])", r"\1_\2", s)
    s = s.lower().strip("_")
    return re.sub(r"_+", "_", s)


def drop_unnamed_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Drop index columns left behind by a trailing delimiter or to_csv.

    Matches pandas' 'Unnamed: N' placeholder headers and a literal 'index'.
    """
    labels = df.columns.astype(str)
    stray = df.columns[labels.str.match(_UNNAMED_PATTERN) | (labels.str.lower() == "index")]
    if len(stray) > 0:
        logger.debug("Dropping stray index columns %s", list(stray))
        df = df.drop(columns=list(stray))
    return df


def rename_first_column(df: pd.DataFrame, name: str = "last_name") -> pd.DataFrame:
    """Rename the first column, whatever its raw label.

    The leaderboard exports label the surname column with a combined
    'last_name, first_name' header; the values are surnames only.
    """
    if df.columns.empty:
        raise SchemaError("Cannot rename first column of a table with no columns")
    original = df.columns[0]
    if original != name:
        logger.debug("Renaming first column %r -> %r", original, name)
    return df.rename(columns={original: name})


def clean_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Apply the header cleanup shared by both leaderboard files."""
    df = drop_unnamed_columns(df)
    df = rename_first_column(df)
    df.columns = [to_snake_case(c) for c in df.columns]
    return df


def coerce_numeric(df: pd.DataFrame, columns: list[str], source: str) -> pd.DataFrame:
    """Cast columns to numeric dtype.

    Blank cells become NaN. Any other non-numeric text raises SchemaError.
    """
    df = df.copy()
    for col in columns:
        values = df[col]
        if not pd.api.types.is_numeric_dtype(values):
            stripped = values.str.strip()
            values = stripped.where(stripped != "")
        try:
            df[col] = pd.to_numeric(values)
        except (ValueError, TypeError) as exc:
            raise SchemaError(f"{source}: column '{col}' is not numeric ({exc})") from exc
    return df
