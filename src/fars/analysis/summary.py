"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the list produced by ``fars.data.reader.load_years``; output is a
month-by-year pivot of accident counts.

Package Location: src/fars/analysis/summary.py
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..data import schema


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def monthly_counts(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per (year, month) and pivot years into columns.

    ``None`` entries (years that failed to load) are skipped.  Only months
    that actually occur in the input become rows; a (year, month) pair with
    no accidents is ``<NA>``, not zero.

    Args:
        tables: Year-tagged DataFrames with columns ``['MONTH', 'year']``,
            possibly interleaved with ``None``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one ``Int64`` column
        per year (ascending).  Returns an empty DataFrame with a ``MONTH``
        index when nothing was loaded.

    Raises:
        ValueError: If a table is missing the ``MONTH`` or ``year`` column.

    Example:
        >>> monthly_counts(load_years([2013, 2014]))
               2013  2014
        MONTH
        1      2230  2168
        2      1952  1893
    """
    frames = [t for t in tables if t is not None]
    for frame in frames:
        _validate_columns(frame, required=schema.YEAR_TAGGED_COLUMNS)

    frames = [f[schema.YEAR_TAGGED_COLUMNS] for f in frames if not f.empty]
    if not frames:
        return _empty_pivot()

    combined = pd.concat(frames, ignore_index=True)

    counts = (
        combined
        .groupby([schema.YEAR, schema.MONTH])
        .size()
        .rename("n")
        .reset_index()
    )

    pivot = (
        counts
        .pivot(index=schema.MONTH, columns=schema.YEAR, values="n")
        .sort_index()
        .sort_index(axis=1)
        .astype("Int64")
    )
    pivot.columns.name = None
    return pivot


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _empty_pivot() -> pd.DataFrame:
    """Return the degenerate pivot used when no year loaded."""
    return pd.DataFrame(index=pd.Index([], dtype="int64", name=schema.MONTH))


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"year table is missing required columns: {missing}"
        )
