"""
FARS Data Reader (Imperative Shell)

Locates and reads the yearly FARS accident files
(``accident_<YYYY>.csv.bz2``) and assembles the year-tagged tables used by
the monthly summary.

Package Location: src/fars/data/reader.py

Failure policy:
    ``load_records`` always raises: ``FileNotFoundError`` when the file is
    absent, ``RecordParseError`` when it cannot be decompressed or parsed.
    ``load_years`` is the only place where those failures are downgraded,
    to a logged warning and a ``None`` slot, so that one bad year never
    aborts a multi-year batch.  Nothing is retried.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Union

import pandas as pd

from . import schema
from ..utils.paths import resolve_data_dir

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

_FILENAME_PATTERN: str = "accident_{year:d}.csv.bz2"


class RecordParseError(ValueError):
    """
    Raised when an accident file exists but cannot be read.

    Raised when:
    - bz2 decompression fails (corrupt or truncated stream)
    - The CSV is empty or malformed
    - A required column is missing or holds non-numeric values
    """
    pass


class YearLoad(NamedTuple):
    """Outcome of loading one year: either ``data`` or ``error`` is set."""

    year: int
    data: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_filename(year: Union[int, float, str]) -> str:
    """
    Return the FARS accident file name for *year*.

    The year is coerced with ``int()``, so fractional years are truncated
    (``2015.9`` -> ``2015``), never rounded.

    Example:
        >>> build_filename(2015)
        'accident_2015.csv.bz2'
    """
    return _FILENAME_PATTERN.format(year=int(year))


def load_records(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a bz2-compressed FARS accident CSV into a DataFrame.

    The existence check happens before any decompression is attempted.
    Parser diagnostics (mixed-dtype warnings) are suppressed.  The
    ``STATE``, ``MONTH``, ``LONGITUD`` and ``LATITUDE`` columns are cast to
    their schema dtypes; every other column is returned as pandas parsed it.

    Args:
        path: Path to an ``accident_<YYYY>.csv.bz2`` file.

    Returns:
        DataFrame with one row per accident.

    Raises:
        FileNotFoundError: If *path* does not exist.  The message includes
            the path.
        RecordParseError: If the file cannot be decompressed or parsed, or
            lacks a required column.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.DtypeWarning)
            df = pd.read_csv(path, compression="bz2", encoding="utf-8")
    except (
        OSError,
        EOFError,
        UnicodeDecodeError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
    ) as exc:
        raise RecordParseError(f"Failed to parse '{path}': {exc}") from exc

    return _apply_schema(df, path)


def read_year(
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]] = None,
) -> YearLoad:
    """
    Load one year's accidents reduced to the ``MONTH`` / ``year`` columns.

    Never raises for a missing or unreadable file; the exception is
    captured on the returned :class:`YearLoad` instead.

    Args:
        year: Four-digit year (coerced with ``int()``).
        data_dir: Directory holding the accident files.  See
            :func:`~fars.utils.paths.resolve_data_dir`.

    Returns:
        ``YearLoad`` with ``data`` on success or ``error`` on failure.
    """
    year = int(year)
    path = resolve_data_dir(data_dir) / build_filename(year)

    try:
        records = load_records(path)
    except (FileNotFoundError, RecordParseError) as exc:
        return YearLoad(year=year, error=exc)

    tagged = records.assign(**{schema.YEAR: year})
    return YearLoad(year=year, data=tagged[schema.YEAR_TAGGED_COLUMNS])


def load_years(
    years: Iterable[Union[int, float, str]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load several years of accidents for the monthly summary.

    Returns one slot per requested year, in input order.  A year whose
    file is missing or unreadable logs ``"invalid year: <year>"`` at
    WARNING level and yields ``None`` in its slot; the remaining years are
    still loaded.

    Args:
        years: Years to load, e.g. ``range(2013, 2016)``.
        data_dir: Directory holding the accident files.

    Returns:
        List of DataFrames with exactly the columns ``['MONTH', 'year']``,
        or ``None`` for years that failed to load.

    Example:
        >>> frames = load_years([2013, 2014, 2015], data_dir="data")
        >>> [f is None for f in frames]
        [False, False, False]
    """
    data_dir = resolve_data_dir(data_dir)
    results = [read_year(year, data_dir) for year in years]

    frames: List[Optional[pd.DataFrame]] = []
    for result in results:
        if result.ok:
            frames.append(result.data)
            continue
        logger.warning(
            f"invalid year: {result.year}",
            extra={"year": result.year, "reason": str(result.error)},
        )
        frames.append(None)

    return frames


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _apply_schema(df: pd.DataFrame, path: Path) -> pd.DataFrame:
    """
    Cast the inspected columns to their schema dtypes.

    Args:
        df: Freshly parsed accident DataFrame.
        path: Source path, used in error messages only.

    Returns:
        The same DataFrame with ``STATE``/``MONTH`` as int64 and
        ``LONGITUD``/``LATITUDE`` as float64.

    Raises:
        RecordParseError: If a required column is absent or not numeric.
    """
    missing = [c for c in schema.REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise RecordParseError(
            f"'{path}' is missing required columns: {missing}"
        )

    try:
        return df.astype(schema.ACCIDENT_DTYPES)
    except (TypeError, ValueError) as exc:
        raise RecordParseError(
            f"'{path}' has invalid values in {schema.REQUIRED_COLUMNS}: {exc}"
        ) from exc
