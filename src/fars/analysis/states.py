"""
FARS State Selection & Coordinate Cleaning (Functional Core)

Pure functions only. No I/O, no plotting.
Prepares one state's accidents for the state map.

Package Location: src/fars/analysis/states.py

Sentinel Rule:
    FARS encodes an unknown location with out-of-range numbers rather than
    blanks (e.g. LONGITUD 999.9999, LATITUDE 99.9999).  Any LONGITUD > 900
    or LATITUDE > 90 is replaced with NaN before ranges are computed or
    points are drawn, so a single sentinel can never stretch the map extent.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
import pandas as pd

from ..data import schema

# ---------------------------------------------------------------------------
# Sentinel thresholds
# ---------------------------------------------------------------------------

_LONGITUD_SENTINEL: float = 900.0
_LATITUDE_SENTINEL: float = 90.0

# FARS STATE codes (FIPS), used for plot titles.
STATE_NAMES: Dict[int, str] = {
    1: "Alabama",         2: "Alaska",          4: "Arizona",
    5: "Arkansas",        6: "California",      8: "Colorado",
    9: "Connecticut",     10: "Delaware",       11: "District of Columbia",
    12: "Florida",        13: "Georgia",        15: "Hawaii",
    16: "Idaho",          17: "Illinois",       18: "Indiana",
    19: "Iowa",           20: "Kansas",         21: "Kentucky",
    22: "Louisiana",      23: "Maine",          24: "Maryland",
    25: "Massachusetts",  26: "Michigan",       27: "Minnesota",
    28: "Mississippi",    29: "Missouri",       30: "Montana",
    31: "Nebraska",       32: "Nevada",         33: "New Hampshire",
    34: "New Jersey",     35: "New Mexico",     36: "New York",
    37: "North Carolina", 38: "North Dakota",   39: "Ohio",
    40: "Oklahoma",       41: "Oregon",         42: "Pennsylvania",
    43: "Puerto Rico",    44: "Rhode Island",   45: "South Carolina",
    46: "South Dakota",   47: "Tennessee",      48: "Texas",
    49: "Utah",           50: "Vermont",        51: "Virginia",
    52: "Virgin Islands", 53: "Washington",     54: "West Virginia",
    55: "Wisconsin",      56: "Wyoming",
}


class InvalidStateError(ValueError):
    """
    Raised when a STATE code does not occur in the loaded year's data.

    Distinct from a state that exists but has nothing left to plot, which
    is a notice rather than an error.
    """
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_name(state_id: int) -> str:
    """Return the state name for a FARS STATE code, or ``'State <id>'``."""
    return STATE_NAMES.get(int(state_id), f"State {int(state_id)}")


def select_state(df: pd.DataFrame, state_id: int) -> pd.DataFrame:
    """
    Return the accidents recorded in one state.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state_id: FARS STATE code (coerced with ``int()``).

    Returns:
        Copy of the matching rows, original index preserved.

    Raises:
        InvalidStateError: If *state_id* is not among the distinct
            ``STATE`` values of *df*.
    """
    _validate_columns(df, required=[schema.STATE])
    state_id = int(state_id)

    if state_id not in set(df[schema.STATE].unique().tolist()):
        raise InvalidStateError(f"invalid STATE number: {state_id}")

    return df.loc[df[schema.STATE] == state_id].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Longitude and latitude are cleaned independently: a row with a valid
    latitude but sentinel longitude keeps its latitude.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with both columns as float, sentinels set to NaN.
    """
    _validate_columns(df, required=[schema.LONGITUD, schema.LATITUDE])
    out = df.copy()

    lon = out[schema.LONGITUD].astype(float)
    lat = out[schema.LATITUDE].astype(float)

    out[schema.LONGITUD] = lon.where(lon <= _LONGITUD_SENTINEL, np.nan)
    out[schema.LATITUDE] = lat.where(lat <= _LATITUDE_SENTINEL, np.nan)
    return out


def valid_points(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return the rows of a cleaned DataFrame that can be placed on a map.

    Args:
        df: Output of :func:`clean_coordinates`.

    Returns:
        Rows where both ``LONGITUD`` and ``LATITUDE`` are non-null.
    """
    return df.dropna(subset=[schema.LONGITUD, schema.LATITUDE])


def coordinate_ranges(
    df: pd.DataFrame,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Compute the latitude and longitude extent of the mappable accidents.

    Args:
        df: Output of :func:`clean_coordinates`.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``.

    Raises:
        ValueError: If no row has both coordinates.
    """
    points = valid_points(df)
    if points.empty:
        raise ValueError("no valid coordinates to compute a range from")

    lat = points[schema.LATITUDE]
    lon = points[schema.LONGITUD]
    return (
        (float(lat.min()), float(lat.max())),
        (float(lon.min()), float(lon.max())),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

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
            f"accident table is missing required columns: {missing}"
        )
