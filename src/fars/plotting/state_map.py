"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accidents with sentinel coordinates already cleaned.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    A ``Scattergeo`` trace on a Mercator projection with country and state
    boundaries drawn.  The visible extent is the accidents' own latitude /
    longitude range plus a small pad, so the map zooms onto the state.
    Rows with a missing coordinate are never drawn.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import coordinate_ranges, state_name, valid_points
from ..data import schema

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

# Degrees added on each side of the accident extent.
_RANGE_PAD = 0.25

_MARKER_COLOR = "red"
_MARKER_SIZE  = 4

_LAND_COLOR     = "rgb(243, 243, 243)"
_BORDER_COLOR   = "rgb(120, 120, 120)"
_SUBUNIT_COLOR  = "rgb(160, 160, 160)"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_id: int,
    year: Optional[int] = None,
) -> go.Figure:
    """
    Build a scatter map of one state's accidents.

    Args:
        df_state: Output of :func:`~fars.analysis.states.clean_coordinates`
            for a single state, with columns ``LONGITUD`` and ``LATITUDE``.
        state_id: FARS STATE code, used for the title.
        year: Data year, used for the title when given.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If *df_state* has no row with both coordinates.
    """
    (lat_min, lat_max), (lon_min, lon_max) = coordinate_ranges(df_state)
    points = valid_points(df_state)

    fig = go.Figure(
        go.Scattergeo(
            lon=points[schema.LONGITUD].tolist(),
            lat=points[schema.LATITUDE].tolist(),
            mode="markers",
            marker=dict(color=_MARKER_COLOR, size=_MARKER_SIZE),
            name="Accident",
            hovertemplate="Lat: %{lat:.4f}<br>Lon: %{lon:.4f}<extra></extra>",
        )
    )

    fig.update_geos(
        projection_type="mercator",
        resolution=50,
        showland=True,
        landcolor=_LAND_COLOR,
        showcountries=True,
        countrycolor=_BORDER_COLOR,
        showsubunits=True,
        subunitcolor=_SUBUNIT_COLOR,
        showlakes=True,
        lataxis_range=[lat_min - _RANGE_PAD, lat_max + _RANGE_PAD],
        lonaxis_range=[lon_min - _RANGE_PAD, lon_max + _RANGE_PAD],
    )

    fig.update_layout(
        title=_build_title(state_id, year, n_points=len(points)),
        showlegend=False,
        margin=dict(l=10, r=10, t=60, b=10),
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _build_title(state_id: int, year: Optional[int], n_points: int) -> str:
    """
    Construct the map title.

    Format: ``"{state name} ({id}) -- FARS Accidents {year} (n={points})"``;
    the year is omitted when not supplied.
    """
    label = f"{state_name(state_id)} ({int(state_id)}) -- FARS Accidents"
    if year is not None:
        label = f"{label} {int(year)}"
    return f"{label} (n={n_points})"
