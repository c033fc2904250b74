"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves the data directory, calls the reader to
fetch DataFrames, calls the functional core and plotting functions, and
optionally writes the results to disk.

No parsing or analysis logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports import summarize_years, plot_state

    summarize_years(range(2013, 2016), data_dir="data")
    plot_state(5, 2013, data_dir="data", show=True)

    from fars.reports import ReportGenerator

    gen = ReportGenerator(data_dir="data", output_dir="reports")
    gen.generate_summary([2013, 2014, 2015])
    gen.generate_state_maps([5, 20], 2015)
    # Writes:
    #   reports/monthly_summary_2013-2015.csv
    #   reports/State_5_2015.html
    #   reports/State_20_2015.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import clean_coordinates, select_state, valid_points
from ..analysis.summary import monthly_counts
from ..data import reader
from ..plotting.state_map import plot_state_map
from ..utils.paths import resolve_data_dir

logger = logging.getLogger(__name__)

_NO_DATA_MESSAGE = "no accidents to plot"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_years(
    years: Iterable[Union[int, float, str]],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents by month for each requested year.

    Years whose file is missing or unreadable are logged as
    ``"invalid year: <year>"`` and left out of the result.

    Args:
        years: Years to summarise.
        data_dir: Directory holding the accident files.

    Returns:
        DataFrame indexed by ``MONTH`` with one column per loaded year.
        Empty when no year could be loaded.
    """
    return monthly_counts(reader.load_years(years, data_dir))


def plot_state(
    state_id: Union[int, float, str],
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    The whole year's file is read (not the reduced summary projection),
    the rows are filtered to *state_id*, sentinel coordinates are dropped
    and the remaining points are drawn on a base map.

    When the state has no mappable accident, ``"no accidents to plot"`` is
    logged at INFO level and nothing is drawn.  This is not an error.

    Args:
        state_id: FARS STATE code (coerced with ``int()``).
        year: Data year (coerced with ``int()``).
        data_dir: Directory holding the accident files.
        output_path: When given, the figure is also written there as HTML.
        show: When ``True``, call ``fig.show()`` on the configured renderer.

    Returns:
        The rendered figure, or ``None`` when there was nothing to plot.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        RecordParseError: If the year's file cannot be parsed.
        InvalidStateError: If *state_id* does not occur in that year.
    """
    state_id = int(state_id)
    year = int(year)

    path = resolve_data_dir(data_dir) / reader.build_filename(year)
    records = reader.load_records(path)

    df_state = select_state(records, state_id)
    if df_state.empty:
        logger.info(_NO_DATA_MESSAGE, extra={"state_id": state_id, "year": year})
        return None

    df_state = clean_coordinates(df_state)
    if valid_points(df_state).empty:
        logger.info(_NO_DATA_MESSAGE, extra={"state_id": state_id, "year": year})
        return None

    fig = plot_state_map(df_state, state_id=state_id, year=year)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        logger.info(f"State map saved → {output_path}")

    if show:
        fig.show()

    return fig


class ReportGenerator:
    """
    Generates and saves FARS summary tables and state maps.

    Responsibilities
    ----------------
    - Resolve the data directory once.
    - Delegate all file reading to ``reader.py``.
    - Call pure analysis / plotting functions from the functional core.
    - Write CSV summaries and HTML maps into ``output_dir``.

    Args:
        data_dir: Directory holding the ``accident_<YYYY>.csv.bz2`` files.
        output_dir: Directory for generated reports.  Created on demand.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]],
        output_dir: Union[str, Path],
    ) -> None:
        self.data_dir = resolve_data_dir(data_dir)
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate_summary(self, years: Iterable[Union[int, float, str]]) -> Path:
        """
        Write the month-by-year accident counts to CSV.

        Args:
            years: Years to summarise.

        Returns:
            Path of the written ``monthly_summary_<first>-<last>.csv``.
        """
        years = [int(y) for y in years]
        summary = summarize_years(years, data_dir=self.data_dir)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / _summary_filename(years)
        summary.to_csv(out_path)
        logger.info(
            f"Summary saved → {out_path}",
            extra={"years": years, "rows": len(summary)},
        )
        return out_path

    def generate_state_map(
        self,
        state_id: Union[int, float, str],
        year: Union[int, float, str],
    ) -> Optional[Path]:
        """
        Write one state's accident map to HTML.

        Args:
            state_id: FARS STATE code.
            year: Data year.

        Returns:
            Path of the written ``State_<id>_<year>.html``, or ``None``
            when the state had nothing to plot.

        Raises:
            FileNotFoundError, RecordParseError, InvalidStateError: As
            raised by :func:`plot_state`.
        """
        out_path = self.output_dir / f"State_{int(state_id)}_{int(year)}.html"
        fig = plot_state(
            state_id, year, data_dir=self.data_dir, output_path=out_path
        )
        return out_path if fig is not None else None

    def generate_state_maps(
        self,
        state_ids: Iterable[Union[int, float, str]],
        year: Union[int, float, str],
    ) -> Dict[int, Optional[Path]]:
        """
        Write maps for several states of the same year.

        Errors in individual states are caught and logged so that a
        failure in one map does not prevent the others from being saved.

        Args:
            state_ids: FARS STATE codes.
            year: Data year.

        Returns:
            Mapping of state code to written path.  States that failed or
            had nothing to plot map to ``None``.
        """
        written: Dict[int, Optional[Path]] = {}
        for state_id in state_ids:
            state_id = int(state_id)
            try:
                written[state_id] = self.generate_state_map(state_id, year)
            except Exception:
                logger.exception(
                    f"State {state_id} map FAILED",
                    extra={"state_id": state_id, "year": int(year)},
                )
                written[state_id] = None
        return written


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _summary_filename(years: List[int]) -> str:
    """Return ``monthly_summary_<min>-<max>.csv`` (``_none`` when empty)."""
    if not years:
        return "monthly_summary_none.csv"
    return f"monthly_summary_{min(years)}-{max(years)}.csv"


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def generate_reports(
    data_dir: Optional[Union[str, Path]],
    output_dir: Union[str, Path],
    years: Iterable[Union[int, float, str]],
    state_ids: Iterable[Union[int, float, str]] = (),
) -> Dict[str, object]:
    """
    Convenience function: write the summary plus state maps for every year.

    Args:
        data_dir: Directory holding the accident files.
        output_dir: Root output directory.
        years: Years to summarise and map.
        state_ids: STATE codes to map for each year.

    Returns:
        ``{"summary": Path, "maps": {year: {state_id: Path | None}}}``.

    Example::

        from fars.reports import generate_reports

        generate_reports(
            data_dir="data",
            output_dir="reports",
            years=[2013, 2014, 2015],
            state_ids=[5, 20],
        )
    """
    gen = ReportGenerator(data_dir=data_dir, output_dir=output_dir)
    years = [int(y) for y in years]
    state_ids = [int(s) for s in state_ids]

    summary_path = gen.generate_summary(years)
    maps = {year: gen.generate_state_maps(state_ids, year) for year in years}
    return {"summary": summary_path, "maps": maps}
