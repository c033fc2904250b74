"""Shared fixtures: small synthetic FARS accident files written to tmp_path."""

from pathlib import Path
from typing import Callable, Dict, List, Optional

import pandas as pd
import pytest


def _accident_rows(year: int) -> List[Dict]:
    """Deterministic accident rows for *year*.

    State 5 (Arkansas) has one accident with a sentinel longitude and one
    with a sentinel latitude; state 20 (Kansas) has only valid points.
    """
    rows = [
        # STATE, MONTH, LONGITUD, LATITUDE
        (5, 1, -92.2896, 34.7465),
        (5, 1, -94.1719, 36.0822),
        (5, 2, 999.9999, 35.2010),
        (5, 3, -90.7043, 99.9999),
        (20, 1, -97.3301, 37.6872),
        (20, 2, -95.6890, 39.0473),
        (20, 2, -98.4842, 38.5000),
    ]
    if year % 2 == 0:
        # Even years also have December accidents.
        rows.append((20, 12, -96.5000, 39.1000))
    return [
        {
            "ST_CASE": 10000 + i,
            "STATE": state,
            "MONTH": month,
            "YEAR": year,
            "LONGITUD": lon,
            "LATITUDE": lat,
            "FATALS": 1,
        }
        for i, (state, month, lon, lat) in enumerate(rows)
    ]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty directory for accident files."""
    d = tmp_path / "fars_data"
    d.mkdir()
    return d


@pytest.fixture
def write_year(data_dir: Path) -> Callable[..., Path]:
    """Factory writing ``accident_<year>.csv.bz2`` into ``data_dir``."""

    def _write(year: int, rows: Optional[List[Dict]] = None) -> Path:
        if rows is None:
            rows = _accident_rows(year)
        path = data_dir / f"accident_{year}.csv.bz2"
        pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
        return path

    return _write


@pytest.fixture
def accident_rows() -> Callable[[int], List[Dict]]:
    return _accident_rows
