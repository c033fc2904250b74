import logging

import pandas as pd
import pytest

from fars.analysis.summary import monthly_counts
from fars.reports import summarize_years


def _tagged(year, months):
    return pd.DataFrame({"MONTH": months, "year": [year] * len(months)})


# ---------------------------------------------------------------------------
# monthly_counts (pure)
# ---------------------------------------------------------------------------

def test_monthly_counts_pivot_shape():
    tables = [_tagged(2014, [1, 1, 2]), _tagged(2013, [2, 3, 3, 3])]
    pivot = monthly_counts(tables)

    assert list(pivot.columns) == [2013, 2014]
    assert pivot.index.name == "MONTH"
    assert list(pivot.index) == [1, 2, 3]
    assert pivot.loc[3, 2013] == 3
    assert pivot.loc[1, 2014] == 2


def test_monthly_counts_missing_pairs_are_na():
    pivot = monthly_counts([_tagged(2013, [1]), _tagged(2014, [2])])

    assert pd.isna(pivot.loc[2, 2013])
    assert pd.isna(pivot.loc[1, 2014])
    assert str(pivot[2013].dtype) == "Int64"


def test_monthly_counts_skips_none():
    pivot = monthly_counts([None, _tagged(2015, [6, 6]), None])

    assert list(pivot.columns) == [2015]
    assert pivot.loc[6, 2015] == 2


def test_monthly_counts_all_failed():
    pivot = monthly_counts([None, None])

    assert pivot.empty
    assert len(pivot) == 0
    assert pivot.index.name == "MONTH"


def test_monthly_counts_requires_columns():
    with pytest.raises(ValueError, match="year"):
        monthly_counts([pd.DataFrame({"MONTH": [1]})])


# ---------------------------------------------------------------------------
# summarize_years (shell)
# ---------------------------------------------------------------------------

def test_summarize_years_counts_match_files(write_year, data_dir, accident_rows):
    for year in (2013, 2014, 2015):
        write_year(year)

    pivot = summarize_years([2015, 2013, 2014], data_dir=data_dir)

    assert list(pivot.columns) == [2013, 2014, 2015]
    # Only the even year has December accidents.
    assert list(pivot.index) == [1, 2, 3, 12]
    assert pd.isna(pivot.loc[12, 2013])
    assert pivot.loc[12, 2014] == 1

    expected_total = sum(len(accident_rows(y)) for y in (2013, 2014, 2015))
    assert int(pivot.sum().sum()) == expected_total

    for year in (2013, 2014, 2015):
        months = pd.Series([r["MONTH"] for r in accident_rows(year)])
        for month, n in months.value_counts().items():
            assert pivot.loc[month, year] == n


def test_summarize_years_with_invalid_year(write_year, data_dir, caplog):
    write_year(2013)
    write_year(2015)

    with caplog.at_level(logging.WARNING, logger="fars"):
        pivot = summarize_years([2013, 2014, 2015], data_dir=data_dir)

    assert list(pivot.columns) == [2013, 2015]
    invalid = [r for r in caplog.records if "invalid year" in r.getMessage()]
    assert len(invalid) == 1
    assert invalid[0].getMessage() == "invalid year: 2014"


def test_summarize_years_nothing_loaded(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        pivot = summarize_years([1990, 1991], data_dir=data_dir)

    assert pivot.empty
    assert len(caplog.records) == 2
