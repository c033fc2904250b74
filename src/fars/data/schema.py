"""
FARS Accident Schema

Column names and dtypes for the fields the toolkit inspects.  Every other
column in an accident file is passed through untouched.

Package Location: src/fars/data/schema.py
"""

from typing import Dict, List

STATE: str = "STATE"
MONTH: str = "MONTH"
LONGITUD: str = "LONGITUD"
LATITUDE: str = "LATITUDE"

# Injected by load_years; not present in the raw files.
YEAR: str = "year"

ACCIDENT_DTYPES: Dict[str, str] = {
    STATE:    "int64",
    MONTH:    "int64",
    LONGITUD: "float64",
    LATITUDE: "float64",
}

REQUIRED_COLUMNS: List[str] = list(ACCIDENT_DTYPES)

# Columns kept by load_years for the monthly summary.
YEAR_TAGGED_COLUMNS: List[str] = [MONTH, YEAR]
