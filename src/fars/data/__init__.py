"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the toolkit.

Modules:
- schema: Column names and dtypes of the inspected accident fields
- reader: File naming, bz2 CSV reading and per-year loading
"""

from .reader import (
    RecordParseError,
    YearLoad,
    build_filename,
    load_records,
    read_year,
    load_years,
)

__all__ = [
    'RecordParseError',
    'YearLoad',
    'build_filename',
    'load_records',
    'read_year',
    'load_years',
]
