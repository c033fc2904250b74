"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary: Month-by-year accident count pivot
- states:  State selection, sentinel cleaning and coordinate ranges
"""

from .summary import (
    monthly_counts,
)

from .states import (
    InvalidStateError,
    STATE_NAMES,
    state_name,
    select_state,
    clean_coordinates,
    valid_points,
    coordinate_ranges,
)

__all__ = [
    # Summary
    'monthly_counts',
    # States
    'InvalidStateError',
    'STATE_NAMES',
    'state_name',
    'select_state',
    'clean_coordinates',
    'valid_points',
    'coordinate_ranges',
]
