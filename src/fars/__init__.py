"""
FARS - Fatality Analysis Reporting System toolkit

A small Python package for exploring NHTSA FARS accident files using
the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file naming, reading, per-year loading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : summaries, state maps and report files
"""

from .data import build_filename, load_records, load_years, RecordParseError
from .analysis import InvalidStateError
from .reports import summarize_years, plot_state

__version__ = "0.1.0"

__all__ = [
    'build_filename',
    'load_records',
    'load_years',
    'summarize_years',
    'plot_state',
    'RecordParseError',
    'InvalidStateError',
]
