"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summary/plot generation, and file output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: summarize_years() and plot_state() entry points, plus the
                ReportGenerator class and generate_reports() convenience
                function for writing CSV summaries and HTML state maps.
"""

from .generators import (
    summarize_years,
    plot_state,
    ReportGenerator,
    generate_reports,
)

__all__ = [
    'summarize_years',
    'plot_state',
    'ReportGenerator',
    'generate_reports',
]
