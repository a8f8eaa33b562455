"""
FARS - Fatality Analysis Reporting System helpers

Reads the yearly ``accident_<year>.csv.bz2`` files, summarizes accident
counts per month and year, and maps accident locations for a state.

Structure:
- data/     : Imperative Shell (file lookup and CSV reading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration (map_state, summaries, file output)
"""

from .config import FarsConfig
from .data.reader import (
    available_years,
    fars_read,
    fars_read_years,
    make_filename,
    read_year_results,
)
from .reports.generators import fars_map_state, fars_summarize_years

__version__ = "0.1.0"

__all__ = [
    'FarsConfig',
    'available_years',
    'fars_read',
    'fars_read_years',
    'make_filename',
    'read_year_results',
    'fars_map_state',
    'fars_summarize_years',
]
