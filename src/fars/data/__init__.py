"""
FARS Data Package (Imperative Shell)

This package handles all file lookup and CSV reading for the FARS
accident files.

Modules:
- reader: filename construction, single-file and multi-year reading
"""

from .reader import (
    YearResult,
    available_years,
    fars_read,
    fars_read_years,
    make_filename,
    read_year_results,
)

__all__ = [
    'YearResult',
    'available_years',
    'fars_read',
    'fars_read_years',
    'make_filename',
    'read_year_results',
]
