"""
FARS Analysis Package (Functional Core)

Pure DataFrame transformations: no file I/O, no plotting.

Modules:
- summary:   [MONTH, year] projection and month-by-year counts
- locations: state validation/filtering and sentinel coordinate cleaning
"""

from .summary import month_year_table, summarize_months
from .locations import (
    Coordinate,
    clean_coordinate,
    coordinate_bounds,
    filter_state,
    plottable_points,
    sanitize_coordinates,
    validate_state,
)

__all__ = [
    # Summary
    'month_year_table',
    'summarize_months',
    # Locations
    'Coordinate',
    'clean_coordinate',
    'coordinate_bounds',
    'filter_state',
    'plottable_points',
    'sanitize_coordinates',
    'validate_state',
]
