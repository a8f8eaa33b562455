"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O.  Every public function accepts
DataFrames and returns a ``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state and year over the
               state boundary.
"""

from .state_map import STATE_ABBREVIATIONS, plot_state_map

__all__ = [
    'STATE_ABBREVIATIONS',
    'plot_state_map',
]
