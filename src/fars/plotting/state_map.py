"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects beyond logging.
Input: accident rows already filtered to one state.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Layers:
    1. State boundary – a single-location ``go.Choropleth`` using plotly's
       built-in ``USA-states`` outlines, drawn only when the FARS state
       code has a USPS abbreviation (50 states + DC).
    2. Accident points – one ``go.Scattergeo`` marker per accident whose
       longitude and latitude both survive sentinel cleaning.

The map viewport follows the range of the cleaned coordinates, so the
view frames where the accidents are rather than the whole country.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import (
    LATITUDE_COL,
    LONGITUDE_COL,
    coordinate_bounds,
    plottable_points,
)
from ..utils.convert import to_int

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# FARS STATE codes (FIPS) → USPS abbreviations understood by plotly.
STATE_ABBREVIATIONS: Dict[int, str] = {
    1: 'AL',  2: 'AK',  4: 'AZ',  5: 'AR',  6: 'CA',  8: 'CO',  9: 'CT',
    10: 'DE', 11: 'DC', 12: 'FL', 13: 'GA', 15: 'HI', 16: 'ID', 17: 'IL',
    18: 'IN', 19: 'IA', 20: 'KS', 21: 'KY', 22: 'LA', 23: 'ME', 24: 'MD',
    25: 'MA', 26: 'MI', 27: 'MN', 28: 'MS', 29: 'MO', 30: 'MT', 31: 'NE',
    32: 'NV', 33: 'NH', 34: 'NJ', 35: 'NM', 36: 'NY', 37: 'NC', 38: 'ND',
    39: 'OH', 40: 'OK', 41: 'OR', 42: 'PA', 44: 'RI', 45: 'SC', 46: 'SD',
    47: 'TN', 48: 'TX', 49: 'UT', 50: 'VT', 51: 'VA', 53: 'WA', 54: 'WV',
    55: 'WI', 56: 'WY',
}

_POINT_STYLE = dict(color='black', size=3, opacity=0.8)
_BOUNDARY_COLORSCALE = [[0.0, 'whitesmoke'], [1.0, 'whitesmoke']]

# Degrees added around the data range so edge points are not clipped.
_VIEW_PADDING: float = 0.25


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> Optional[go.Figure]:
    """
    Build the accident-location map for one state and year.

    Args:
        df_state: Raw accident rows for the state, with ``LONGITUD`` and
            ``LATITUDE`` columns (sentinels allowed; they are cleaned here).
        state_num: FARS state number, used for the boundary and title.
        year: Calendar year, used for the title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.  ``None`` (and an INFO log record
        ``"no accidents to plot"``) when *df_state* has no rows.

    Raises:
        MissingColumnsError: If ``LONGITUD`` or ``LATITUDE`` is absent.
    """
    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state_num, "year": year})
        return None

    state = to_int(state_num, "STATE number")
    points = plottable_points(df_state)
    abbr = STATE_ABBREVIATIONS.get(state)

    fig = go.Figure()

    if abbr is not None:
        fig.add_trace(go.Choropleth(
            locations=[abbr],
            z=[1],
            locationmode='USA-states',
            colorscale=_BOUNDARY_COLORSCALE,
            showscale=False,
            marker_line_color='black',
            marker_line_width=1.2,
            hoverinfo='skip',
            name=abbr,
        ))

    fig.add_trace(go.Scattergeo(
        lon=points[LONGITUDE_COL],
        lat=points[LATITUDE_COL],
        mode='markers',
        marker=_POINT_STYLE,
        name='Accident',
        hovertemplate='Lon %{lon:.4f}<br>Lat %{lat:.4f}<extra></extra>',
    ))

    fig.update_geos(**_geo_view(df_state))
    fig.update_layout(
        title=_build_title(state, abbr, year, n_points=len(points), n_rows=len(df_state)),
        showlegend=False,
        margin=dict(l=10, r=10, t=60, b=10),
        template='plotly_white',
    )

    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _geo_view(df_state: pd.DataFrame) -> dict:
    """Geo-axis settings framing the cleaned coordinate range."""
    view = dict(
        projection_type='mercator',
        showland=True,
        landcolor='white',
        showsubunits=True,
        subunitcolor='lightgrey',
        showcountries=True,
        countrycolor='grey',
        showlakes=False,
    )
    bounds = coordinate_bounds(df_state)
    if bounds is None:
        view['fitbounds'] = 'locations'
        return view

    (lon_min, lon_max), (lat_min, lat_max) = bounds
    view['lonaxis_range'] = [lon_min - _VIEW_PADDING, lon_max + _VIEW_PADDING]
    view['lataxis_range'] = [lat_min - _VIEW_PADDING, lat_max + _VIEW_PADDING]
    return view


def _build_title(
    state: int,
    abbr: Optional[str],
    year: int,
    n_points: int,
    n_rows: int,
) -> str:
    location = f'{abbr} (STATE {state})' if abbr else f'STATE {state}'
    title = f'{location} – Fatal Accidents {year}'
    if n_points < n_rows:
        title += f' ({n_points} of {n_rows} located)'
    return title
