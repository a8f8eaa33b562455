"""
FARS Accident Locations (Functional Core)

Pure functions only. No file I/O, no side effects.

State selection and coordinate cleaning for the state map.

Sentinel Coordinate Rule:
    FARS records "location not recorded" with reserved out-of-range
    values instead of blanks (LONGITUD 999.9999, LATITUDE 99.9999).  Any
    LONGITUD above 900 and any LATITUDE above 90 is treated as missing.
    The two columns are cleaned independently; a point is only plottable
    when both survive.

Package Location: src/fars/analysis/locations.py
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from ..exceptions import InvalidStateError, require_columns
from ..utils.convert import to_int

STATE_COL = "STATE"
LONGITUDE_COL = "LONGITUD"
LATITUDE_COL = "LATITUDE"

# Values strictly above these are FARS sentinels, not coordinates.
LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class Coordinate(NamedTuple):
    longitude: float
    latitude: float


# ---------------------------------------------------------------------------
# Public API – states
# ---------------------------------------------------------------------------

def validate_state(df: pd.DataFrame, state_num: Any) -> int:
    """
    Coerce *state_num* to ``int`` and check it occurs in ``STATE``.

    Args:
        df: Raw accident DataFrame for one year.
        state_num: State number as int, float or numeric string.

    Returns:
        The state number as ``int``.

    Raises:
        ValueError: If *state_num* is not numeric.
        InvalidStateError: If no row of *df* carries that state number.
        MissingColumnsError: If ``STATE`` is absent.
    """
    require_columns(df, [STATE_COL])
    state = to_int(state_num, "STATE number")
    if not (_state_codes(df) == state).any():
        raise InvalidStateError(state)
    return state


def filter_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """Return a copy of the rows of *df* whose ``STATE`` equals *state_num*."""
    require_columns(df, [STATE_COL])
    state = to_int(state_num, "STATE number")
    return df.loc[_state_codes(df) == state].copy()


# ---------------------------------------------------------------------------
# Public API – coordinates
# ---------------------------------------------------------------------------

def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel ``LONGITUD`` / ``LATITUDE`` values with NaN.

    Non-numeric cells also become NaN.  All other columns are untouched.

    Returns:
        A new DataFrame; *df* is not modified.
    """
    require_columns(df, [LONGITUDE_COL, LATITUDE_COL])
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUDE_COL], errors="coerce")
    lat = pd.to_numeric(out[LATITUDE_COL], errors="coerce")
    out[LONGITUDE_COL] = lon.mask(lon > LONGITUDE_SENTINEL)
    out[LATITUDE_COL] = lat.mask(lat > LATITUDE_SENTINEL)
    return out


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of *df* whose longitude and latitude are both valid after cleaning."""
    cleaned = sanitize_coordinates(df)
    return cleaned.dropna(subset=[LONGITUDE_COL, LATITUDE_COL])


def clean_coordinate(longitude: Any, latitude: Any) -> Optional[Coordinate]:
    """
    Normalize one raw coordinate pair.

    Returns:
        ``Coordinate`` when both values are numeric and not sentinels,
        otherwise ``None``.
    """
    lon = _to_float(longitude)
    lat = _to_float(latitude)
    if lon is None or lat is None:
        return None
    if lon > LONGITUDE_SENTINEL or lat > LATITUDE_SENTINEL:
        return None
    return Coordinate(lon, lat)


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Range of the non-missing cleaned coordinates.

    Longitude and latitude ranges are taken separately, ignoring NaN, so a
    row with only one valid coordinate still widens that axis.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))`` or ``None`` when either
        column has no valid value.
    """
    cleaned = sanitize_coordinates(df)
    lon = cleaned[LONGITUDE_COL].dropna()
    lat = cleaned[LATITUDE_COL].dropna()
    if lon.empty or lat.empty:
        return None
    return (float(lon.min()), float(lon.max())), (float(lat.min()), float(lat.max()))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _state_codes(df: pd.DataFrame) -> pd.Series:
    return pd.to_numeric(df[STATE_COL], errors="coerce")


def _to_float(x) -> Optional[float]:
    if x is None:
        return None
    try:
        value = float(x)
    except (TypeError, ValueError):
        return None
    if np.isnan(value):
        return None
    return value

