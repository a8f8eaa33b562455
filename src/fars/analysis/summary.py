"""
FARS Monthly Summary (Functional Core)

Pure functions only. No file I/O, no side effects.
Input/output is DataFrames.

Turns per-year accident tables into a month-by-year count table:

    year    2013  2014  2015
    MONTH
    1        2230  2168  2368
    2        1952  1893  1968
    ...

Package Location: src/fars/analysis/summary.py
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from ..exceptions import require_columns

MONTH_COL = "MONTH"
YEAR_COL = "year"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def month_year_table(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Project one year's raw accident table to ``[MONTH, year]``.

    Args:
        df: Raw accident DataFrame; must contain ``MONTH``.
        year: Calendar year stamped on every row.

    Returns:
        New DataFrame with columns ``[MONTH, year]``, one row per accident,
        in the original row order.

    Raises:
        MissingColumnsError: If ``MONTH`` is absent.
    """
    require_columns(df, [MONTH_COL])
    out = df[[MONTH_COL]].copy()
    out[YEAR_COL] = int(year)
    return out.reset_index(drop=True)


def summarize_months(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month and year.

    ``None`` entries (years that could not be read) are skipped and add no
    counts.  Months missing from one year but present in another get 0.

    Args:
        frames: ``[MONTH, year]`` tables as produced by ``month_year_table``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one ``int`` column
        per year (ascending).  Empty, with index name ``MONTH``, when no
        table was supplied.
    """
    tables: List[pd.DataFrame] = [f for f in frames if f is not None]
    if not tables:
        return pd.DataFrame(index=pd.Index([], name=MONTH_COL))

    for table in tables:
        require_columns(table, [MONTH_COL, YEAR_COL])

    stacked = pd.concat(tables, ignore_index=True)
    if stacked.empty:
        return pd.DataFrame(index=pd.Index([], name=MONTH_COL))

    # A blank MONTH is its own group so every row is counted.
    counts = stacked.groupby([YEAR_COL, MONTH_COL], dropna=False).size()
    summary = (
        counts.unstack(YEAR_COL, fill_value=0)
        .sort_index()
        .sort_index(axis=1)
    )
    summary.index.name = MONTH_COL
    summary.columns.name = YEAR_COL
    return summary.astype(int)
