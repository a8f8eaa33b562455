"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: calls reader.py to fetch DataFrames, the
analysis functions to summarize / filter them, and the plotting functions
to build figures.  Writes CSV / HTML only when asked to.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars import FarsConfig
    from fars.reports.generators import StateMapGenerator, fars_summarize_years

    cfg = FarsConfig.from_path("data/fars")
    fars_summarize_years([2013, 2014, 2015], config=cfg)

    gen = StateMapGenerator(output_dir=Path("reports"), config=cfg)
    gen.generate_for_years(25, [2013, 2014])
    # Writes:
    #   reports/2013/state_25.html
    #   reports/2014/state_25.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import filter_state, validate_state
from ..analysis.summary import summarize_months
from ..config import FarsConfig, resolve_config
from ..data.reader import fars_read, fars_read_years, make_filename
from ..plotting.state_map import plot_state_map
from ..utils.convert import to_int

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

def fars_summarize_years(
    years: Union[Any, Iterable[Any]],
    config: Optional[FarsConfig] = None,
) -> pd.DataFrame:
    """
    Number of accidents per month (rows) and year (columns).

    Years that cannot be read warn (see ``fars_read_years``) and are left
    out of the table.

    Args:
        years: A sequence of years, or a single year.
        config: Data-directory configuration.

    Returns:
        DataFrame indexed by ``MONTH`` with one count column per year.
    """
    return summarize_months(fars_read_years(years, config))


def save_summary(summary: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write a month-by-year summary to CSV, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(out)
    log.info("Summary written to %s", out, extra={"path": str(out)})
    return out


# ---------------------------------------------------------------------------
# State maps
# ---------------------------------------------------------------------------

def fars_map_state(
    state_num: Any,
    year: Any,
    config: Optional[FarsConfig] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state in one year.

    Reads the year's full raw file, checks the state number occurs in it,
    keeps that state's rows and plots them with sentinel coordinates
    removed.

    Args:
        state_num: FARS state number (int or numeric string).
        year: Year (int or numeric string).
        config: Data-directory configuration.
        output_path: When given, the figure is also written there as HTML.
        show: When ``True``, open the figure with ``fig.show()``.

    Returns:
        The figure, or ``None`` when the state has no accidents that year
        (an INFO record ``"no accidents to plot"`` is logged instead).

    Raises:
        FarsFileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_num* does not occur in ``STATE``.
    """
    cfg = resolve_config(config)
    data = fars_read(make_filename(year, cfg))
    state = validate_state(data, state_num)
    df_state = filter_state(data, state)

    fig = plot_state_map(df_state, state, to_int(year, "year"))
    if fig is None:
        return None

    if output_path is not None:
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out), include_plotlyjs='cdn')
        log.info("State map written to %s", out, extra={"path": str(out), "state": state})
    if show:
        fig.show()
    return fig


class StateMapGenerator:
    """
    Generates and saves state accident maps as HTML files.

    Responsibilities
    ----------------
    - Delegate file access to ``reader.py`` (via ``fars_map_state``).
    - Write one ``{output_dir}/{year}/state_{nn}.html`` per year.
    - Keep going when one year fails; the failure is logged.

    Args:
        output_dir: Root directory for map output.
        config: Data-directory configuration.
    """

    def __init__(self, output_dir: Path, config: Optional[FarsConfig] = None) -> None:
        self.output_dir = Path(output_dir)
        self.config = resolve_config(config)

    def output_path(self, state_num: Any, year: Any) -> Path:
        state = to_int(state_num, "STATE number")
        return self.output_dir / str(to_int(year, "year")) / f"state_{state:02d}.html"

    def generate_for_year(self, state_num: Any, year: Any) -> Optional[Path]:
        """
        Write the map for one year.

        Returns:
            Path of the written file, or ``None`` when there was nothing to
            plot.

        Raises:
            FarsFileNotFoundError: If the year's file does not exist.
            InvalidStateError: If *state_num* does not occur that year.
        """
        path = self.output_path(state_num, year)
        fig = fars_map_state(state_num, year, config=self.config, output_path=path)
        return path if fig is not None else None

    def generate_for_years(
        self,
        state_num: Any,
        years: Iterable[Any],
    ) -> Dict[Any, Optional[Path]]:
        """
        Write maps for several years.

        Errors in individual years are caught and logged so that a failure
        in one year does not prevent the others from being saved.

        Returns:
            Mapping of year → written path (``None`` for failed or empty
            years).
        """
        written: Dict[Any, Optional[Path]] = {}
        for year in years:
            try:
                written[year] = self.generate_for_year(state_num, year)
            except Exception as exc:
                log.error(
                    "[%s] State map FAILED: %s", year, exc,
                    extra={"year": str(year), "state": str(state_num)},
                )
                written[year] = None
        return written
