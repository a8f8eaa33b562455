"""
FARS Data Reader (Imperative Shell)

Locates and reads the yearly ``accident_<year>.csv.bz2`` files.

Package Location: src/fars/data/reader.py

Two styles of multi-year reading are supported:

1. Result objects (read_year_results):
   One ``YearResult`` per requested year carrying either the
   ``[MONTH, year]`` table or the reason the year failed.  Nothing is
   emitted; the caller decides whether to log, collect or abort.

2. Warning facade (fars_read_years):
   One DataFrame-or-``None`` per requested year.  Each failed year emits
   ``UserWarning("invalid year: <year>")`` and a log record, and the
   remaining years are still read.
"""

from __future__ import annotations

import logging
import re
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import month_year_table
from ..config import FILENAME_PATTERN, FarsConfig, resolve_config
from ..exceptions import FarsFileNotFoundError
from ..utils.convert import to_int

log = logging.getLogger(__name__)

_FILENAME_RE = re.compile(r"^accident_(\d{4})\.csv\.bz2$")


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of reading one requested year.

    Attributes:
        year:  The year exactly as requested.
        data:  ``[MONTH, year]`` DataFrame, or ``None`` on failure.
        error: Failure reason, or ``None`` on success.
    """

    year: Any
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API – single files
# ---------------------------------------------------------------------------

def make_filename(year: Any, config: Optional[FarsConfig] = None) -> Path:
    """
    Build the path of the FARS file for *year*.

    Args:
        year: Year as int, float or numeric string (``2013`` and ``"2013"``
            give the same path).
        config: Data-directory configuration; ``FarsConfig.default()`` when
            ``None``.

    Returns:
        ``<data_dir>/accident_<year>.csv.bz2``.  The file may not exist.

    Raises:
        ValueError: If *year* is not numeric.
    """
    cfg = resolve_config(config)
    return cfg.data_dir / FILENAME_PATTERN.format(year=to_int(year, "year"))


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the suffix.  No schema validation is
    applied; every CSV column is returned.

    Args:
        filename: Path to an ``accident_<year>.csv.bz2`` (or plain CSV) file.

    Returns:
        DataFrame with the file's raw columns.

    Raises:
        FarsFileNotFoundError: If *filename* does not exist.
    """
    path = Path(filename)
    if not path.exists():
        raise FarsFileNotFoundError(filename)
    log.debug("Reading FARS file %s", path, extra={"path": str(path)})
    return pd.read_csv(path, low_memory=False)


def available_years(config: Optional[FarsConfig] = None) -> List[int]:
    """
    Return the sorted years that have a data file in the data directory.

    Returns:
        Sorted list of ``int`` years.  Empty list if the directory is
        missing or holds no accident files.
    """
    cfg = resolve_config(config)
    if not cfg.data_dir.is_dir():
        return []
    years = set()
    for path in cfg.data_dir.iterdir():
        match = _FILENAME_RE.match(path.name)
        if match and path.is_file():
            years.add(int(match.group(1)))
    return sorted(years)


# ---------------------------------------------------------------------------
# Public API – multiple years
# ---------------------------------------------------------------------------

def read_year_results(
    years: Union[Any, Iterable[Any]],
    config: Optional[FarsConfig] = None,
) -> List[YearResult]:
    """
    Read several years, projecting each to ``[MONTH, year]``.

    Every year is handled independently: a missing file, a truncated or
    corrupt file, a non-numeric year or a file without ``MONTH`` only
    fails that year's result.

    Args:
        years: A sequence of years, or a single year.
        config: Data-directory configuration.

    Returns:
        One ``YearResult`` per requested year, in request order.
    """
    cfg = resolve_config(config)
    results: List[YearResult] = []
    for year in _as_year_list(years):
        try:
            data = fars_read(make_filename(year, cfg))
            table = month_year_table(data, to_int(year, "year"))
        except Exception as exc:
            results.append(YearResult(year=year, error=str(exc)))
            continue
        results.append(YearResult(year=year, data=table))
    return results


def fars_read_years(
    years: Union[Any, Iterable[Any]],
    config: Optional[FarsConfig] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read several years, warning about each one that cannot be read.

    Args:
        years: A sequence of years, or a single year.
        config: Data-directory configuration.

    Returns:
        One ``[MONTH, year]`` DataFrame per requested year, in request
        order; ``None`` in the slot of every year that failed.

    Warns:
        UserWarning: ``"invalid year: <year>"`` once per failed year.
    """
    out: List[Optional[pd.DataFrame]] = []
    for result in read_year_results(years, config):
        if not result.ok:
            log.warning(
                "invalid year: %s (%s)", result.year, result.error,
                extra={"year": str(result.year)},
            )
            warnings.warn(f"invalid year: {result.year}", UserWarning, stacklevel=2)
        out.append(result.data)
    return out


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    """Wrap a scalar year (int, float, str) in a list; pass sequences through."""
    if isinstance(years, (str, bytes, int, float)):
        return [years]
    if isinstance(years, (pd.Series, pd.Index)):
        return years.tolist()
    try:
        return list(years)
    except TypeError:
        return [years]
