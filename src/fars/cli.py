"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years                                 List years with a data file
    fars summarize YEAR [YEAR ...] [--output]  Accidents per month and year
    fars map STATE YEAR [--output] [--show]    Map one state's accidents

Every subcommand accepts ``--data-dir`` to point at a directory of
``accident_<year>.csv.bz2`` files; otherwise ``$FARS_DATA_DIR`` or the
package's bundled ``extdata/`` directory is used.

The package must be installed (``pip install -e .``) for the ``fars``
entry point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path
from typing import List, Optional

from .config import DATA_DIR_ENV, FarsConfig
from .data.reader import available_years
from .exceptions import FarsError
from .reports.generators import fars_map_state, fars_summarize_years, save_summary
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


def _config_from_args(args: argparse.Namespace) -> FarsConfig:
    """Build the data-directory configuration for a subcommand.

    Args:
        args: Parsed CLI arguments.  Optional field: ``args.data_dir``.

    Returns:
        ``FarsConfig`` for ``--data-dir`` when given, else the default.
    """
    if args.data_dir:
        cfg = FarsConfig.from_path(args.data_dir)
        if not cfg.data_dir.is_dir():
            _die(f"Data directory not found: {cfg.data_dir}")
        return cfg
    return FarsConfig.default()


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print the years that have an accident file, one per line."""
    cfg = _config_from_args(args)
    years = available_years(cfg)
    if not years:
        _die(f"No accident_<year>.csv.bz2 files found in {cfg.data_dir}")
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month-by-year accident counts.

    Unreadable years are reported through the ``fars`` logger and left out
    of the table; the matching Python warnings are silenced.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    cfg = _config_from_args(args)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        summary = fars_summarize_years(args.years, config=cfg)

    if summary.empty:
        _die("None of the requested years could be read.")

    print(summary.to_string())
    if args.output:
        out = save_summary(summary, args.output)
        print(f"\nSaved: {out}")


def handle_map(args: argparse.Namespace) -> None:
    """Build the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    cfg = _config_from_args(args)
    if not args.output and not args.show:
        _die("Nothing to do: pass --output FILE.html and/or --show.")
    try:
        fig = fars_map_state(
            args.state, args.year, config=cfg,
            output_path=args.output, show=args.show,
        )
    except (FarsError, ValueError) as exc:
        _die(str(exc))
        return

    if fig is None:
        print("no accidents to plot")
    elif args.output:
        print(f"Saved: {Path(args.output)}")


# ===========================================================================
# Parser
# ===========================================================================

def _add_data_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Directory holding accident_<year>.csv.bz2 files "
            f"(default: ${DATA_DIR_ENV} or the bundled extdata/)."
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summaries and state maps of FARS fatal-accident files.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        help="List the years that have an accident file.",
    )
    _add_data_dir(p_years)
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Print a table with one row per MONTH and one column per year.\n\n"
            "Years without a data file are reported as warnings and skipped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "years",
        nargs="+",
        metavar="YEAR",
        help="One or more years, e.g. 2013 2014 2015.",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Also write the table to this CSV file.",
    )
    _add_data_dir(p_sum)
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map the accidents of one state in one year.",
    )
    p_map.add_argument("state", metavar="STATE", help="FARS state number, e.g. 25.")
    p_map.add_argument("year", metavar="YEAR", help="Year, e.g. 2014.")
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Write the map to this HTML file.",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in a browser.",
    )
    _add_data_dir(p_map)
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
