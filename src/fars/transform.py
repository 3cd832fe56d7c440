from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .config import MONTH_COLUMN, YEAR_COLUMN, YEAR_TABLE_COLUMNS
from .exceptions import FarsYearWarning
from .io import coerce_year, fars_read, make_filename, resolve_path

_logger = logging.getLogger(__name__)

# Everything a single year's load can raise: missing file, bz2 corruption or
# truncation, parse errors, bad year values and missing columns.
YEAR_LOAD_ERRORS = (OSError, EOFError, ValueError, TypeError, KeyError)


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one year: a MONTH/year table or the error that stopped it."""

    year: object
    table: pd.DataFrame | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _as_year_list(years) -> list:
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)


def read_year(year, data_dir: str | Path | None = None) -> pd.DataFrame:
    """Load one year and project it down to its MONTH and year columns."""
    value = coerce_year(year)
    path = resolve_path(make_filename(value), data_dir)
    df = fars_read(path, required=[MONTH_COLUMN])
    return df.assign(**{YEAR_COLUMN: value})[YEAR_TABLE_COLUMNS]


def load_years(years, data_dir: str | Path | None = None) -> list[YearResult]:
    results = []
    for year in _as_year_list(years):
        try:
            table = read_year(year, data_dir)
        except YEAR_LOAD_ERRORS as exc:
            _logger.warning("Skipping year %r: %s", year, exc)
            results.append(YearResult(year=year, error=exc))
        else:
            results.append(YearResult(year=year, table=table))
    return results


def fars_read_years(years, data_dir: str | Path | None = None) -> list[pd.DataFrame | None]:
    """Load several years, warning about (and leaving None for) any that fail."""
    tables = []
    for result in load_years(years, data_dir):
        if not result.ok:
            warnings.warn(f"invalid year: {result.year}", FarsYearWarning, stacklevel=2)
        tables.append(result.table)
    return tables


def _empty_summary() -> pd.DataFrame:
    return pd.DataFrame(columns=[MONTH_COLUMN])


def summarize_years(tables: Iterable[pd.DataFrame | None]) -> pd.DataFrame:
    """Count rows per MONTH (rows) and year (columns).

    Month/year pairs with no rows are <NA>, not 0.
    """
    frames = [t for t in tables if t is not None]
    if not frames:
        return _empty_summary()

    counts = pd.concat(frames, ignore_index=True).groupby([YEAR_COLUMN, MONTH_COLUMN]).size()
    if counts.empty:
        return _empty_summary()

    wide = (
        counts.unstack(YEAR_COLUMN)
        .sort_index()
        .sort_index(axis=1)
        .astype("Int64")
    )
    wide.columns.name = None
    return wide.reset_index()


def fars_summarize_years(years, data_dir: str | Path | None = None) -> pd.DataFrame:
    return summarize_years(fars_read_years(years, data_dir))
