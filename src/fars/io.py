from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Iterable

import pandas as pd

from .config import FILENAME_TEMPLATE
from .exceptions import InvalidYearError, MissingColumnsError

_logger = logging.getLogger(__name__)


def coerce_int(value) -> int:
    """Coerce an int, float or numeric string to a whole number, truncating floats."""
    try:
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"cannot coerce {value!r} to an integer") from exc


def coerce_year(year) -> int:
    try:
        return coerce_int(year)
    except ValueError as exc:
        raise InvalidYearError(year) from exc


def make_filename(year) -> str:
    """Return the data filename for `year`, e.g. ``accident_2015.csv.bz2``."""
    return FILENAME_TEMPLATE.format(year=coerce_year(year))


def resolve_path(filename: str | Path, data_dir: str | Path | None = None) -> Path:
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def fars_read(filename: str | Path, required: Iterable[str] | None = None) -> pd.DataFrame:
    """Read one accident file into a DataFrame.

    Raises FileNotFoundError if `filename` does not exist and
    MissingColumnsError if any of `required` is absent from the header.
    Parser warnings are discarded; parser errors propagate.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    _logger.debug("Reading %s", path)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        df = pd.read_csv(path, compression="infer", low_memory=False)

    if required is not None:
        missing = set(required) - set(df.columns)
        if missing:
            raise MissingColumnsError(str(filename), missing)

    _logger.debug("Loaded %d rows from %s", len(df), path)
    return df
