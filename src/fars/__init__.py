"""Load yearly FARS accident files, summarize monthly counts and map them."""
from __future__ import annotations

from .exceptions import (
    FarsError,
    FarsYearWarning,
    InvalidStateError,
    InvalidYearError,
    MissingColumnsError,
)
from .io import fars_read, make_filename
from .transform import (
    YearResult,
    fars_read_years,
    fars_summarize_years,
    load_years,
    summarize_years,
)
from .viz import (
    coordinate_range,
    draw_state_map,
    fars_map_state,
    load_state_boundaries,
    sanitize_coordinates,
)

__version__ = "0.1.0"

__all__ = [
    "FarsError",
    "FarsYearWarning",
    "InvalidStateError",
    "InvalidYearError",
    "MissingColumnsError",
    "YearResult",
    "coordinate_range",
    "draw_state_map",
    "fars_map_state",
    "fars_read",
    "fars_read_years",
    "fars_summarize_years",
    "load_state_boundaries",
    "load_years",
    "make_filename",
    "sanitize_coordinates",
    "summarize_years",
]
