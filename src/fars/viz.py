from __future__ import annotations

import logging
import math
from pathlib import Path

import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd

from .config import (
    DEFAULT_DPI,
    DEFAULT_FIGSIZE,
    DEGENERATE_PAD,
    LATITUDE_COLUMN,
    LATITUDE_SENTINEL,
    LONGITUDE_COLUMN,
    LONGITUDE_SENTINEL,
    MAP_REQUIRED_COLUMNS,
    POINT_MARKER,
    POINT_SIZE,
    STATE_BOUNDARIES_FILENAME,
    STATE_COLUMN,
)
from .exceptions import InvalidStateError
from .io import coerce_int, coerce_year, fars_read, make_filename, resolve_path
from .states import state_name

_logger = logging.getLogger(__name__)


def save_fig(fig, path: Path, dpi: int = DEFAULT_DPI) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight", dpi=dpi)


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with sentinel (or non-numeric) coordinates set to NaN."""
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUDE_COLUMN], errors="coerce")
    lat = pd.to_numeric(out[LATITUDE_COLUMN], errors="coerce")
    out[LONGITUDE_COLUMN] = lon.mask(lon > LONGITUDE_SENTINEL)
    out[LATITUDE_COLUMN] = lat.mask(lat > LATITUDE_SENTINEL)
    return out


def coordinate_range(series: pd.Series) -> tuple[float, float]:
    values = pd.to_numeric(series, errors="coerce").dropna()
    if values.empty:
        return (math.nan, math.nan)
    return (float(values.min()), float(values.max()))


def _axis_limits(lo: float, hi: float) -> tuple[float, float] | None:
    if math.isnan(lo) or math.isnan(hi):
        return None
    if lo == hi:
        return (lo - DEGENERATE_PAD, hi + DEGENERATE_PAD)
    return (lo, hi)


def load_state_boundaries(path: str | Path) -> gpd.GeoDataFrame:
    """Read a state boundary file (GeoJSON, shapefile, zipped shapefile) in lon/lat."""
    boundaries = gpd.read_file(path)
    if boundaries.crs is not None and boundaries.crs.to_epsg() != 4326:
        boundaries = boundaries.to_crs(epsg=4326)
    return boundaries


def _default_basemap(boundaries: str | Path | None, data_dir: str | Path | None):
    if boundaries is not None:
        path = Path(boundaries)
        if not path.exists():
            raise FileNotFoundError(f"file '{boundaries}' does not exist")
        return load_state_boundaries(path)

    path = resolve_path(STATE_BOUNDARIES_FILENAME, data_dir)
    if not path.exists():
        _logger.warning("No state boundary file at %s, drawing the graticule only", path)
        return None
    return load_state_boundaries(path)


def draw_state_map(points: pd.DataFrame, ax=None, title: str | None = None, basemap=None):
    """Draw a base map scaled to the points' extents and plot each point.

    `basemap` is anything with a ``plot(ax=...)`` method, normally the
    GeoDataFrame from `load_state_boundaries`. It is drawn as outlines over a
    lat/long graticule.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)

    xlim = _axis_limits(*coordinate_range(points[LONGITUDE_COLUMN]))
    ylim = _axis_limits(*coordinate_range(points[LATITUDE_COLUMN]))

    ax.grid(True, linestyle=":", linewidth=0.5)
    if basemap is not None:
        basemap.plot(ax=ax, facecolor="none", edgecolor="grey", linewidth=0.5)

    drawable = points.dropna(subset=[LONGITUDE_COLUMN, LATITUDE_COLUMN])
    ax.plot(
        drawable[LONGITUDE_COLUMN],
        drawable[LATITUDE_COLUMN],
        linestyle="none",
        marker=POINT_MARKER,
        markersize=POINT_SIZE,
        color="black",
    )

    if xlim is not None:
        ax.set_xlim(xlim)
    if ylim is not None:
        ax.set_ylim(ylim)
        # rectangular projection: one degree of longitude shrinks with cos(lat)
        scale = math.cos(math.radians(sum(ylim) / 2))
        if scale > 0.01:
            ax.set_aspect(1 / scale, adjustable="box")

    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    if title:
        ax.set_title(title)
    return ax


def select_state(data: pd.DataFrame, state: int) -> pd.DataFrame:
    if state not in set(data[STATE_COLUMN].dropna().unique()):
        raise InvalidStateError(state)
    return data[data[STATE_COLUMN] == state]


def fars_map_state(
    state_code,
    year,
    data_dir: str | Path | None = None,
    ax=None,
    output_file: str | Path | None = None,
    basemap=None,
    boundaries: str | Path | None = None,
):
    """Plot one state's accident locations for `year`.

    State outlines come from `basemap`, else from the `boundaries` file, else
    from ``us_states.geojson`` in `data_dir` when it exists. Returns the Axes
    drawn on, or None when the state has no accidents. Raises
    InvalidStateError if `state_code` never occurs in that year. A figure this
    function creates is closed once saved to `output_file`.
    """
    filename = resolve_path(make_filename(year), data_dir)
    data = fars_read(filename, required=MAP_REQUIRED_COLUMNS)
    state = coerce_int(state_code)

    subset = select_state(data, state)
    if subset.empty:
        _logger.info("no accidents to plot")
        return None

    if basemap is None:
        basemap = _default_basemap(boundaries, data_dir)
    created = ax is None
    if created:
        _, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)

    points = sanitize_coordinates(subset)
    ax = draw_state_map(
        points,
        ax=ax,
        title=f"{state_name(state)} accidents, {coerce_year(year)}",
        basemap=basemap,
    )
    if output_file is not None:
        save_fig(ax.figure, Path(output_file))
        if created:
            plt.close(ax.figure)
    return ax
