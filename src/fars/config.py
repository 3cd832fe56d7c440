from __future__ import annotations

FILENAME_TEMPLATE = "accident_{year}.csv.bz2"

MONTH_COLUMN = "MONTH"
YEAR_COLUMN = "year"
STATE_COLUMN = "STATE"
LONGITUDE_COLUMN = "LONGITUD"
LATITUDE_COLUMN = "LATITUDE"

YEAR_TABLE_COLUMNS = [MONTH_COLUMN, YEAR_COLUMN]
MAP_REQUIRED_COLUMNS = [STATE_COLUMN, LONGITUDE_COLUMN, LATITUDE_COLUMN]

# coordinates strictly above these thresholds are treated as missing
LONGITUDE_SENTINEL = 900
LATITUDE_SENTINEL = 90

DEFAULT_FIGSIZE = (8, 6)
DEFAULT_DPI = 200
POINT_MARKER = "."
POINT_SIZE = 2
DEGENERATE_PAD = 0.5

# state outlines (lon/lat polygons) looked up next to the accident files
STATE_BOUNDARIES_FILENAME = "us_states.geojson"
